"""
Seat Inventory Command Repository Implementation - CQRS Write Side

Each write is a single UPDATE/INSERT committed in its own short transaction.
The reservation update carries a status guard in its WHERE clause, so the
database decides which of two concurrent requests gets a ticket.
"""

from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import and_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import IntegrityViolationError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_seat_inventory_command_repo import (
    ISeatInventoryCommandRepo,
)
from src.service.matchday.domain.enum.ticket_status import TicketStatus
from src.service.matchday.driven_adapter.model.game_model import GameModel
from src.service.matchday.driven_adapter.model.seat_model import SeatModel
from src.service.matchday.driven_adapter.model.ticket_model import TicketModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SeatInventoryCommandRepoImpl(ISeatInventoryCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    async def _execute_update(self, stmt) -> int:  # type: ignore[no-untyped-def]
        async with self.session_factory() as session:
            result = await session.execute(stmt.execution_options(synchronize_session=False))
            await session.commit()
            return result.rowcount

    @Logger.io
    async def set_ticket_status(
        self, *, ticket_id: int, status: TicketStatus, purchased_at: Optional[datetime] = None
    ) -> bool:
        if status is TicketStatus.SOLD:
            purchased_at = purchased_at or _utcnow()
        else:
            purchased_at = None

        stmt = (
            update(TicketModel)
            .where(TicketModel.id == ticket_id)
            .values(status=status.value, purchased_at=purchased_at, updated_at=_utcnow())
        )
        return await self._execute_update(stmt) == 1

    @Logger.io
    async def assign_customer(self, *, ticket_id: int, customer_id: Optional[int]) -> bool:
        stmt = (
            update(TicketModel)
            .where(TicketModel.id == ticket_id)
            .values(customer_id=customer_id, updated_at=_utcnow())
        )
        try:
            return await self._execute_update(stmt) == 1
        except IntegrityError as e:
            # Foreign key on customer_id: the customer was removed after the lookup
            raise NotFoundError(f'Customer not found: {customer_id}') from e

    @Logger.io
    async def reserve_ticket_if_available(self, *, ticket_id: int, customer_id: int) -> bool:
        stmt = (
            update(TicketModel)
            .where(
                TicketModel.id == ticket_id,
                TicketModel.status == TicketStatus.AVAILABLE.value,
            )
            .values(
                status=TicketStatus.RESERVED.value,
                customer_id=customer_id,
                purchased_at=None,
                updated_at=_utcnow(),
            )
        )
        return await self._execute_update(stmt) == 1

    @Logger.io
    async def create_missing_tickets(self, *, game_id: int, price: int) -> int:
        seats_without_ticket = (
            select(SeatModel.id)
            .join(GameModel, GameModel.venue_id == SeatModel.venue_id)
            .outerjoin(
                TicketModel,
                and_(TicketModel.seat_id == SeatModel.id, TicketModel.game_id == GameModel.id),
            )
            .where(GameModel.id == game_id, TicketModel.id.is_(None))
            .order_by(SeatModel.id.asc())
        )

        async with self.session_factory() as session:
            seat_ids = list((await session.execute(seats_without_ticket)).scalars().all())
            session.add_all(
                TicketModel(
                    game_id=game_id,
                    seat_id=seat_id,
                    price=price,
                    status=TicketStatus.AVAILABLE.value,
                )
                for seat_id in seat_ids
            )
            try:
                await session.commit()
            except IntegrityError as e:
                # uq_ticket_game_seat: another request materialised the same seats first
                await session.rollback()
                raise IntegrityViolationError(
                    f'Tickets for game {game_id} were created concurrently, retry the request'
                ) from e

        Logger.base.info(f'🎟️ [INVENTORY] Created {len(seat_ids)} tickets for game {game_id}')
        return len(seat_ids)
