"""
Seat Inventory Query Repository Implementation - CQRS Read Side
"""

from typing import AsyncContextManager, Callable, List

from sqlalchemy import and_, case, func, literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_seat_inventory_query_repo import (
    ISeatInventoryQueryRepo,
)
from src.service.matchday.domain.entity.customer_entity import format_display_name
from src.service.matchday.domain.entity.section_availability_entity import (
    GENERAL_ADMISSION,
    SectionAvailabilityEntity,
)
from src.service.matchday.domain.entity.ticket_entity import TicketEntity
from src.service.matchday.domain.entity.ticket_sales_overview_entity import (
    TicketSalesOverviewEntity,
)
from src.service.matchday.domain.enum.ticket_status import TicketStatus
from src.service.matchday.driven_adapter.model.customer_model import CustomerModel
from src.service.matchday.driven_adapter.model.game_model import GameModel
from src.service.matchday.driven_adapter.model.seat_model import SeatModel
from src.service.matchday.driven_adapter.model.ticket_model import TicketModel


def _count_status(status_expr, status: TicketStatus):  # type: ignore[no-untyped-def]
    return func.coalesce(func.sum(case((status_expr == status.value, 1), else_=0)), 0)


class SeatInventoryQueryRepoImpl(ISeatInventoryQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def list_tickets_for_game(self, *, game_id: int) -> List[TicketEntity]:
        stmt = (
            select(TicketModel, SeatModel, CustomerModel.first_name, CustomerModel.last_name)
            .join(SeatModel, SeatModel.id == TicketModel.seat_id)
            .outerjoin(CustomerModel, CustomerModel.id == TicketModel.customer_id)
            .where(TicketModel.game_id == game_id)
            .order_by(
                SeatModel.section.asc().nulls_last(),
                SeatModel.row.asc().nulls_last(),
                SeatModel.number.asc().nulls_last(),
                TicketModel.id.asc(),
            )
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = result.all()

        return [
            TicketEntity(
                id=ticket.id,
                game_id=ticket.game_id,
                seat_id=ticket.seat_id,
                price=ticket.price,
                status=TicketStatus(ticket.status),
                customer_id=ticket.customer_id,
                purchased_at=ticket.purchased_at,
                section=seat.section,
                row=seat.row,
                number=seat.number,
                seat_type=seat.seat_type,
                customer_name=format_display_name(first_name, last_name),
                created_at=ticket.created_at,
                updated_at=ticket.updated_at,
            )
            for ticket, seat, first_name, last_name in rows
        ]

    @Logger.io
    async def list_available_ticket_ids(self, *, game_id: int, limit: int) -> List[int]:
        stmt = (
            select(TicketModel.id)
            .where(
                TicketModel.game_id == game_id,
                TicketModel.status == TicketStatus.AVAILABLE.value,
            )
            .order_by(TicketModel.id.asc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    @Logger.io
    async def get_section_availability(self, *, game_id: int) -> List[SectionAvailabilityEntity]:
        # Literal constants keep the SELECT and GROUP BY expressions identical for PostgreSQL
        section_label = func.coalesce(
            func.nullif(func.trim(SeatModel.section), literal_column("''")),
            literal_column(f"'{GENERAL_ADMISSION}'"),
        )
        # No ticket row for the game means the seat has never been touched
        ticket_status = func.coalesce(TicketModel.status, TicketStatus.AVAILABLE.value)

        stmt = (
            select(
                section_label.label('section'),
                func.count(SeatModel.id).label('total_seats'),
                _count_status(ticket_status, TicketStatus.AVAILABLE).label('available_seats'),
                _count_status(ticket_status, TicketStatus.RESERVED).label('reserved_seats'),
                _count_status(ticket_status, TicketStatus.SOLD).label('sold_seats'),
            )
            .select_from(SeatModel)
            .join(GameModel, GameModel.venue_id == SeatModel.venue_id)
            .outerjoin(
                TicketModel,
                and_(TicketModel.seat_id == SeatModel.id, TicketModel.game_id == GameModel.id),
            )
            .where(GameModel.id == game_id)
            .group_by(section_label)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = result.all()

        sections = [
            SectionAvailabilityEntity(
                section=row.section,
                total_seats=int(row.total_seats),
                available_seats=int(row.available_seats),
                reserved_seats=int(row.reserved_seats),
                sold_seats=int(row.sold_seats),
            )
            for row in rows
        ]
        # Sorted here so ordering does not depend on the database collation
        return sorted(sections, key=lambda section: section.section)

    @Logger.io
    async def get_ticket_sales_overview(self) -> TicketSalesOverviewEntity:
        stmt = select(
            func.count(TicketModel.id).label('total_tickets'),
            _count_status(TicketModel.status, TicketStatus.SOLD).label('sold_tickets'),
            _count_status(TicketModel.status, TicketStatus.RESERVED).label('reserved_tickets'),
            _count_status(TicketModel.status, TicketStatus.AVAILABLE).label('available_tickets'),
            func.coalesce(
                func.sum(
                    case((TicketModel.status == TicketStatus.SOLD.value, TicketModel.price), else_=0)
                ),
                0,
            ).label('revenue'),
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            row = result.one()

        return TicketSalesOverviewEntity(
            total_tickets=int(row.total_tickets),
            sold_tickets=int(row.sold_tickets),
            reserved_tickets=int(row.reserved_tickets),
            available_tickets=int(row.available_tickets),
            revenue=int(row.revenue),
        )
