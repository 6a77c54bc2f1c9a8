from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_seat_inventory_command_repo import (
    ISeatInventoryCommandRepo,
)
from src.service.matchday.domain.enum.ticket_status import TicketStatus


class UpdateTicketStatusUseCase:
    def __init__(self, seat_inventory_command_repo: ISeatInventoryCommandRepo) -> None:
        self.seat_inventory_command_repo = seat_inventory_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_inventory_command_repo: ISeatInventoryCommandRepo = Depends(
            Provide[Container.seat_inventory_command_repo]
        ),
    ) -> Self:
        return cls(seat_inventory_command_repo=seat_inventory_command_repo)

    @Logger.io
    async def update_status(
        self, *, ticket_id: int, status: Optional[str], purchased_at: Optional[datetime] = None
    ) -> None:
        if not status or not status.strip():
            raise ValidationError('Ticket status is required')
        try:
            ticket_status = TicketStatus(status.strip().lower())
        except ValueError as e:
            allowed = ', '.join(s.value for s in TicketStatus)
            raise ValidationError(
                f'Invalid ticket status: {status}. Expected one of: {allowed}'
            ) from e

        updated = await self.seat_inventory_command_repo.set_ticket_status(
            ticket_id=ticket_id, status=ticket_status, purchased_at=purchased_at
        )
        if not updated:
            raise NotFoundError(f'Ticket not found: {ticket_id}')

        Logger.base.info(f'🏷️ [TICKET] Ticket {ticket_id} set to {ticket_status.value}')
