from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_customer_repo import ICustomerRepo
from src.service.matchday.app.interface.i_seat_inventory_command_repo import (
    ISeatInventoryCommandRepo,
)


class AssignTicketCustomerUseCase:
    def __init__(
        self,
        seat_inventory_command_repo: ISeatInventoryCommandRepo,
        customer_repo: ICustomerRepo,
    ) -> None:
        self.seat_inventory_command_repo = seat_inventory_command_repo
        self.customer_repo = customer_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_inventory_command_repo: ISeatInventoryCommandRepo = Depends(
            Provide[Container.seat_inventory_command_repo]
        ),
        customer_repo: ICustomerRepo = Depends(Provide[Container.customer_repo]),
    ) -> Self:
        return cls(
            seat_inventory_command_repo=seat_inventory_command_repo, customer_repo=customer_repo
        )

    @Logger.io
    async def assign(self, *, ticket_id: int, customer_id: Optional[int]) -> None:
        """Set or clear the ticket's customer; status is left as it is."""
        if customer_id is not None:
            customer = await self.customer_repo.get_by_id(customer_id=customer_id)
            if customer is None:
                raise NotFoundError(f'Customer not found: {customer_id}')

        updated = await self.seat_inventory_command_repo.assign_customer(
            ticket_id=ticket_id, customer_id=customer_id
        )
        if not updated:
            raise NotFoundError(f'Ticket not found: {ticket_id}')
