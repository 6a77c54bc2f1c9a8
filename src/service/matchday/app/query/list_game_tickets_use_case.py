from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_seat_inventory_query_repo import (
    ISeatInventoryQueryRepo,
)
from src.service.matchday.domain.entity.ticket_entity import TicketEntity


class ListGameTicketsUseCase:
    def __init__(self, seat_inventory_query_repo: ISeatInventoryQueryRepo) -> None:
        self.seat_inventory_query_repo = seat_inventory_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_inventory_query_repo: ISeatInventoryQueryRepo = Depends(
            Provide[Container.seat_inventory_query_repo]
        ),
    ) -> Self:
        return cls(seat_inventory_query_repo=seat_inventory_query_repo)

    @Logger.io(truncate_content=True)
    async def list_tickets(self, *, game_id: int) -> List[TicketEntity]:
        return await self.seat_inventory_query_repo.list_tickets_for_game(game_id=game_id)
