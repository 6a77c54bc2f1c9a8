from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_game_query_repo import IGameQueryRepo
from src.service.matchday.app.interface.i_seat_inventory_command_repo import (
    ISeatInventoryCommandRepo,
)


class MaterializeGameTicketsUseCase:
    """
    Create the missing ticket rows of a game.

    Seats without a ticket count as available in the availability view but cannot
    be reserved until a ticket row exists. Running this again only fills new gaps.
    """

    def __init__(
        self,
        game_query_repo: IGameQueryRepo,
        seat_inventory_command_repo: ISeatInventoryCommandRepo,
    ) -> None:
        self.game_query_repo = game_query_repo
        self.seat_inventory_command_repo = seat_inventory_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        game_query_repo: IGameQueryRepo = Depends(Provide[Container.game_query_repo]),
        seat_inventory_command_repo: ISeatInventoryCommandRepo = Depends(
            Provide[Container.seat_inventory_command_repo]
        ),
    ) -> Self:
        return cls(
            game_query_repo=game_query_repo,
            seat_inventory_command_repo=seat_inventory_command_repo,
        )

    @Logger.io
    async def materialize(self, *, game_id: int, price: int) -> int:
        if price < 0:
            raise ValidationError('Ticket price cannot be negative')

        if await self.game_query_repo.get_by_id(game_id=game_id) is None:
            raise NotFoundError(f'Game not found: {game_id}')

        return await self.seat_inventory_command_repo.create_missing_tickets(
            game_id=game_id, price=price
        )
