from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_game_query_repo import IGameQueryRepo
from src.service.matchday.domain.entity.game_entity import GameEntity


class ListGamesUseCase:
    def __init__(self, game_query_repo: IGameQueryRepo) -> None:
        self.game_query_repo = game_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        game_query_repo: IGameQueryRepo = Depends(Provide[Container.game_query_repo]),
    ) -> Self:
        return cls(game_query_repo=game_query_repo)

    @Logger.io
    async def list_games(self) -> List[GameEntity]:
        return await self.game_query_repo.list_games()
