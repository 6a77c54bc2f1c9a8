from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_game_query_repo import IGameQueryRepo
from src.service.matchday.domain.entity.game_entity import GameEntity


class GetGameUseCase:
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
    async def get_by_id(self, *, game_id: int) -> Optional[GameEntity]:
        game = await self.game_query_repo.get_by_id(game_id=game_id)
        if game is None:
            Logger.base.warning(f'⚠️ [GET_GAME] Game {game_id} not found')
        return game
