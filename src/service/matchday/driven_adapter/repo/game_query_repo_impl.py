from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_game_query_repo import IGameQueryRepo
from src.service.matchday.domain.entity.game_entity import GameEntity
from src.service.matchday.driven_adapter.model.game_model import GameModel
from src.service.matchday.driven_adapter.model.venue_model import VenueModel


class GameQueryRepoImpl(IGameQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @staticmethod
    def _game_with_venue() -> Select:
        return select(GameModel, VenueModel.name, VenueModel.slug, VenueModel.location).join(
            VenueModel, VenueModel.id == GameModel.venue_id
        )

    @Logger.io
    async def get_by_id(self, *, game_id: int) -> Optional[GameEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._game_with_venue().where(GameModel.id == game_id)
            )
            row = result.first()

        if row is None:
            return None
        return self._row_to_entity(*row)

    @Logger.io
    async def list_games(self) -> List[GameEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._game_with_venue().order_by(GameModel.starts_at.asc(), GameModel.id.asc())
            )
            rows = result.all()

        return [self._row_to_entity(*row) for row in rows]

    @staticmethod
    def _row_to_entity(
        game: GameModel,
        venue_name: Optional[str],
        venue_slug: Optional[str],
        venue_location: Optional[str],
    ) -> GameEntity:
        return GameEntity(
            id=game.id,
            venue_id=game.venue_id,
            opponent=game.opponent,
            starts_at=game.starts_at,
            status=game.status,
            description=game.description,
            venue_name=venue_name,
            venue_slug=venue_slug,
            venue_location=venue_location,
            created_at=game.created_at,
            updated_at=game.updated_at,
        )
