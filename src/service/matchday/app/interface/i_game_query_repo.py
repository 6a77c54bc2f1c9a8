from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.matchday.domain.entity.game_entity import GameEntity


class IGameQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, game_id: int) -> Optional[GameEntity]:
        pass

    @abstractmethod
    async def list_games(self) -> List[GameEntity]:
        """All games with venue fields, ordered by kick-off."""
        pass
