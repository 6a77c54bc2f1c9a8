from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.interface.i_seat_inventory_query_repo import (
    ISeatInventoryQueryRepo,
)
from src.service.matchday.domain.entity.section_availability_entity import (
    GameSeatSummary,
    SectionAvailabilityEntity,
)


class GetSectionAvailabilityUseCase:
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

    @Logger.io
    async def get_sections(self, *, game_id: int) -> List[SectionAvailabilityEntity]:
        return await self.seat_inventory_query_repo.get_section_availability(game_id=game_id)

    @Logger.io
    async def get_sections_with_summary(
        self, *, game_id: int
    ) -> tuple[List[SectionAvailabilityEntity], GameSeatSummary]:
        sections = await self.get_sections(game_id=game_id)
        return sections, GameSeatSummary.from_sections(sections)
