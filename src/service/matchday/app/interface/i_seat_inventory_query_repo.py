"""
Seat Inventory Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.matchday.domain.entity.section_availability_entity import (
    SectionAvailabilityEntity,
)
from src.service.matchday.domain.entity.ticket_entity import TicketEntity
from src.service.matchday.domain.entity.ticket_sales_overview_entity import (
    TicketSalesOverviewEntity,
)


class ISeatInventoryQueryRepo(ABC):
    @abstractmethod
    async def list_tickets_for_game(self, *, game_id: int) -> List[TicketEntity]:
        """Tickets of a game joined with seat fields, ordered by section, row, number."""
        pass

    @abstractmethod
    async def list_available_ticket_ids(self, *, game_id: int, limit: int) -> List[int]:
        """Ids of tickets currently available for the game, ascending."""
        pass

    @abstractmethod
    async def get_section_availability(self, *, game_id: int) -> List[SectionAvailabilityEntity]:
        """
        Per-section seat counts for a game

        Every seat of the game's venue is counted; a seat with no ticket row for
        the game counts as available. Sections are ordered by label.
        """
        pass

    @abstractmethod
    async def get_ticket_sales_overview(self) -> TicketSalesOverviewEntity:
        pass
