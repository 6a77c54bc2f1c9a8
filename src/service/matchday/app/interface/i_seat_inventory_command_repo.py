"""
Seat Inventory Command Repository Interface - CQRS Write Side

Every method touches ticket rows only and commits its own short transaction.
Methods returning ``bool`` report whether a row was affected; callers decide
whether a miss is a NotFound or a lost race.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.service.matchday.domain.enum.ticket_status import TicketStatus


class ISeatInventoryCommandRepo(ABC):
    @abstractmethod
    async def set_ticket_status(
        self, *, ticket_id: int, status: TicketStatus, purchased_at: Optional[datetime] = None
    ) -> bool:
        """Set status; purchased_at is kept only for sold tickets and cleared otherwise."""
        pass

    @abstractmethod
    async def assign_customer(self, *, ticket_id: int, customer_id: Optional[int]) -> bool:
        """Set or clear the customer reference without touching status."""
        pass

    @abstractmethod
    async def reserve_ticket_if_available(self, *, ticket_id: int, customer_id: int) -> bool:
        """
        Atomically move one ticket from available to reserved for a customer.

        Returns False when the ticket was no longer available (lost race).
        """
        pass

    @abstractmethod
    async def create_missing_tickets(self, *, game_id: int, price: int) -> int:
        """Create an available ticket for every venue seat lacking one for the game."""
        pass
