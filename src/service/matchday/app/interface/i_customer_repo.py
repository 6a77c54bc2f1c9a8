from abc import ABC, abstractmethod
from typing import Optional

from src.service.matchday.domain.entity.customer_entity import CustomerEntity


class ICustomerRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, customer_id: int) -> Optional[CustomerEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        """Look up by normalized email."""
        pass

    @abstractmethod
    async def create_if_absent(self, *, customer: CustomerEntity) -> Optional[CustomerEntity]:
        """
        Insert a customer

        Returns None when the email is already taken (unique constraint), so the
        caller can fetch and merge instead.
        """
        pass

    @abstractmethod
    async def update_contact(self, *, customer_id: int, changes: dict[str, str]) -> CustomerEntity:
        pass
