from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import IntegrityViolationError, ValidationError
from src.service.matchday.app.command.upsert_customer_use_case import UpsertCustomerUseCase
from src.service.matchday.domain.entity.customer_entity import CustomerEntity


pytestmark = pytest.mark.unit


class TestUpsertCustomer:
    def setup_method(self):
        self.customer_repo = AsyncMock()
        self.use_case = UpsertCustomerUseCase(customer_repo=self.customer_repo)

    async def test_creates_customer_with_normalized_email(self):
        # Given
        self.customer_repo.get_by_email.return_value = None
        self.customer_repo.create_if_absent.side_effect = lambda customer: CustomerEntity(
            id=1,
            email=customer.email,
            first_name=customer.first_name,
            last_name=customer.last_name,
            phone=customer.phone,
        )

        # When
        customer = await self.use_case.upsert_from_full_name(
            full_name='Mia Keller', email='  Mia@Example.COM ', phone=' '
        )

        # Then
        assert customer.id == 1
        assert customer.email == 'mia@example.com'
        assert customer.first_name == 'Mia'
        assert customer.last_name == 'Keller'
        assert customer.phone is None
        self.customer_repo.get_by_email.assert_awaited_once_with(email='mia@example.com')

    async def test_existing_customer_gets_new_contact_fields_merged(self):
        existing = CustomerEntity(id=7, email='mia@example.com', first_name='Mia')
        self.customer_repo.get_by_email.return_value = existing
        self.customer_repo.update_contact.return_value = existing

        await self.use_case.upsert_from_full_name(
            full_name='Mia Keller', email='mia@example.com', phone='555-0100'
        )

        self.customer_repo.create_if_absent.assert_not_awaited()
        self.customer_repo.update_contact.assert_awaited_once_with(
            customer_id=7, changes={'last_name': 'Keller', 'phone': '555-0100'}
        )

    async def test_missing_fields_never_erase_stored_values(self):
        existing = CustomerEntity(
            id=7, email='mia@example.com', first_name='Mia', last_name='Keller', phone='555-0100'
        )
        self.customer_repo.get_by_email.return_value = existing

        customer = await self.use_case.upsert_from_full_name(
            full_name='Mia', email='MIA@example.com'
        )

        assert customer is existing
        self.customer_repo.update_contact.assert_not_awaited()

    async def test_lost_insert_race_merges_into_winner(self):
        # Given: a concurrent request inserted the same email first
        winner = CustomerEntity(id=9, email='mia@example.com', first_name='Mia')
        self.customer_repo.get_by_email.side_effect = [None, winner]
        self.customer_repo.create_if_absent.return_value = None
        self.customer_repo.update_contact.return_value = winner

        # When
        await self.use_case.upsert_from_full_name(full_name='Mia Keller', email='mia@example.com')

        # Then
        self.customer_repo.update_contact.assert_awaited_once_with(
            customer_id=9, changes={'last_name': 'Keller'}
        )

    async def test_conflict_without_visible_winner_raises(self):
        self.customer_repo.get_by_email.return_value = None
        self.customer_repo.create_if_absent.return_value = None

        with pytest.raises(IntegrityViolationError):
            await self.use_case.upsert(email='mia@example.com')

    async def test_blank_email_is_rejected(self):
        with pytest.raises(ValidationError):
            await self.use_case.upsert(email='   ')

        self.customer_repo.get_by_email.assert_not_awaited()
