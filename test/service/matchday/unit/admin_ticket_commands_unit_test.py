from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.service.matchday.app.command.assign_ticket_customer_use_case import (
    AssignTicketCustomerUseCase,
)
from src.service.matchday.app.command.materialize_game_tickets_use_case import (
    MaterializeGameTicketsUseCase,
)
from src.service.matchday.app.command.update_ticket_status_use_case import (
    UpdateTicketStatusUseCase,
)
from src.service.matchday.domain.entity.customer_entity import CustomerEntity
from src.service.matchday.domain.entity.game_entity import GameEntity
from src.service.matchday.domain.enum.ticket_status import TicketStatus


pytestmark = pytest.mark.unit


class TestUpdateTicketStatus:
    def setup_method(self):
        self.command_repo = AsyncMock()
        self.command_repo.set_ticket_status.return_value = True
        self.use_case = UpdateTicketStatusUseCase(seat_inventory_command_repo=self.command_repo)

    @pytest.mark.parametrize('status', [None, '', '   '])
    async def test_missing_status_is_rejected(self, status):
        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.update_status(ticket_id=1, status=status)

        assert exc_info.value.message == 'Ticket status is required'
        self.command_repo.set_ticket_status.assert_not_awaited()

    async def test_unknown_status_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            await self.use_case.update_status(ticket_id=1, status='refunded')

        assert 'refunded' in exc_info.value.message

    async def test_status_is_case_insensitive(self):
        purchased_at = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)

        await self.use_case.update_status(ticket_id=4, status=' SOLD ', purchased_at=purchased_at)

        self.command_repo.set_ticket_status.assert_awaited_once_with(
            ticket_id=4, status=TicketStatus.SOLD, purchased_at=purchased_at
        )

    async def test_unknown_ticket_is_not_found(self):
        self.command_repo.set_ticket_status.return_value = False

        with pytest.raises(NotFoundError):
            await self.use_case.update_status(ticket_id=404, status='available')


class TestAssignTicketCustomer:
    def setup_method(self):
        self.command_repo = AsyncMock()
        self.command_repo.assign_customer.return_value = True
        self.customer_repo = AsyncMock()
        self.customer_repo.get_by_id.return_value = CustomerEntity(
            id=1, email='mia@example.com', first_name='Mia'
        )
        self.use_case = AssignTicketCustomerUseCase(
            seat_inventory_command_repo=self.command_repo, customer_repo=self.customer_repo
        )

    async def test_unknown_ticket_is_not_found(self):
        self.command_repo.assign_customer.return_value = False

        with pytest.raises(NotFoundError) as exc_info:
            await self.use_case.assign(ticket_id=404, customer_id=1)

        assert exc_info.value.message == 'Ticket not found: 404'

    async def test_unknown_customer_is_not_found_and_ticket_untouched(self):
        self.customer_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.use_case.assign(ticket_id=3, customer_id=12345)

        assert exc_info.value.message == 'Customer not found: 12345'
        self.command_repo.assign_customer.assert_not_awaited()

    async def test_customer_can_be_cleared(self):
        await self.use_case.assign(ticket_id=3, customer_id=None)

        self.customer_repo.get_by_id.assert_not_awaited()
        self.command_repo.assign_customer.assert_awaited_once_with(ticket_id=3, customer_id=None)


class TestMaterializeGameTickets:
    def setup_method(self):
        self.game_query_repo = AsyncMock()
        self.command_repo = AsyncMock()
        self.use_case = MaterializeGameTicketsUseCase(
            game_query_repo=self.game_query_repo, seat_inventory_command_repo=self.command_repo
        )

    async def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            await self.use_case.materialize(game_id=1, price=-1)

    async def test_unknown_game_is_not_found(self):
        self.game_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.materialize(game_id=1, price=4500)

    async def test_returns_created_count(self):
        self.game_query_repo.get_by_id.return_value = GameEntity(
            id=1, venue_id=1, opponent='Harbor City FC', starts_at=datetime.now(timezone.utc)
        )
        self.command_repo.create_missing_tickets.return_value = 12

        created = await self.use_case.materialize(game_id=1, price=4500)

        assert created == 12
        self.command_repo.create_missing_tickets.assert_awaited_once_with(game_id=1, price=4500)
