"""
Request Tickets Use Case

Public ticket request flow:
1. Validate contact details and clamp the seat count
2. Short-circuit when the fixture is sold out
3. Resolve the supporter to a customer (upsert by email)
4. Reserve seats, allowing partial fulfillment
5. Recompute availability for the response
"""

from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.matchday_metrics import metrics
from src.service.matchday.app.command.reserve_tickets_use_case import ReserveTicketsUseCase
from src.service.matchday.app.command.upsert_customer_use_case import UpsertCustomerUseCase
from src.service.matchday.app.dto.ticket_request_result import TicketRequestResult
from src.service.matchday.app.interface.i_game_query_repo import IGameQueryRepo
from src.service.matchday.app.interface.i_seat_inventory_query_repo import (
    ISeatInventoryQueryRepo,
)
from src.service.matchday.domain.entity.section_availability_entity import GameSeatSummary


SOLD_OUT_MESSAGE = 'This fixture is currently sold out.'
MISSING_CONTACT_MESSAGE = 'Name and email are required.'


def clamp_seat_count(seats: int, *, maximum: int = settings.RESERVATION_MAX_SEATS_PER_REQUEST) -> int:
    return min(max(seats, 1), maximum)


class RequestTicketsUseCase:
    def __init__(
        self,
        game_query_repo: IGameQueryRepo,
        seat_inventory_query_repo: ISeatInventoryQueryRepo,
        upsert_customer_use_case: UpsertCustomerUseCase,
        reserve_tickets_use_case: ReserveTicketsUseCase,
    ) -> None:
        self.game_query_repo = game_query_repo
        self.seat_inventory_query_repo = seat_inventory_query_repo
        self.upsert_customer_use_case = upsert_customer_use_case
        self.reserve_tickets_use_case = reserve_tickets_use_case
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        game_query_repo: IGameQueryRepo = Depends(Provide[Container.game_query_repo]),
        seat_inventory_query_repo: ISeatInventoryQueryRepo = Depends(
            Provide[Container.seat_inventory_query_repo]
        ),
        upsert_customer_use_case: UpsertCustomerUseCase = Depends(UpsertCustomerUseCase.depends),
        reserve_tickets_use_case: ReserveTicketsUseCase = Depends(ReserveTicketsUseCase.depends),
    ) -> Self:
        return cls(
            game_query_repo=game_query_repo,
            seat_inventory_query_repo=seat_inventory_query_repo,
            upsert_customer_use_case=upsert_customer_use_case,
            reserve_tickets_use_case=reserve_tickets_use_case,
        )

    @Logger.io
    async def request_tickets(
        self,
        *,
        game_id: int,
        name: Optional[str],
        email: Optional[str],
        seats: int = 1,
        phone: Optional[str] = None,
    ) -> TicketRequestResult:
        name = (name or '').strip()
        email = (email or '').strip()
        if not name or not email:
            raise ValidationError(MISSING_CONTACT_MESSAGE)

        requested = clamp_seat_count(seats)

        with self.tracer.start_as_current_span(
            'use_case.request_tickets',
            attributes={'game.id': game_id, 'reservation.requested': requested},
        ):
            game = await self.game_query_repo.get_by_id(game_id=game_id)
            if game is None:
                raise NotFoundError('Game not found.')

            sections_before = await self.seat_inventory_query_repo.get_section_availability(
                game_id=game_id
            )
            summary_before = GameSeatSummary.from_sections(sections_before)
            if summary_before.is_sold_out:
                metrics.record_reservation(
                    game_id=game_id, result='sold_out', reserved=0, duration=0.0
                )
                Logger.base.info(f'🚫 [TICKET_REQUEST] Game {game_id} is sold out')
                return TicketRequestResult(
                    success=False,
                    error=SOLD_OUT_MESSAGE,
                    requested=requested,
                    seat_summary=summary_before,
                    sections=sections_before,
                )

            customer = await self.upsert_customer_use_case.upsert_from_full_name(
                full_name=name, email=email, phone=phone
            )
            assert customer.id is not None

            reservation = await self.reserve_tickets_use_case.reserve(
                game_id=game_id, customer_id=customer.id, requested_quantity=requested
            )

            sections_after = await self.seat_inventory_query_repo.get_section_availability(
                game_id=game_id
            )
            summary_after = GameSeatSummary.from_sections(sections_after)

        if reservation.is_fulfilled:
            message = f'Reserved {reservation.reserved} seats for {name}.'
        elif reservation.reserved > 0:
            message = (
                f'Reserved {reservation.reserved} seats. '
                f'{summary_after.available_seats} remain available.'
            )
        else:
            message = (
                'Unable to reserve seats at this time. '
                f'{summary_after.available_seats} remain available.'
            )

        return TicketRequestResult(
            success=reservation.is_fulfilled,
            reserved=reservation.reserved,
            requested=reservation.requested,
            message=message,
            seat_summary=summary_after,
            sections=sections_after,
        )
