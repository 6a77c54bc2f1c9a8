"""
Reserve Tickets Use Case

Moves up to ``requested_quantity`` available tickets of a game to reserved for
one customer. Candidates are picked by ascending ticket id and each one is
claimed with a conditional update; a claim that affects no row lost a race to a
concurrent request, and a replacement is selected. Lossy rounds are bounded by
the retry budget, after which the shortfall is reported as a partial result.
"""

import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.matchday_metrics import metrics
from src.service.matchday.app.dto.reservation_result import ReservationResult
from src.service.matchday.app.interface.i_seat_inventory_command_repo import (
    ISeatInventoryCommandRepo,
)
from src.service.matchday.app.interface.i_seat_inventory_query_repo import (
    ISeatInventoryQueryRepo,
)


class ReserveTicketsUseCase:
    def __init__(
        self,
        seat_inventory_query_repo: ISeatInventoryQueryRepo,
        seat_inventory_command_repo: ISeatInventoryCommandRepo,
        retry_budget: int = settings.RESERVATION_RETRY_BUDGET,
    ) -> None:
        self.seat_inventory_query_repo = seat_inventory_query_repo
        self.seat_inventory_command_repo = seat_inventory_command_repo
        self.retry_budget = retry_budget
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_inventory_query_repo: ISeatInventoryQueryRepo = Depends(
            Provide[Container.seat_inventory_query_repo]
        ),
        seat_inventory_command_repo: ISeatInventoryCommandRepo = Depends(
            Provide[Container.seat_inventory_command_repo]
        ),
    ) -> Self:
        return cls(
            seat_inventory_query_repo=seat_inventory_query_repo,
            seat_inventory_command_repo=seat_inventory_command_repo,
        )

    @Logger.io
    async def reserve(
        self, *, game_id: int, customer_id: int, requested_quantity: int
    ) -> ReservationResult:
        if requested_quantity < 1:
            raise ValidationError('Requested quantity must be at least 1')

        with self.tracer.start_as_current_span(
            'use_case.reserve_tickets',
            attributes={
                'game.id': game_id,
                'customer.id': customer_id,
                'reservation.requested': requested_quantity,
            },
        ) as span:
            started_at = time.perf_counter()
            reserved = 0
            lossy_rounds = 0

            while reserved < requested_quantity:
                candidate_ids = await self.seat_inventory_query_repo.list_available_ticket_ids(
                    game_id=game_id, limit=requested_quantity - reserved
                )
                if not candidate_ids:
                    break

                lost = 0
                for ticket_id in candidate_ids:
                    if await self.seat_inventory_command_repo.reserve_ticket_if_available(
                        ticket_id=ticket_id, customer_id=customer_id
                    ):
                        reserved += 1
                    else:
                        lost += 1
                        metrics.record_lost_race(game_id=game_id)

                if lost:
                    lossy_rounds += 1
                    Logger.base.warning(
                        f'⚔️ [RESERVE] Lost {lost} ticket(s) to concurrent requests '
                        f'(game={game_id}, round={lossy_rounds})'
                    )
                    if lossy_rounds > self.retry_budget:
                        break

            result = ReservationResult(reserved=reserved, requested=requested_quantity)
            outcome = 'fulfilled' if result.is_fulfilled else 'partial' if reserved else 'empty'
            span.set_attribute('reservation.reserved', reserved)
            span.set_attribute('reservation.outcome', outcome)
            metrics.record_reservation(
                game_id=game_id,
                result=outcome,
                reserved=reserved,
                duration=time.perf_counter() - started_at,
            )

        Logger.base.info(
            f'🎫 [RESERVE] game={game_id} customer={customer_id} '
            f'reserved {reserved}/{requested_quantity}'
        )
        return result
