"""
Admin ticketing endpoints

Every route requires a verified admin session (``require_admin``).
"""

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.command.assign_ticket_customer_use_case import (
    AssignTicketCustomerUseCase,
)
from src.service.matchday.app.command.materialize_game_tickets_use_case import (
    MaterializeGameTicketsUseCase,
)
from src.service.matchday.app.command.update_ticket_status_use_case import (
    UpdateTicketStatusUseCase,
)
from src.service.matchday.app.query.get_section_availability_use_case import (
    GetSectionAvailabilityUseCase,
)
from src.service.matchday.app.query.get_ticket_sales_overview_use_case import (
    GetTicketSalesOverviewUseCase,
)
from src.service.matchday.app.query.list_game_tickets_use_case import ListGameTicketsUseCase
from src.service.matchday.app.query.list_games_use_case import ListGamesUseCase
from src.service.matchday.domain.value_object.session_user import SessionUser
from src.service.matchday.driving_adapter.http_controller.auth.require_admin import (
    require_admin,
)
from src.service.matchday.driving_adapter.schema.game_schema import (
    AdminGameListResponse,
    AdminGameResponse,
    SectionAvailabilityListResponse,
    SectionAvailabilityResponse,
)
from src.service.matchday.driving_adapter.schema.ticket_schema import (
    MaterializeTicketsRequest,
    MaterializeTicketsResponse,
    SuccessResponse,
    TicketAssignRequest,
    TicketListResponse,
    TicketResponse,
    TicketSalesOverviewResponse,
    TicketStatusUpdateRequest,
)


router = APIRouter()


# ============================ Games ============================


@router.get('/games', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def list_games(
    current_user: SessionUser = Depends(require_admin),
    list_games_use_case: ListGamesUseCase = Depends(ListGamesUseCase.depends),
    availability_use_case: GetSectionAvailabilityUseCase = Depends(
        GetSectionAvailabilityUseCase.depends
    ),
) -> AdminGameListResponse:
    games = []
    for game in await list_games_use_case.list_games():
        assert game.id is not None
        sections = await availability_use_case.get_sections(game_id=game.id)
        game_response = AdminGameResponse.model_validate(game)
        game_response.sections = [SectionAvailabilityResponse.model_validate(s) for s in sections]
        games.append(game_response)
    return AdminGameListResponse(games=games)


@router.get('/games/{game_id}/availability', status_code=status.HTTP_200_OK)
@Logger.io
async def get_game_availability(
    game_id: int,
    current_user: SessionUser = Depends(require_admin),
    use_case: GetSectionAvailabilityUseCase = Depends(GetSectionAvailabilityUseCase.depends),
) -> SectionAvailabilityListResponse:
    sections = await use_case.get_sections(game_id=game_id)
    return SectionAvailabilityListResponse(
        sections=[SectionAvailabilityResponse.model_validate(s) for s in sections]
    )


@router.get('/games/{game_id}/tickets', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def list_game_tickets(
    game_id: int,
    current_user: SessionUser = Depends(require_admin),
    use_case: ListGameTicketsUseCase = Depends(ListGameTicketsUseCase.depends),
) -> TicketListResponse:
    tickets = await use_case.list_tickets(game_id=game_id)
    return TicketListResponse(tickets=[TicketResponse.model_validate(t) for t in tickets])


@router.post('/games/{game_id}/tickets', status_code=status.HTTP_201_CREATED)
@Logger.io
async def materialize_game_tickets(
    game_id: int,
    request: MaterializeTicketsRequest,
    current_user: SessionUser = Depends(require_admin),
    use_case: MaterializeGameTicketsUseCase = Depends(MaterializeGameTicketsUseCase.depends),
) -> MaterializeTicketsResponse:
    created = await use_case.materialize(game_id=game_id, price=request.price)
    return MaterializeTicketsResponse(success=True, created=created)


# ============================ Tickets ============================


@router.post('/tickets/{ticket_id}/status', status_code=status.HTTP_200_OK)
@Logger.io
async def update_ticket_status(
    ticket_id: int,
    request: TicketStatusUpdateRequest,
    current_user: SessionUser = Depends(require_admin),
    use_case: UpdateTicketStatusUseCase = Depends(UpdateTicketStatusUseCase.depends),
) -> SuccessResponse:
    await use_case.update_status(
        ticket_id=ticket_id, status=request.status, purchased_at=request.purchased_at
    )
    return SuccessResponse(success=True)


@router.post('/tickets/{ticket_id}/assign', status_code=status.HTTP_200_OK)
@Logger.io
async def assign_ticket_customer(
    ticket_id: int,
    request: TicketAssignRequest,
    current_user: SessionUser = Depends(require_admin),
    use_case: AssignTicketCustomerUseCase = Depends(AssignTicketCustomerUseCase.depends),
) -> SuccessResponse:
    await use_case.assign(ticket_id=ticket_id, customer_id=request.customer_id)
    return SuccessResponse(success=True)


# ============================ Overview ============================


@router.get('/overview', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket_sales_overview(
    current_user: SessionUser = Depends(require_admin),
    use_case: GetTicketSalesOverviewUseCase = Depends(GetTicketSalesOverviewUseCase.depends),
) -> TicketSalesOverviewResponse:
    overview = await use_case.get_overview()
    return TicketSalesOverviewResponse.model_validate(overview)
