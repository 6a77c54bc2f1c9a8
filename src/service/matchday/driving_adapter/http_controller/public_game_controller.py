from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.matchday.app.command.request_tickets_use_case import RequestTicketsUseCase
from src.service.matchday.app.query.get_game_use_case import GetGameUseCase
from src.service.matchday.app.query.get_section_availability_use_case import (
    GetSectionAvailabilityUseCase,
)
from src.service.matchday.app.query.list_games_use_case import ListGamesUseCase
from src.service.matchday.domain.game_presentation import decorate_public_game, to_public_game
from src.service.matchday.driving_adapter.schema.game_schema import (
    PublicGameDetailResponse,
    PublicGameListResponse,
    PublicGameResponse,
    SectionAvailabilityResponse,
)
from src.service.matchday.driving_adapter.schema.ticket_schema import (
    TicketRequestBody,
    TicketRequestResponse,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def list_public_games(
    list_games_use_case: ListGamesUseCase = Depends(ListGamesUseCase.depends),
    availability_use_case: GetSectionAvailabilityUseCase = Depends(
        GetSectionAvailabilityUseCase.depends
    ),
) -> PublicGameListResponse:
    now = datetime.now(timezone.utc)
    games = []
    for game in await list_games_use_case.list_games():
        assert game.id is not None
        _, seat_summary = await availability_use_case.get_sections_with_summary(game_id=game.id)
        view = decorate_public_game(to_public_game(game, seat_summary=seat_summary, now=now))
        games.append(PublicGameResponse.model_validate(view))
    return PublicGameListResponse(games=games)


@router.get('/{game_id}', status_code=status.HTTP_200_OK)
@Logger.io(truncate_content=True)
async def get_public_game(
    game_id: int,
    get_game_use_case: GetGameUseCase = Depends(GetGameUseCase.depends),
    availability_use_case: GetSectionAvailabilityUseCase = Depends(
        GetSectionAvailabilityUseCase.depends
    ),
) -> PublicGameDetailResponse:
    game = await get_game_use_case.get_by_id(game_id=game_id)
    if game is None:
        raise NotFoundError('Game not found')

    sections, seat_summary = await availability_use_case.get_sections_with_summary(
        game_id=game_id
    )
    view = decorate_public_game(to_public_game(game, seat_summary=seat_summary))
    return PublicGameDetailResponse(
        game=PublicGameResponse.model_validate(view),
        sections=[SectionAvailabilityResponse.model_validate(s) for s in sections],
    )


@router.post(
    '/{game_id}/ticket-requests',
    status_code=status.HTTP_200_OK,
    response_model=TicketRequestResponse,
    response_model_exclude_none=True,
)
@Logger.io
async def request_tickets(
    game_id: int,
    request: TicketRequestBody,
    use_case: RequestTicketsUseCase = Depends(RequestTicketsUseCase.depends),
) -> TicketRequestResponse | JSONResponse:
    try:
        result = await use_case.request_tickets(
            game_id=game_id,
            name=request.name,
            email=request.email,
            seats=request.seats,
            phone=request.phone,
        )
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={'success': False, 'error': e.message},
        )
    except NotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={'success': False, 'error': e.message},
        )

    # A sold-out answer carries no reservation counts
    return TicketRequestResponse.model_validate(
        {
            'success': result.success,
            'reserved': None if result.error else result.reserved,
            'requested': None if result.error else result.requested,
            'message': result.message,
            'error': result.error,
            'seat_summary': result.seat_summary,
            'sections': result.sections,
        }
    )
