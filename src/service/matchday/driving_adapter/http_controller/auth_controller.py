from fastapi import APIRouter, Depends, Response, status

from src.platform.logging.loguru_io import Logger
from src.service.matchday.domain.value_object.session_user import SessionUser
from src.service.matchday.driving_adapter.http_controller.auth.require_admin import (
    get_session_auth,
    require_admin,
)
from src.service.matchday.driving_adapter.http_controller.auth.session_auth import SessionAuth
from src.service.matchday.driving_adapter.schema.auth_schema import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    SessionUserResponse,
)
from src.service.matchday.driving_adapter.schema.ticket_schema import SuccessResponse


router = APIRouter()


@router.post('/login', status_code=status.HTTP_200_OK)
@Logger.io
async def login(
    request: LoginRequest,
    response: Response,
    session_auth: SessionAuth = Depends(get_session_auth),
) -> LoginResponse:
    user = session_auth.authenticate_admin(username=request.username, password=request.password)
    session_auth.set_session_cookie(response, session_auth.issue_token(user))

    Logger.base.info(f'🔓 [AUTH] {user.username} signed in')
    return LoginResponse(success=True, user=SessionUserResponse.model_validate(user))


@router.post('/logout', status_code=status.HTTP_200_OK)
@Logger.io
async def logout(
    response: Response,
    session_auth: SessionAuth = Depends(get_session_auth),
) -> SuccessResponse:
    session_auth.clear_session_cookie(response)
    return SuccessResponse(success=True)


@router.get('/me', status_code=status.HTTP_200_OK)
@Logger.io
async def get_me(current_user: SessionUser = Depends(require_admin)) -> MeResponse:
    return MeResponse(user=SessionUserResponse.model_validate(current_user))
