from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.matchday_metrics import metrics
from src.service.matchday.domain.value_object.session_user import SessionUser
from src.service.matchday.driving_adapter.http_controller.auth.session_auth import SessionAuth


@inject
async def get_session_auth(
    session_auth: SessionAuth = Depends(Provide[Container.session_auth]),
) -> SessionAuth:
    return session_auth


async def require_admin(
    request: Request,
    session_auth: SessionAuth = Depends(get_session_auth),
) -> SessionUser:
    """Verify the admin session cookie; a rejected cookie is cleared on the 401 response."""
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span('auth.require_admin'):
        user = session_auth.verify_token(request.cookies.get(session_auth.cookie_name))
        if user is None:
            metrics.record_auth_failure(reason='invalid_session')
            Logger.base.info(f'🔒 [AUTH] Unauthorized request to {request.url.path}')
            raise AuthenticationError(
                headers={'set-cookie': session_auth.clearing_cookie_header()}
            )
        return user
