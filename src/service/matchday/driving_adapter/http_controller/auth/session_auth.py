"""
Admin Session Authentication

Tokens are ``base64(json payload) + "." + base64(HMAC-SHA256(secret, encoded payload))``.
The payload carries ``username``, ``name``, ``role`` and ``exp`` (epoch milliseconds).
There is no server-side session store; a token stays valid until it expires.
"""

import base64
import hashlib
import hmac
import time
from typing import Any, Callable, Optional

from fastapi import Response
import orjson
from pydantic import SecretStr

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.matchday_metrics import metrics
from src.service.matchday.app.interface.i_password_hasher import IPasswordHasher
from src.service.matchday.domain.value_object.session_user import SessionUser


class SessionAuth:
    def __init__(
        self,
        *,
        settings: Settings,
        password_hasher: IPasswordHasher,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.secret = settings.SESSION_SECRET.get_secret_value().encode('utf-8')
        self.max_age_seconds = settings.SESSION_MAX_AGE_SECONDS
        self.cookie_name = settings.SESSION_COOKIE_NAME
        self.cookie_secure = settings.SESSION_COOKIE_SECURE
        self.admin_user = SessionUser(
            username=settings.ADMIN_USERNAME,
            name=settings.ADMIN_NAME,
            role=settings.ADMIN_ROLE,
        )
        self.admin_password = settings.ADMIN_PASSWORD
        self.admin_password_hash = settings.ADMIN_PASSWORD_HASH
        self.password_hasher = password_hasher
        self.clock = clock

    # ============================ Credentials ============================

    def authenticate_admin(self, *, username: Optional[str], password: SecretStr) -> SessionUser:
        username_ok = hmac.compare_digest(
            (username or '').encode('utf-8'), self.admin_user.username.encode('utf-8')
        )
        if self.admin_password_hash:
            password_ok = self.password_hasher.verify_password(
                plain_password=password, hashed_password=self.admin_password_hash
            )
        else:
            password_ok = hmac.compare_digest(
                password.get_secret_value().encode('utf-8'),
                self.admin_password.get_secret_value().encode('utf-8'),
            )

        if not (username_ok and password_ok):
            metrics.record_auth_failure(reason='bad_credentials')
            Logger.base.warning('🔒 [AUTH] Rejected admin login')
            raise AuthenticationError(
                'Invalid credentials', headers={'set-cookie': self.clearing_cookie_header()}
            )

        return self.admin_user

    # ============================ Tokens ============================

    def issue_token(self, user: SessionUser) -> str:
        payload: dict[str, Any] = {
            'username': user.username,
            'name': user.name,
            'role': user.role,
            'exp': int((self.clock() + self.max_age_seconds) * 1000),
        }
        encoded_payload = base64.b64encode(orjson.dumps(payload)).decode('ascii')
        return f'{encoded_payload}.{self._sign(encoded_payload)}'

    def verify_token(self, token: Optional[str]) -> Optional[SessionUser]:
        """Return the embedded user, or None for a missing, tampered or expired token."""
        if not token:
            return None

        encoded_payload, _, signature = token.partition('.')
        if not encoded_payload or not signature:
            return None

        expected = self._sign(encoded_payload)
        if not hmac.compare_digest(expected.encode('utf-8'), signature.encode('utf-8')):
            return None

        try:
            payload = orjson.loads(base64.b64decode(encoded_payload, validate=True))
        except ValueError:
            return None

        if not isinstance(payload, dict):
            return None

        expires_at = payload.get('exp')
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            return None
        if self.clock() * 1000 > expires_at:
            return None

        username, name, role = payload.get('username'), payload.get('name'), payload.get('role')
        if not all(isinstance(value, str) for value in (username, name, role)):
            return None

        return SessionUser(username=username, name=name, role=role)

    def _sign(self, encoded_payload: str) -> str:
        digest = hmac.new(self.secret, encoded_payload.encode('utf-8'), hashlib.sha256).digest()
        return base64.b64encode(digest).decode('ascii')

    # ============================ Cookies ============================

    def set_session_cookie(self, response: Response, token: str) -> None:
        response.headers.append('set-cookie', self._cookie_header(token, self.max_age_seconds))

    def clear_session_cookie(self, response: Response) -> None:
        response.headers.append('set-cookie', self.clearing_cookie_header())

    def clearing_cookie_header(self) -> str:
        return self._cookie_header('', 0)

    def _cookie_header(self, value: str, max_age: int) -> str:
        # Written by hand: SimpleCookie would quote the base64 '=' and '/' characters
        parts = [f'{self.cookie_name}={value}', 'HttpOnly', 'Path=/', f'Max-Age={max_age}']
        if self.cookie_secure:
            parts.append('Secure')
        parts.append('SameSite=Lax')
        return '; '.join(parts)
