"""
Unit tests for SessionAuth

Test Coverage:
1. Token issue / verify with an injectable clock
2. Tampered, malformed and expired tokens
3. Admin credential check (plain, mocked hash, real bcrypt hash from the script)
4. Session cookie headers
"""

import base64
from unittest.mock import MagicMock

import orjson
from pydantic import SecretStr
import pytest

from script.hash_admin_password import hash_admin_password
from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.matchday.domain.value_object.session_user import SessionUser
from src.service.matchday.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.matchday.driving_adapter.http_controller.auth.session_auth import SessionAuth


pytestmark = pytest.mark.unit

DAY_SECONDS = 24 * 60 * 60


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _settings(**overrides) -> Settings:
    values = {
        'SESSION_SECRET': SecretStr('unit-secret'),
        'SESSION_COOKIE_NAME': 'matchday_admin_session',
        'SESSION_MAX_AGE_SECONDS': DAY_SECONDS,
        'SESSION_COOKIE_SECURE': False,
        'ADMIN_USERNAME': 'admin@matchday.local',
        'ADMIN_PASSWORD': SecretStr('matchday-rules'),
        'ADMIN_PASSWORD_HASH': None,
        'ADMIN_NAME': 'Ava Hart',
        'ADMIN_ROLE': 'Director of Digital',
    }
    values.update(overrides)
    return Settings(**values)


class TestSessionTokens:
    def setup_method(self):
        self.clock = FakeClock()
        self.password_hasher = MagicMock()
        self.auth = SessionAuth(
            settings=_settings(), password_hasher=self.password_hasher, clock=self.clock
        )

    def test_fresh_token_verifies_to_same_user(self):
        # Given
        token = self.auth.issue_token(self.auth.admin_user)

        # When
        user = self.auth.verify_token(token)

        # Then
        assert user == SessionUser(
            username='admin@matchday.local', name='Ava Hart', role='Director of Digital'
        )

    def test_token_payload_carries_expiry_in_milliseconds(self):
        token = self.auth.issue_token(self.auth.admin_user)

        encoded_payload, _, _ = token.partition('.')
        payload = orjson.loads(base64.b64decode(encoded_payload))

        assert payload['exp'] == int((self.clock.now + DAY_SECONDS) * 1000)
        assert payload['username'] == 'admin@matchday.local'

    def test_token_expires_after_max_age(self):
        token = self.auth.issue_token(self.auth.admin_user)

        self.clock.now += DAY_SECONDS - 1
        assert self.auth.verify_token(token) is not None

        self.clock.now += 2
        assert self.auth.verify_token(token) is None

    def test_altered_signature_is_rejected(self):
        token = self.auth.issue_token(self.auth.admin_user)
        encoded_payload, _, signature = token.partition('.')
        flipped = ('B' if signature[0] == 'A' else 'A') + signature[1:]

        assert self.auth.verify_token(f'{encoded_payload}.{flipped}') is None

    def test_altered_payload_is_rejected(self):
        token = self.auth.issue_token(self.auth.admin_user)
        _, _, signature = token.partition('.')
        forged = base64.b64encode(
            orjson.dumps({'username': 'x', 'name': 'x', 'role': 'x', 'exp': 9_999_999_999_999})
        ).decode('ascii')

        assert self.auth.verify_token(f'{forged}.{signature}') is None

    def test_token_signed_with_other_secret_is_rejected(self):
        other = SessionAuth(
            settings=_settings(SESSION_SECRET=SecretStr('another-secret')),
            password_hasher=self.password_hasher,
            clock=self.clock,
        )
        token = other.issue_token(other.admin_user)

        assert self.auth.verify_token(token) is None

    @pytest.mark.parametrize('token', [None, '', 'no-dot', '.sig', 'payload.', 'a.b.c'])
    def test_malformed_tokens_are_rejected(self, token):
        assert self.auth.verify_token(token) is None

    def test_signed_payload_with_missing_fields_is_rejected(self):
        encoded_payload = base64.b64encode(orjson.dumps({'username': 'admin'})).decode('ascii')
        token = f'{encoded_payload}.{self.auth._sign(encoded_payload)}'

        assert self.auth.verify_token(token) is None


class TestAdminCredentials:
    def setup_method(self):
        self.password_hasher = MagicMock()

    def test_matching_credentials_return_admin_user(self):
        auth = SessionAuth(settings=_settings(), password_hasher=self.password_hasher)

        user = auth.authenticate_admin(
            username='admin@matchday.local', password=SecretStr('matchday-rules')
        )

        assert user.name == 'Ava Hart'
        self.password_hasher.verify_password.assert_not_called()

    @pytest.mark.parametrize(
        'username,password',
        [
            ('admin@matchday.local', 'wrong'),
            ('someone@matchday.local', 'matchday-rules'),
            (None, 'matchday-rules'),
            ('admin@matchday.local', ''),
        ],
    )
    def test_bad_credentials_raise_and_clear_cookie(self, username, password):
        auth = SessionAuth(settings=_settings(), password_hasher=self.password_hasher)

        with pytest.raises(AuthenticationError) as exc_info:
            auth.authenticate_admin(username=username, password=SecretStr(password))

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == 'Invalid credentials'
        assert exc_info.value.headers['set-cookie'].startswith('matchday_admin_session=;')

    def test_password_hash_takes_precedence(self):
        self.password_hasher.verify_password.return_value = True
        auth = SessionAuth(
            settings=_settings(ADMIN_PASSWORD_HASH='$2b$12$hash'),
            password_hasher=self.password_hasher,
        )

        auth.authenticate_admin(username='admin@matchday.local', password=SecretStr('anything'))

        self.password_hasher.verify_password.assert_called_once()
        assert self.password_hasher.verify_password.call_args.kwargs['hashed_password'] == (
            '$2b$12$hash'
        )


class TestBcryptAdminPassword:
    def test_generated_hash_authenticates_admin(self):
        # Given: a hash produced the way operators generate ADMIN_PASSWORD_HASH
        hashed = hash_admin_password('terrace-chant')
        auth = SessionAuth(
            settings=_settings(ADMIN_PASSWORD_HASH=hashed, ADMIN_PASSWORD=SecretStr('unused')),
            password_hasher=BcryptPasswordHasher(),
        )

        # When
        user = auth.authenticate_admin(
            username='admin@matchday.local', password=SecretStr('terrace-chant')
        )

        # Then
        assert hashed.startswith('$2b$')
        assert user.username == 'admin@matchday.local'

    @pytest.mark.parametrize('password', ['unused', 'terrace-chant ', ''])
    def test_generated_hash_rejects_other_passwords(self, password):
        auth = SessionAuth(
            settings=_settings(
                ADMIN_PASSWORD_HASH=hash_admin_password('terrace-chant'),
                ADMIN_PASSWORD=SecretStr('unused'),
            ),
            password_hasher=BcryptPasswordHasher(),
        )

        with pytest.raises(AuthenticationError):
            auth.authenticate_admin(
                username='admin@matchday.local', password=SecretStr(password)
            )

    def test_malformed_hash_rejects_login(self):
        auth = SessionAuth(
            settings=_settings(ADMIN_PASSWORD_HASH='not-a-bcrypt-hash'),
            password_hasher=BcryptPasswordHasher(),
        )

        with pytest.raises(AuthenticationError):
            auth.authenticate_admin(
                username='admin@matchday.local', password=SecretStr('matchday-rules')
            )

    def test_empty_password_cannot_be_hashed(self):
        with pytest.raises(ValueError):
            hash_admin_password('')


class TestSessionCookies:
    def test_clearing_header_expires_cookie(self):
        auth = SessionAuth(settings=_settings(), password_hasher=MagicMock())

        header = auth.clearing_cookie_header()

        assert header == 'matchday_admin_session=; HttpOnly; Path=/; Max-Age=0; SameSite=Lax'

    def test_secure_flag_follows_settings(self):
        auth = SessionAuth(
            settings=_settings(SESSION_COOKIE_SECURE=True), password_hasher=MagicMock()
        )

        header = auth._cookie_header('token', 60)

        assert header == (
            'matchday_admin_session=token; HttpOnly; Path=/; Max-Age=60; Secure; SameSite=Lax'
        )
