from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Matchday Ticketing'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # PostgreSQL (used when DATABASE_URL is not set explicitly)
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'matchday'
    POSTGRES_PORT: int = 5432

    # Overrides the POSTGRES_* settings, e.g. sqlite+aiosqlite:///./matchday.db
    DATABASE_URL: Optional[str] = None

    # Pool sizing (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    SQLITE_BUSY_TIMEOUT_SECONDS: float = 30.0

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Admin session
    SESSION_SECRET: SecretStr = SecretStr('matchday-admin-secret-change-in-production')
    SESSION_COOKIE_NAME: str = 'matchday_admin_session'
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24  # 24 hours
    SESSION_COOKIE_SECURE: bool = False  # Set to True behind HTTPS

    # Admin credentials
    ADMIN_USERNAME: str = 'admin@matchday.local'
    ADMIN_PASSWORD: SecretStr = SecretStr('matchday-rules')
    ADMIN_PASSWORD_HASH: Optional[str] = None  # bcrypt hash, takes precedence over ADMIN_PASSWORD
    ADMIN_NAME: str = 'Ava Hart'
    ADMIN_ROLE: str = 'Director of Digital'

    # Reservation
    RESERVATION_MAX_SEATS_PER_REQUEST: int = 6
    RESERVATION_RETRY_BUDGET: int = 3

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
