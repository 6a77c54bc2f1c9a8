from typing import Optional

from pydantic import SecretStr

from src.service.matchday.driving_adapter.schema.base_schema import CamelModel


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: SecretStr = SecretStr('')

    model_config = {
        'json_schema_extra': {
            'example': {'username': 'admin@matchday.local', 'password': 'matchday-rules'}
        }
    }


class SessionUserResponse(CamelModel):
    username: str
    name: str
    role: str


class LoginResponse(CamelModel):
    success: bool
    user: SessionUserResponse


class MeResponse(CamelModel):
    user: SessionUserResponse
