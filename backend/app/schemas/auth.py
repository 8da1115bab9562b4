"""Auth Schemas — passkey login request and session responses."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class LoginRequest(CamelModel):
    passkey: str = Field(min_length=1, max_length=200)


class LoginResponse(CamelModel):
    token: str
    username: str
    user_id: int
    expires_at: datetime


class MeResponse(CamelModel):
    username: str
    user_id: int
