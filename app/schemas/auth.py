# auth.py
from pydantic import Field

from app.schemas.base import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int | None = None


class SessionStatus(CamelModel):
    authenticated: bool
    username: str | None = None
