# portfolio/schemas/auth_schema.py
from __future__ import annotations

from pydantic import EmailStr, Field

from portfolio.schemas.common import CamelModel


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class SessionUser(CamelModel):
    user_id: str
    email: str


class UserRead(CamelModel):
    id: str
    email: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserRead
