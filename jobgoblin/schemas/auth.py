from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=6, max_length=200)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1, max_length=200)


class AuthUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    email: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)


class AuthSession(BaseModel):
    user: AuthUser
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None


class SessionResponse(AuthSession):
    """Session payload returned after signup or login."""


class ProfileResponse(BaseModel):
    user: AuthUser


class MessageResponse(BaseModel):
    message: str
