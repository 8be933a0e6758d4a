from __future__ import annotations

import logging

from jobgoblin.core.errors import UpstreamError
from jobgoblin.integrations import identity, records
from jobgoblin.schemas.auth import LoginRequest, SessionResponse, SignupRequest

logger = logging.getLogger(__name__)


def register(payload: SignupRequest) -> SessionResponse:
    user, session = identity.sign_up(payload.email, payload.password)
    if user is not None:
        try:
            records.insert(
                "users",
                {
                    "id": user.id,
                    "email": payload.email,
                    "first_name": payload.first_name,
                    "last_name": payload.last_name,
                },
            )
        except UpstreamError as exc:
            raise UpstreamError("Failed to create user profile.", code=exc.code, status_code=400) from exc

    if session is None:
        raise UpstreamError("Signup successful, but no session returned", code="no_session", status_code=400)
    logger.info("account_registered user=%s", session.user.id)
    return SessionResponse(**session.model_dump())


def login(payload: LoginRequest) -> SessionResponse:
    session = identity.sign_in(payload.email, payload.password)
    return SessionResponse(**session.model_dump())


def logout(token: str) -> None:
    identity.sign_out(token)
