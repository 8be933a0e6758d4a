from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Header, Request

from jobgoblin.core.errors import AuthError
from jobgoblin.integrations import identity
from jobgoblin.schemas.auth import AuthSession, AuthUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    user: AuthUser
    token: str
    refreshed: AuthSession | None = None

    def session_headers(self) -> dict[str, str]:
        """Headers handing a refreshed session back to the client, if one was issued."""
        if self.refreshed is None:
            return {}
        headers = {"x-access-token": self.refreshed.access_token}
        if self.refreshed.refresh_token:
            headers["x-refresh-token"] = self.refreshed.refresh_token
        return headers


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token or " " in token:
        return None
    return token


def authenticate(authorization: str | None, refresh_token: str | None) -> AuthContext:
    token = bearer_token(authorization)
    if token is None:
        raise AuthError("Unauthorized: No token provided")

    try:
        return AuthContext(user=identity.resolve_user(token), token=token)
    except AuthError:
        logger.info("auth_token_rejected refresh_available=%s", bool(refresh_token))

    if not refresh_token:
        raise AuthError("Unauthorized: Session expired")

    session = identity.refresh_session(refresh_token)
    logger.info("auth_session_refreshed user=%s", session.user.id)
    return AuthContext(user=session.user, token=session.access_token, refreshed=session)


def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
    x_refresh_token: str | None = Header(default=None, alias="x-refresh-token"),
) -> AuthContext:
    context = authenticate(authorization, x_refresh_token)
    request.state.auth = context
    return context
