from __future__ import annotations

import logging
from typing import Any

from supabase import AuthError as SupabaseAuthError

from jobgoblin.core.errors import AuthError, UpstreamError
from jobgoblin.integrations.supabase_client import admin_client, session_client
from jobgoblin.schemas.auth import AuthSession, AuthUser

logger = logging.getLogger(__name__)


def _to_user(raw: Any) -> AuthUser:
    if hasattr(raw, "model_dump"):
        data = raw.model_dump(mode="json")
    else:
        data = dict(raw)
    data["id"] = str(data.get("id") or "")
    data["user_metadata"] = data.get("user_metadata") or {}
    return AuthUser.model_validate(data)


def _to_session(response: Any) -> AuthSession | None:
    session = getattr(response, "session", None)
    user = getattr(response, "user", None) or getattr(session, "user", None)
    if session is None or user is None:
        return None
    return AuthSession(
        user=_to_user(user),
        access_token=session.access_token,
        refresh_token=getattr(session, "refresh_token", None),
        expires_in=getattr(session, "expires_in", None),
    )


def resolve_user(token: str) -> AuthUser:
    """Resolve an access token to its user.

    Raises AuthError when the backend rejects the token and UpstreamError when
    it cannot be reached. A missing client configuration propagates unchanged.
    """
    client = session_client()
    try:
        response = client.auth.get_user(token)
    except SupabaseAuthError as exc:
        logger.info("identity_resolve_rejected: %s", exc)
        raise AuthError("Unauthorized: Invalid token") from exc
    except Exception as exc:  # noqa: BLE001
        logger.error("identity_resolve_failed: %s", exc)
        raise UpstreamError("Authentication service unavailable", code="identity_unavailable") from exc
    user = getattr(response, "user", None) if response is not None else None
    if user is None:
        raise AuthError("Unauthorized: Invalid token")
    return _to_user(user)


def refresh_session(refresh_token: str) -> AuthSession:
    client = session_client()
    try:
        response = client.auth.refresh_session(refresh_token)
    except SupabaseAuthError as exc:
        logger.info("identity_refresh_rejected: %s", exc)
        raise AuthError("Unauthorized: Session expired") from exc
    except Exception as exc:  # noqa: BLE001
        logger.error("identity_refresh_failed: %s", exc)
        raise UpstreamError("Authentication service unavailable", code="identity_unavailable") from exc
    session = _to_session(response)
    if session is None:
        raise AuthError("Unauthorized: Session expired")
    return session


def sign_up(email: str, password: str) -> tuple[AuthUser | None, AuthSession | None]:
    """Create an account. The session is None when the backend requires email confirmation."""
    try:
        response = session_client().auth.sign_up({"email": email, "password": password})
    except Exception as exc:  # noqa: BLE001
        logger.info("identity_signup_failed email_domain=%s: %s", email.rsplit("@", 1)[-1], exc)
        raise UpstreamError(str(exc) or "Signup failed", code="signup_failed", status_code=400) from exc
    user = getattr(response, "user", None)
    return (_to_user(user) if user is not None else None), _to_session(response)


def sign_in(email: str, password: str) -> AuthSession:
    try:
        response = session_client().auth.sign_in_with_password({"email": email, "password": password})
    except Exception as exc:  # noqa: BLE001
        logger.info("identity_login_failed email_domain=%s: %s", email.rsplit("@", 1)[-1], exc)
        raise UpstreamError("Invalid login credentials", code="login_failed", status_code=400) from exc
    session = _to_session(response)
    if session is None:
        raise UpstreamError("Authentication failed, no session returned", code="no_session", status_code=400)
    return session


def sign_out(token: str) -> None:
    try:
        admin_client().auth.admin.sign_out(token)
    except Exception as exc:  # noqa: BLE001
        logger.warning("identity_logout_failed: %s", exc)
        raise UpstreamError("Logout failed", code="logout_failed", status_code=400) from exc
