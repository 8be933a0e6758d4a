from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client

from jobgoblin.core.config import settings


def _require(value: str | None, name: str) -> str:
    if not value:
        raise RuntimeError(f"{name} is missing")
    return value


@lru_cache(maxsize=1)
def admin_client() -> Client:
    """Service-role client for row and storage access. Holds no user session."""
    return create_client(
        _require(settings.supabase_url, "SUPABASE_URL"),
        _require(settings.supabase_service_role_key, "SUPABASE_SERVICE_ROLE_KEY"),
    )


def session_client() -> Client:
    # A fresh client per call: sign-in and refresh store the session on the client.
    return create_client(
        _require(settings.supabase_url, "SUPABASE_URL"),
        _require(settings.supabase_anon_key or settings.supabase_service_role_key, "SUPABASE_ANON_KEY"),
    )
