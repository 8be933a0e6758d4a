from __future__ import annotations

from jobgoblin.core.config import settings


def cors_allowed_origins() -> list[str]:
    return list(settings.cors_allowed_origins)
