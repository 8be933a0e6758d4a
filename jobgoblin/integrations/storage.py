from __future__ import annotations

import logging
import uuid

from jobgoblin.core.config import settings
from jobgoblin.core.errors import UpstreamError
from jobgoblin.integrations.supabase_client import admin_client

logger = logging.getLogger(__name__)


def _bucket():
    return admin_client().storage.from_(settings.resumes_bucket)


def _public_prefix() -> str:
    base = (settings.supabase_url or "").rstrip("/")
    return f"{base}/storage/v1/object/public/{settings.resumes_bucket}/"


def object_path(owner_id: str, extension: str, *, folder: str | None = None) -> str:
    ext = (extension or "bin").lstrip(".").lower() or "bin"
    parts = ["users", owner_id]
    if folder:
        parts.append(folder)
    parts.append(f"{uuid.uuid4()}.{ext}")
    return "/".join(parts)


def public_url(path: str) -> str:
    return f"{_public_prefix()}{path}"


def path_from_public_url(url: str) -> str | None:
    prefix = _public_prefix()
    if not url or not url.startswith(prefix):
        return None
    path = url[len(prefix):].split("?", 1)[0]
    return path or None


def upload(path: str, content: bytes, content_type: str) -> str:
    try:
        _bucket().upload(path, content, {"content-type": content_type or "application/octet-stream"})
    except Exception as exc:  # noqa: BLE001
        logger.error("storage_upload_failed path=%s: %s", path, exc)
        raise UpstreamError("Failed to upload file.", code="storage_upload_failed") from exc
    return public_url(path)


def remove(paths: list[str]) -> None:
    if not paths:
        return
    try:
        _bucket().remove(paths)
    except Exception as exc:  # noqa: BLE001
        logger.error("storage_remove_failed paths=%s: %s", paths, exc)
        raise UpstreamError("Failed to delete stored file.", code="storage_remove_failed") from exc
