from __future__ import annotations

from fastapi import UploadFile

from jobgoblin.core.config import settings
from jobgoblin.core.errors import PayloadTooLarge

CHUNK_BYTES = 64 * 1024


def read_upload(file: UploadFile, max_bytes: int | None = None) -> bytes:
    limit = max_bytes or settings.max_upload_bytes
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = file.file.read(CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise PayloadTooLarge(f"File too large. Maximum allowed size is {limit // (1024 * 1024)} MB.")
        chunks.append(chunk)
    return b"".join(chunks)
