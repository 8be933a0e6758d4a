from __future__ import annotations

import contextlib
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

TEMP_PREFIX = "jobgoblin-"


@contextlib.contextmanager
def owned_temp_file(content: bytes, *, suffix: str, directory: str) -> Iterator[Path]:
    """Write ``content`` to a fresh file in ``directory`` and remove it on every exit path."""
    os.makedirs(directory, exist_ok=True)
    handle = tempfile.NamedTemporaryFile(prefix=TEMP_PREFIX, suffix=suffix, dir=directory, delete=False)
    path = Path(handle.name)
    try:
        with handle:
            handle.write(content)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("temp_file_cleanup_failed path=%s: %s", path, exc)


def sweep_stale_temp_files(directory: str, *, max_age_s: float = 3600.0) -> int:
    """Remove ``jobgoblin-*`` files older than ``max_age_s`` left behind by a killed worker."""
    root = Path(directory)
    if not root.is_dir():
        return 0
    cutoff = time.time() - max_age_s
    removed = 0
    for path in root.glob(f"{TEMP_PREFIX}*"):
        try:
            if path.is_file() and path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except OSError as exc:
            logger.warning("temp_file_sweep_failed path=%s: %s", path, exc)
    return removed
