from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from jobgoblin.core.config import settings
from jobgoblin.core.errors import UpstreamError
from jobgoblin.core.tempfiles import owned_temp_file
from jobgoblin.integrations import storage

logger = logging.getLogger(__name__)

PREVIEW_DPI = 110


def render_first_page_png(pdf_path: Path, *, dpi: int = PREVIEW_DPI) -> bytes:
    try:
        with fitz.open(str(pdf_path)) as document:
            if document.page_count == 0:
                raise UpstreamError("Preview could not be generated.", code="preview_empty")
            pixmap = document.load_page(0).get_pixmap(dpi=dpi)
            return pixmap.tobytes("png")
    except UpstreamError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.error("preview_render_failed path=%s: %s", pdf_path, exc)
        raise UpstreamError("Preview could not be generated.", code="preview_failed") from exc


def publish_preview(owner_id: str, pdf_bytes: bytes, *, temp_dir: str | None = None) -> str:
    """Render page 1 of ``pdf_bytes`` to PNG, store it under the owner's prefix and return its public URL."""
    with owned_temp_file(pdf_bytes, suffix=".pdf", directory=temp_dir or settings.temp_dir) as pdf_path:
        png = render_first_page_png(pdf_path)
    path = storage.object_path(owner_id, "png", folder="previews")
    return storage.upload(path, png, "image/png")
