from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from pypdf import PdfReader

from jobgoblin.core.config import settings
from jobgoblin.core.errors import ExtractionError, PayloadTooLarge, ValidationFailed
from jobgoblin.core.tempfiles import owned_temp_file

from .models import ExtractedText

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"


class PdfTextExtractor:
    """Turns an uploaded PDF payload into plain text.

    The payload is written to a file owned by this call inside ``temp_dir``
    and that file is removed whether extraction succeeds or fails.
    """

    def __init__(
        self,
        *,
        temp_dir: str,
        backend: str = "pdftotext",
        executable: str = "pdftotext",
        timeout_s: float = 30.0,
        max_bytes: int = 10 * 1024 * 1024,
    ):
        if backend not in {"pdftotext", "pypdf"}:
            raise ValueError(f"Unsupported extraction backend '{backend}'")
        self.temp_dir = temp_dir
        self.backend = backend
        self.executable = executable
        self.timeout_s = timeout_s
        self.max_bytes = max_bytes

    def validate(self, content: bytes) -> None:
        if not content:
            raise ValidationFailed("Uploaded resume is empty.")
        if len(content) > self.max_bytes:
            raise PayloadTooLarge(
                f"File too large. Maximum allowed size is {self.max_bytes // (1024 * 1024)} MB."
            )
        if content.lstrip()[: len(PDF_MAGIC)] != PDF_MAGIC:
            raise ValidationFailed("Uploaded resume must be a PDF file.")

    def extract(self, content: bytes) -> ExtractedText:
        self.validate(content)
        with owned_temp_file(content, suffix=".pdf", directory=self.temp_dir) as path:
            if self.backend == "pypdf":
                text, page_count = self._run_pypdf(path)
            else:
                text, page_count = self._run_pdftotext(path), None

        if not text.strip():
            logger.warning("extract_empty_output backend=%s bytes=%s", self.backend, len(content))
            raise ExtractionError("No extractable text found in resume.", code="extraction_empty")
        return ExtractedText(text=text, page_count=page_count, backend=self.backend)

    def _run_pdftotext(self, path: Path) -> str:
        try:
            completed = subprocess.run(
                [self.executable, "-layout", "-enc", "UTF-8", str(path), "-"],
                capture_output=True,
                timeout=self.timeout_s,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            logger.error("extract_timeout executable=%s timeout_s=%s", self.executable, self.timeout_s)
            raise ExtractionError(code="extraction_timeout") from exc
        except OSError as exc:
            logger.error("extract_exec_failed executable=%s: %s", self.executable, exc)
            raise ExtractionError(code="extraction_unavailable") from exc

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            logger.error("extract_tool_failed returncode=%s stderr=%s", completed.returncode, stderr[:500])
            raise ExtractionError()
        return completed.stdout.decode("utf-8", errors="replace")

    def _run_pypdf(self, path: Path) -> tuple[str, int]:
        try:
            reader = PdfReader(str(path))
            parts = [(page.extract_text() or "").strip() for page in reader.pages]
        except Exception as exc:  # noqa: BLE001
            logger.error("extract_pypdf_failed: %s", exc)
            raise ExtractionError() from exc
        return "\n".join(part for part in parts if part), len(reader.pages)


def default_extractor() -> PdfTextExtractor:
    return PdfTextExtractor(
        temp_dir=settings.temp_dir,
        backend=settings.pdf_extractor,
        executable=settings.pdftotext_path,
        timeout_s=settings.extract_timeout_s,
        max_bytes=settings.max_upload_bytes,
    )
