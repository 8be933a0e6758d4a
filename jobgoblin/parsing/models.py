from __future__ import annotations

from pydantic import BaseModel, field_validator


class ExtractedText(BaseModel):
    text: str
    page_count: int | None = None
    backend: str

    @field_validator("backend")
    @classmethod
    def _validate_backend(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdftotext", "pypdf"}:
            raise ValueError("backend must be one of: pdftotext, pypdf")
        return normalized
