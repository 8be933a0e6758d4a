from __future__ import annotations

import logging
from pathlib import PurePath

from jobgoblin.core.config import settings
from jobgoblin.core.errors import NotFound, PayloadTooLarge, UpstreamError, ValidationFailed
from jobgoblin.integrations import preview, records, storage
from jobgoblin.parsing.extract import PDF_MAGIC
from jobgoblin.schemas.resumes import ResumeRecord

logger = logging.getLogger(__name__)

RESUME_CONTENT_TYPES = {
    "application/pdf": "pdf",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "text/plain": "txt",
}
ALLOWED_EXTENSIONS = set(RESUME_CONTENT_TYPES.values())


def _extension(filename: str, content_type: str) -> str:
    suffix = PurePath(filename or "").suffix.lower().lstrip(".")
    if suffix:
        return suffix
    return RESUME_CONTENT_TYPES.get(content_type, "")


def _check_payload(content: bytes) -> None:
    if not content:
        raise ValidationFailed("No file uploaded")
    if len(content) > settings.max_upload_bytes:
        raise PayloadTooLarge(
            f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB."
        )


def _discard_objects(paths: list[str]) -> None:
    try:
        storage.remove(paths)
    except UpstreamError:
        logger.error("resume_orphan_objects paths=%s", paths)


def list_resumes(owner_id: str) -> list[ResumeRecord]:
    return [ResumeRecord.model_validate(row) for row in records.list_by_owner("resumes", owner_id)]


def upload_resume(owner_id: str, *, filename: str, content: bytes, content_type: str) -> ResumeRecord:
    """Store the file, then its metadata row. A failed row insert removes the stored object."""
    _check_payload(content)
    extension = _extension(filename, content_type)
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationFailed(
            f"Unsupported file type '.{extension}'. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}."
        )

    path = storage.object_path(owner_id, extension)
    file_url = storage.upload(path, content, content_type)
    try:
        row = records.insert(
            "resumes",
            {
                "user_id": owner_id,
                "resume_name": filename or PurePath(path).name,
                "resume_file": file_url,
                "file_type": content_type,
            },
        )
    except UpstreamError:
        _discard_objects([path])
        raise
    logger.info("resume_uploaded owner=%s path=%s bytes=%s", owner_id, path, len(content))
    return ResumeRecord.model_validate(row)


def upload_tailored_resume(owner_id: str, *, content: bytes, resume_name: str | None = None) -> ResumeRecord:
    """Store a tailored PDF together with a page-1 preview image and one metadata row."""
    _check_payload(content)
    if content.lstrip()[: len(PDF_MAGIC)] != PDF_MAGIC:
        raise ValidationFailed("Tailored resume must be a PDF file.")

    path = storage.object_path(owner_id, "pdf", folder="tailored")
    file_url = storage.upload(path, content, "application/pdf")
    stored = [path]
    try:
        preview_url = preview.publish_preview(owner_id, content)
        preview_path = storage.path_from_public_url(preview_url)
        if preview_path:
            stored.append(preview_path)
        row = records.insert(
            "resumes",
            {
                "user_id": owner_id,
                "resume_name": (resume_name or "").strip() or "Tailored Resume.pdf",
                "resume_file": file_url,
                "preview_url": preview_url,
                "file_type": "application/pdf",
            },
        )
    except UpstreamError:
        _discard_objects(stored)
        raise
    logger.info("resume_tailored_uploaded owner=%s path=%s", owner_id, path)
    return ResumeRecord.model_validate(row)


def delete_resume(owner_id: str, resume_id: str) -> None:
    """Remove the stored objects first; the row is only deleted once storage removal succeeded."""
    row = records.get_owned("resumes", resume_id, owner_id)
    if row is None:
        raise NotFound("Resume not found")

    paths = [
        path
        for path in (
            storage.path_from_public_url(row.get("resume_file") or ""),
            storage.path_from_public_url(row.get("preview_url") or ""),
        )
        if path
    ]
    storage.remove(paths)
    records.delete_owned("resumes", resume_id, owner_id)
    logger.info("resume_deleted owner=%s id=%s objects=%s", owner_id, resume_id, len(paths))
