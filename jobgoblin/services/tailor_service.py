from __future__ import annotations

import logging
from dataclasses import dataclass

from jobgoblin.core.errors import ValidationFailed
from jobgoblin.integrations import preview
from jobgoblin.parsing.extract import PdfTextExtractor, default_extractor
from jobgoblin.rendering.pdf import ResumePdfRenderer
from jobgoblin.schemas.tailor import CandidateContact, TailoredSections
from jobgoblin.tailoring.contact import infer_contact
from jobgoblin.tailoring.orchestrator import request_tailored_text
from jobgoblin.tailoring.sections import parse_tailored_text

logger = logging.getLogger(__name__)

MAX_JOB_DESCRIPTION_CHARS = 50000


@dataclass(frozen=True)
class TailoringOutcome:
    pdf_bytes: bytes
    page_count: int
    contact: CandidateContact
    sections: TailoredSections


def validate_job_description(job_description: str | None) -> str:
    value = (job_description or "").strip()
    if not value:
        raise ValidationFailed("Job description is required.")
    if len(value) > MAX_JOB_DESCRIPTION_CHARS:
        raise ValidationFailed(f"Job description must be at most {MAX_JOB_DESCRIPTION_CHARS} characters.")
    return value


def run_tailoring(
    pdf_bytes: bytes,
    job_description: str,
    *,
    contact_fields: dict[str, str | None] | None = None,
    extractor: PdfTextExtractor | None = None,
    renderer: ResumePdfRenderer | None = None,
) -> TailoringOutcome:
    """Extract the resume text, tailor it to the job description and lay it out as a PDF."""
    job_description = validate_job_description(job_description)
    extracted = (extractor or default_extractor()).extract(pdf_bytes)
    contact = infer_contact(extracted.text, **(contact_fields or {}))

    reply = request_tailored_text(extracted.text, job_description)
    sections = parse_tailored_text(reply)
    if sections.missing:
        logger.warning("tailor_sections_incomplete missing=%s", ",".join(kind.value for kind in sections.missing))

    renderer = renderer or ResumePdfRenderer()
    rendered = renderer.render(contact, sections)
    logger.info(
        "tailor_rendered pages=%s projects=%s roles=%s",
        renderer.page_count,
        len(sections.highlighted_projects),
        len(sections.professional_experience),
    )
    return TailoringOutcome(
        pdf_bytes=rendered,
        page_count=renderer.page_count,
        contact=contact,
        sections=sections,
    )


def publish_tailored_preview(owner_id: str, pdf_bytes: bytes) -> str:
    return preview.publish_preview(owner_id, pdf_bytes)
