import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from jobgoblin.core.auth import AuthContext, require_user
from jobgoblin.core.config import settings
from jobgoblin.core.errors import ValidationFailed
from jobgoblin.core.rate_limit import rate_limit
from jobgoblin.core.uploads import read_upload
from jobgoblin.schemas.tailor import TailorPreviewResponse
from jobgoblin.services.tailor_service import (
    publish_tailored_preview,
    run_tailoring,
    validate_job_description,
)

router = APIRouter()
logger = logging.getLogger(__name__)

DELIVERY_MODES = {"pdf", "preview"}


@router.post("/tailor/tailor-resume")
@rate_limit(settings.tailor_rate_limit)
def tailor_resume(
    request: Request,
    resume: UploadFile | None = File(default=None),
    job_description: str | None = Form(default=None),
    candidate_name: str | None = Form(default=None),
    candidate_title: str | None = Form(default=None),
    candidate_location: str | None = Form(default=None),
    candidate_phone: str | None = Form(default=None),
    candidate_email: str | None = Form(default=None),
    candidate_social: str | None = Form(default=None),
    delivery: str = Form(default="pdf"),
    auth: AuthContext = Depends(require_user),
):
    _ = request
    if resume is None:
        raise ValidationFailed("No resume file uploaded.")
    job_description = validate_job_description(job_description)
    delivery = (delivery or "pdf").strip().lower()
    if delivery not in DELIVERY_MODES:
        raise ValidationFailed("delivery must be either 'pdf' or 'preview'.")

    outcome = run_tailoring(
        read_upload(resume),
        job_description,
        contact_fields={
            "name": candidate_name,
            "title": candidate_title,
            "location": candidate_location,
            "phone": candidate_phone,
            "email": candidate_email,
            "social": candidate_social,
        },
    )
    logger.info("tailor_completed user=%s delivery=%s pages=%s", auth.user.id, delivery, outcome.page_count)

    headers = auth.session_headers()
    if delivery == "preview":
        preview_url = publish_tailored_preview(auth.user.id, outcome.pdf_bytes)
        return JSONResponse(content=TailorPreviewResponse(tailoredPreviewUrl=preview_url).model_dump(), headers=headers)

    headers["Content-Disposition"] = "attachment; filename=tailored_resume.pdf"
    return Response(content=outcome.pdf_bytes, media_type="application/pdf", headers=headers)
