from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from jobgoblin.core.auth import AuthContext, require_user
from jobgoblin.core.errors import ValidationFailed
from jobgoblin.core.uploads import read_upload
from jobgoblin.schemas.auth import MessageResponse
from jobgoblin.schemas.resumes import (
    ResumeListResponse,
    ResumeUploadResponse,
    TailoredResumeUploadResponse,
)
from jobgoblin.services import resume_service

router = APIRouter()


@router.get("/resumes", response_model=ResumeListResponse)
def list_resumes(response: Response, auth: AuthContext = Depends(require_user)):
    response.headers.update(auth.session_headers())
    return ResumeListResponse(resumes=resume_service.list_resumes(auth.user.id))


@router.post("/resumes/upload", response_model=ResumeUploadResponse, status_code=status.HTTP_201_CREATED)
def upload_resume(
    response: Response,
    resume: UploadFile | None = File(default=None),
    auth: AuthContext = Depends(require_user),
):
    if resume is None:
        raise ValidationFailed("No file uploaded")
    response.headers.update(auth.session_headers())
    record = resume_service.upload_resume(
        auth.user.id,
        filename=resume.filename or "",
        content=read_upload(resume),
        content_type=resume.content_type or "application/octet-stream",
    )
    return ResumeUploadResponse(message="Resume uploaded successfully", fileUrl=record.resume_file, resume=record)


@router.post(
    "/resumes/upload-tailored",
    response_model=TailoredResumeUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_tailored_resume(
    response: Response,
    resume: UploadFile | None = File(default=None),
    resume_name: str | None = Form(default=None),
    auth: AuthContext = Depends(require_user),
):
    if resume is None:
        raise ValidationFailed("No file uploaded")
    response.headers.update(auth.session_headers())
    record = resume_service.upload_tailored_resume(
        auth.user.id,
        content=read_upload(resume),
        resume_name=resume_name or resume.filename,
    )
    return TailoredResumeUploadResponse(
        message="Tailored resume uploaded successfully",
        fileUrl=record.resume_file,
        previewUrl=record.preview_url,
        resume=record,
    )


@router.delete("/resumes/{resume_id}", response_model=MessageResponse)
def delete_resume(resume_id: str, response: Response, auth: AuthContext = Depends(require_user)):
    response.headers.update(auth.session_headers())
    resume_service.delete_resume(auth.user.id, resume_id)
    return MessageResponse(message="Resume deleted successfully")
