from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from jobgoblin.schemas.auth import MessageResponse


class ResumeRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    user_id: str
    resume_name: str
    resume_file: str
    preview_url: str | None = None
    file_type: str | None = None


class ResumeListResponse(BaseModel):
    resumes: list[ResumeRecord]


class ResumeUploadResponse(MessageResponse):
    fileUrl: str
    resume: ResumeRecord


class TailoredResumeUploadResponse(ResumeUploadResponse):
    previewUrl: str | None = None
