from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from jobgoblin.schemas.auth import MessageResponse


class ApplicationCreate(BaseModel):
    company_name: str = Field(min_length=1, max_length=200)
    job_title: str = Field(min_length=1, max_length=200)
    job_link: str | None = Field(default=None, max_length=2000)
    job_description: str | None = Field(default=None, max_length=50000)
    date_applied: str | None = Field(default=None, max_length=40)
    status: str | None = Field(default="applied", max_length=40)
    resume_used: str | None = Field(default=None, max_length=2000)


class ApplicationRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    user_id: str
    company_name: str | None = None
    job_title: str | None = None
    job_link: str | None = None
    job_description: str | None = None
    date_applied: str | None = None
    status: str | None = None
    resume_used: str | None = None


class ApplicationListResponse(BaseModel):
    applications: list[ApplicationRecord]


class ApplicationCreateResponse(MessageResponse):
    application: ApplicationRecord
