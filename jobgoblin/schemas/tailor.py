from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SectionKind(str, Enum):
    SUMMARY = "Summary"
    TECHNICAL_SKILLS = "Technical Skills"
    HIGHLIGHTED_PROJECTS = "Highlighted Projects"
    PROFESSIONAL_EXPERIENCE = "Professional Experience"
    EDUCATION = "Education"


SECTION_ORDER: tuple[SectionKind, ...] = (
    SectionKind.SUMMARY,
    SectionKind.TECHNICAL_SKILLS,
    SectionKind.HIGHLIGHTED_PROJECTS,
    SectionKind.PROFESSIONAL_EXPERIENCE,
    SectionKind.EDUCATION,
)


class Entry(BaseModel):
    title: str
    details: list[str] = Field(default_factory=list)


class TailoredSections(BaseModel):
    summary: str = ""
    technical_skills: list[str] = Field(default_factory=list)
    highlighted_projects: list[Entry] = Field(default_factory=list)
    professional_experience: list[Entry] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)
    missing: list[SectionKind] = Field(default_factory=list)


class CandidateContact(BaseModel):
    name: str = "Candidate Name"
    title: str = "Candidate Title"
    location: str = ""
    phone: str = ""
    email: str = ""
    social: str = ""

    def contact_line(self) -> str:
        parts = [part for part in (self.location, self.phone, self.email) if part]
        return " | ".join(parts)


class TailorPreviewResponse(BaseModel):
    tailoredPreviewUrl: str
