from __future__ import annotations

import re

from jobgoblin.schemas.tailor import CandidateContact

PHONE_PATTERN = re.compile(r"(\d{3}[-.\s]?\d{3}[-.\s]?\d{4})")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
SOCIAL_PATTERN = re.compile(
    r"((?:https?://)?(?:www\.)?(?:linkedin\.com|github\.com)/[^\s|,]+)",
    flags=re.IGNORECASE,
)

DEFAULT_NAME = "Candidate Name"
DEFAULT_TITLE = "Candidate Title"
SOCIAL_SCAN_LINES = 6


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in re.split(r"\r?\n", text or "") if line.strip()]


def infer_contact(
    resume_text: str,
    *,
    name: str | None = None,
    title: str | None = None,
    location: str | None = None,
    phone: str | None = None,
    email: str | None = None,
    social: str | None = None,
) -> CandidateContact:
    """Fill in missing contact fields from the top of the extracted resume text.

    Line 1 gives the name (text before the first comma), line 2 the title and
    line 3 the location (text before ``|``), phone and email. Best effort only.
    """
    lines = _non_empty_lines(resume_text)

    name = _clean(name)
    if not name:
        name = lines[0].split(",")[0].strip() if lines else ""
    title = _clean(title)
    if not title:
        title = lines[1] if len(lines) > 1 else ""

    location, phone, email = _clean(location), _clean(phone), _clean(email)
    if not (location and phone and email):
        contact_line = lines[2] if len(lines) > 2 else ""
        if not location:
            location = contact_line.split("|")[0].strip()
        if not phone:
            match = PHONE_PATTERN.search(contact_line)
            phone = match.group(0) if match else ""
        if not email:
            match = EMAIL_PATTERN.search(contact_line)
            email = match.group(0) if match else ""

    social = _clean(social)
    if not social:
        found: list[str] = []
        for line in lines[:SOCIAL_SCAN_LINES]:
            for match in SOCIAL_PATTERN.findall(line):
                if match not in found:
                    found.append(match)
        social = " | ".join(found)

    return CandidateContact(
        name=name or DEFAULT_NAME,
        title=title or DEFAULT_TITLE,
        location=location,
        phone=phone,
        email=email,
        social=social,
    )
