from __future__ import annotations

from jobgoblin.ai.types import ChatMessage
from jobgoblin.schemas.tailor import SECTION_ORDER

SYSTEM_PROMPT = """You are a professional resume tailoring assistant.
DO NOT reintroduce any name, phone number, email, or location.
Return EXACTLY five sections, in this order, each starting with its heading on its own line:
{headings}

Formatting rules:
- Summary: 3-5 sentences of plain prose. No personal projects.
- Technical Skills: one skill group per line, each line starting with "- ".
- Highlighted Projects: for each project, a title line starting with "• " followed by
  detail lines starting with "- ". Leave one blank line between projects.
- Professional Experience: for each role, a title line starting with "• "
  (role, company, dates) followed by detail lines starting with "- ". Leave one blank
  line between roles.
- Education: one entry per line, each line starting with "- ".

Do not provide any other sections or headings.
Do not include any personal identifiers.
Do not use the phrase "the candidate".
Do not use bold or other markdown emphasis.
"""

USER_TEMPLATE = """Here is my original resume text:
---
{resume_text}
---

Here is the job description:
---
{job_description}
---

Please tailor the resume text to align with the job description, returning EXACTLY
the five sections listed in the instructions, in that order.
"""


def section_headings() -> list[str]:
    return [f"## {kind.value}" for kind in SECTION_ORDER]


def build_messages(resume_text: str, job_description: str) -> list[ChatMessage]:
    headings = "\n".join(f"{index}) {heading}" for index, heading in enumerate(section_headings(), start=1))
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT.format(headings=headings)),
        ChatMessage(
            role="user",
            content=USER_TEMPLATE.format(
                resume_text=resume_text.strip(),
                job_description=job_description.strip(),
            ),
        ),
    ]
