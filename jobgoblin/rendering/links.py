from __future__ import annotations

import re
from dataclasses import dataclass

LINK_KEYWORDS = ("linkedin", "github")
EXCLUDED_TERMS = ("email", "phone")

URL_PATTERN = re.compile(
    r"(?:https?://|www\.)[^\s|,;<>\"']+"
    r"|(?<![\w./@-])(?:[\w-]+\.)*(?:linkedin\.com|github\.com)/[^\s|,;<>\"']*",
    flags=re.IGNORECASE,
)
_TRAILING_PUNCTUATION = ".,;:)]}'\""


@dataclass(frozen=True)
class UrlSpan:
    start: int
    end: int
    text: str

    @property
    def href(self) -> str:
        if re.match(r"^https?://", self.text, flags=re.IGNORECASE):
            return self.text
        return f"https://{self.text}"


def is_highlighted(line: str) -> bool:
    lower = (line or "").lower()
    if any(term in lower for term in EXCLUDED_TERMS):
        return False
    return any(keyword in lower for keyword in LINK_KEYWORDS)


def find_urls(line: str) -> list[UrlSpan]:
    spans: list[UrlSpan] = []
    for match in URL_PATTERN.finditer(line or ""):
        text = match.group(0).rstrip(_TRAILING_PUNCTUATION)
        if not text:
            continue
        spans.append(UrlSpan(start=match.start(), end=match.start() + len(text), text=text))
    return spans
