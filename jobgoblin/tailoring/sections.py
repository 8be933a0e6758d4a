from __future__ import annotations

import logging
import re

from jobgoblin.schemas.tailor import SECTION_ORDER, Entry, SectionKind, TailoredSections

logger = logging.getLogger(__name__)

BULLET_GLYPH = "•"
BULLET_PLACEHOLDER = "__JG_BULLET__"
MAX_SUMMARY_SENTENCES = 5

_BULLET_LINE = re.compile(r"^[-•]\s+")
_TITLE_LINE = re.compile(r"^[•*]\s*")
_DETAIL_LINE = re.compile(r"^-\s*")
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")
_UNSAFE_CHARS = re.compile(r"[^\x20-\x7E]")
_HEADING_LINE = re.compile(
    r"^\s*(#{0,6})\s*(" + "|".join(re.escape(kind.value) for kind in SECTION_ORDER) + r")\s*:?\s*$",
    flags=re.IGNORECASE,
)
_CANDIDATE_PHRASE = re.compile(r"the candidate", flags=re.IGNORECASE)

_ASCII_FALLBACKS = str.maketrans(
    {
        "–": "-",
        "—": "-",
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
        "…": "...",
        "\u00a0": " ",
        "\t": " ",
        "\r": " ",
        "\n": " ",
    }
)

_KIND_BY_NAME = {kind.value.lower(): kind for kind in SECTION_ORDER}


def clean_model_text(text: str) -> str:
    """Drop markdown emphasis and third-person phrasing from a model reply."""
    cleaned = (text or "").replace("**", "")
    cleaned = _CANDIDATE_PHRASE.sub("", cleaned)
    return cleaned.strip()


def sanitize_pdf_text(text: str | None) -> str:
    """Reduce text to characters the standard PDF fonts can draw.

    Bullet glyphs survive as ``*``; everything outside printable ASCII is removed.
    """
    if not text:
        return ""
    value = text.replace(BULLET_GLYPH, BULLET_PLACEHOLDER).translate(_ASCII_FALLBACKS)
    value = _UNSAFE_CHARS.sub("", value)
    return value.replace(BULLET_PLACEHOLDER, "*")


def extract_section(text: str, header: str, next_header: str | None = None) -> str:
    """Return the text after ``header`` up to ``next_header`` (or the end of the text).

    Header matching is case-insensitive. Returns an empty string when ``header``
    does not occur.
    """
    if not text or not header:
        return ""
    start_match = re.search(re.escape(header), text, flags=re.IGNORECASE)
    if start_match is None:
        return ""
    start = start_match.end()
    end = len(text)
    if next_header:
        end_match = re.compile(re.escape(next_header), flags=re.IGNORECASE).search(text, start)
        if end_match is not None:
            end = end_match.start()
    return text[start:end].strip()


def _heading_kind(line: str) -> SectionKind | None:
    match = _HEADING_LINE.match(line)
    if match is None:
        return None
    return _KIND_BY_NAME.get(match.group(2).lower())


def split_sections(text: str) -> dict[SectionKind, str]:
    """Split a model reply into its five sections.

    Walks the reply line by line; a heading line switches the active section and
    any other line is appended to it. Text before the first heading is dropped.
    Sections whose heading never appears come back as empty strings.
    """
    buckets: dict[SectionKind, list[str]] = {kind: [] for kind in SECTION_ORDER}
    seen: set[SectionKind] = set()
    active: SectionKind | None = None

    for raw_line in re.split(r"\r?\n", text or ""):
        kind = _heading_kind(raw_line)
        if kind is not None:
            active = kind
            seen.add(kind)
            continue
        if active is not None:
            buckets[active].append(raw_line.rstrip())

    for kind in SECTION_ORDER:
        if kind not in seen:
            logger.warning("tailor_section_missing section=%s", kind.value)

    return {kind: "\n".join(lines).strip() for kind, lines in buckets.items()}


def parse_bullets(text: str) -> list[str]:
    """Lines starting with ``-`` or a bullet glyph plus whitespace, prefix removed."""
    bullets: list[str] = []
    for line in re.split(r"\r?\n", text or ""):
        stripped = line.strip()
        match = _BULLET_LINE.match(stripped)
        if match:
            bullets.append(stripped[match.end():])
    return bullets


def parse_nested_bullets(text: str) -> list[Entry]:
    """Group ``•`` title lines with the ``-`` detail lines that follow them."""
    entries: list[Entry] = []
    current: Entry | None = None

    for line in re.split(r"\r?\n", text or ""):
        stripped = line.strip()
        if not stripped:
            continue
        title_match = _TITLE_LINE.match(stripped)
        if title_match:
            if current is not None:
                entries.append(current)
            current = Entry(title=stripped[title_match.end():].strip())
            continue
        detail_match = _DETAIL_LINE.match(stripped)
        if detail_match and current is not None:
            detail = stripped[detail_match.end():].strip()
            if detail:
                current.details.append(detail)

    if current is not None:
        entries.append(current)
    return entries


parse_nested_project_bullets = parse_nested_bullets
parse_nested_experience_bullets = parse_nested_bullets


def limit_sentences(text: str, max_sentences: int) -> str:
    sentences = [sentence.strip() for sentence in _SENTENCE.findall(text or "")]
    if len(sentences) <= max_sentences:
        return (text or "").strip()
    return " ".join(sentences[:max_sentences]).strip()


def parse_tailored_text(raw_text: str) -> TailoredSections:
    cleaned = clean_model_text(raw_text)
    sections = split_sections(cleaned)
    summary = " ".join(sections[SectionKind.SUMMARY].split())
    return TailoredSections(
        summary=limit_sentences(summary, MAX_SUMMARY_SENTENCES),
        technical_skills=parse_bullets(sections[SectionKind.TECHNICAL_SKILLS]),
        highlighted_projects=parse_nested_project_bullets(sections[SectionKind.HIGHLIGHTED_PROJECTS]),
        professional_experience=parse_nested_experience_bullets(sections[SectionKind.PROFESSIONAL_EXPERIENCE]),
        education=parse_bullets(sections[SectionKind.EDUCATION]),
        missing=[kind for kind in SECTION_ORDER if not sections[kind]],
    )
