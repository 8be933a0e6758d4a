from __future__ import annotations

from io import BytesIO

from reportlab.lib.colors import HexColor, black
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from jobgoblin.rendering.cursor import PageCursor
from jobgoblin.rendering.layout import FONT_BOLD, FONT_REGULAR, TextStyle, wrap_words
from jobgoblin.rendering.links import is_highlighted
from jobgoblin.schemas.tailor import SECTION_ORDER, CandidateContact, Entry, SectionKind, TailoredSections
from jobgoblin.tailoring.sections import sanitize_pdf_text

LINK_COLOR = HexColor("#1a4fa0")
MUTED_COLOR = HexColor("#333333")

BULLET = "•"
BULLET_INDENT = 15
BULLET_GAP = 5
ENTRY_GAP = 10
SECTION_GAP = 14

NAME_STYLE = TextStyle(FONT_BOLD, 22, 28)
TITLE_STYLE = TextStyle(FONT_REGULAR, 14, 20, MUTED_COLOR)
CONTACT_STYLE = TextStyle(FONT_REGULAR, 10.5, 14)
HEADING_STYLE = TextStyle(FONT_BOLD, 13, 20)
BODY_STYLE = TextStyle(FONT_REGULAR, 10.5, 14)
ENTRY_TITLE_STYLE = TextStyle(FONT_BOLD, 11, 15)


class ResumePdfRenderer:
    def __init__(self, *, page_size: tuple[float, float] = LETTER, margin: float = 50):
        self.page_size = page_size
        self.margin = margin
        self.page_count = 0

    def render(self, contact: CandidateContact, sections: TailoredSections) -> bytes:
        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=self.page_size)
        pdf.setTitle(sanitize_pdf_text(f"{contact.name} - Resume"))
        cursor = PageCursor(pdf, page_size=self.page_size, margin=self.margin)

        self._draw_header(cursor, contact)
        for kind in SECTION_ORDER:
            self._draw_heading(cursor, kind.value.upper())
            self._draw_section(cursor, kind, sections)

        pdf.save()
        self.page_count = cursor.page_count
        return buffer.getvalue()

    def _draw_section(self, cursor: PageCursor, kind: SectionKind, sections: TailoredSections) -> None:
        if kind is SectionKind.SUMMARY:
            self._draw_paragraph(cursor, sections.summary, BODY_STYLE)
        elif kind is SectionKind.TECHNICAL_SKILLS:
            self._draw_bulleted_list(cursor, sections.technical_skills)
        elif kind is SectionKind.HIGHLIGHTED_PROJECTS:
            self._draw_entries(cursor, sections.highlighted_projects)
        elif kind is SectionKind.PROFESSIONAL_EXPERIENCE:
            self._draw_entries(cursor, sections.professional_experience)
        elif kind is SectionKind.EDUCATION:
            self._draw_bulleted_list(cursor, sections.education)

    def _styled(self, line: str, style: TextStyle) -> TextStyle:
        if is_highlighted(line):
            return TextStyle(style.font, style.size, style.leading, LINK_COLOR)
        return style

    def _draw_wrapped(self, cursor: PageCursor, text: str, style: TextStyle, x: float, max_width: float) -> int:
        lines = wrap_words(sanitize_pdf_text(text), style, max_width)
        for line in lines:
            cursor.draw_line(line, self._styled(line, style), x)
        return len(lines)

    def _draw_header(self, cursor: PageCursor, contact: CandidateContact) -> None:
        width = cursor.usable_width
        self._draw_wrapped(cursor, contact.name, NAME_STYLE, cursor.left, width)
        self._draw_wrapped(cursor, contact.title, TITLE_STYLE, cursor.left, width)
        contact_line = contact.contact_line()
        if contact_line:
            self._draw_wrapped(cursor, contact_line, CONTACT_STYLE, cursor.left, width)
        if contact.social:
            self._draw_wrapped(cursor, contact.social, CONTACT_STYLE, cursor.left, width)

    def _draw_heading(self, cursor: PageCursor, title: str) -> None:
        cursor.gap(SECTION_GAP)
        # Keep the heading on the same page as its first line of content.
        cursor.ensure(HEADING_STYLE.leading + BODY_STYLE.leading)
        cursor.draw_line(sanitize_pdf_text(title), HEADING_STYLE, cursor.left, link=False)
        cursor.pdf.setStrokeColor(black)
        cursor.draw_rule(cursor.left, cursor.left + cursor.usable_width)

    def _draw_paragraph(self, cursor: PageCursor, text: str, style: TextStyle) -> None:
        if text:
            self._draw_wrapped(cursor, text, style, cursor.left, cursor.usable_width)

    def _draw_bullet(self, cursor: PageCursor, text: str, x: float, style: TextStyle) -> None:
        text_x = x + BULLET_INDENT
        max_width = cursor.left + cursor.usable_width - text_x
        lines = wrap_words(sanitize_pdf_text(text), style, max_width)
        for index, line in enumerate(lines):
            line_style = self._styled(line, style)
            if index == 0:
                cursor.draw_marker(BULLET, style, x)
            cursor.draw_line(line, line_style, text_x)

    def _draw_bulleted_list(self, cursor: PageCursor, bullets: list[str]) -> None:
        for bullet in bullets:
            self._draw_bullet(cursor, bullet, cursor.left, BODY_STYLE)
            cursor.gap(BULLET_GAP)

    def _draw_entries(self, cursor: PageCursor, entries: list[Entry]) -> None:
        for entry in entries:
            cursor.ensure(ENTRY_TITLE_STYLE.leading + BODY_STYLE.leading)
            self._draw_wrapped(cursor, entry.title, ENTRY_TITLE_STYLE, cursor.left, cursor.usable_width)
            for detail in entry.details:
                self._draw_bullet(cursor, detail, cursor.left + BULLET_INDENT, BODY_STYLE)
            cursor.gap(ENTRY_GAP)
