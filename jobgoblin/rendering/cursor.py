from __future__ import annotations

from reportlab.pdfgen import canvas

from jobgoblin.rendering.layout import TextStyle, text_width
from jobgoblin.rendering.links import find_urls


class PageCursor:
    """Owns the canvas and the vertical position across every drawing call.

    ``y`` is the top of the remaining free space on the current page. Drawing
    a line consumes one leading; any line that would cross the bottom margin
    is moved to a fresh page first.
    """

    def __init__(self, pdf: canvas.Canvas, *, page_size: tuple[float, float], margin: float):
        self.pdf = pdf
        self.page_width, self.page_height = page_size
        self.margin = margin
        self.top = self.page_height - margin
        self.bottom = margin
        self.y = self.top
        self.page_count = 1
        self.lowest_baseline = self.top

    @property
    def left(self) -> float:
        return self.margin

    @property
    def usable_width(self) -> float:
        return self.page_width - 2 * self.margin

    def new_page(self) -> None:
        self.pdf.showPage()
        self.page_count += 1
        self.y = self.top

    def ensure(self, height: float) -> bool:
        """Start a new page unless ``height`` points fit above the bottom margin."""
        if self.y - height < self.bottom and self.y < self.top:
            self.new_page()
            return True
        return False

    def advance(self, height: float) -> bool:
        started = self.ensure(height)
        self.y -= height
        return started

    def gap(self, height: float) -> None:
        # Never paginates on its own; the next line does.
        self.y = max(self.y - height, self.bottom)

    def draw_line(self, text: str, style: TextStyle, x: float, *, link: bool = True) -> float:
        self.ensure(style.leading)
        baseline = self.y - style.size
        self.pdf.setFont(style.font, style.size)
        self.pdf.setFillColor(style.color)
        self.pdf.drawString(x, baseline, text)
        if link:
            for span in find_urls(text):
                x1 = x + text_width(text[: span.start], style)
                x2 = x1 + text_width(span.text, style)
                self.pdf.linkURL(span.href, (x1, baseline - 2, x2, baseline + style.size), relative=0)
        self.y -= style.leading
        self.lowest_baseline = min(self.lowest_baseline, baseline)
        return baseline

    def draw_marker(self, marker: str, style: TextStyle, x: float) -> None:
        """Draw a glyph on the line about to be drawn, without consuming space."""
        self.ensure(style.leading)
        self.pdf.setFont(style.font, style.size)
        self.pdf.setFillColor(style.color)
        self.pdf.drawString(x, self.y - style.size, marker)

    def draw_rule(self, x1: float, x2: float, *, offset: float = 3.0, width: float = 0.5) -> None:
        rule_y = self.y + offset
        self.pdf.setLineWidth(width)
        self.pdf.line(x1, rule_y, x2, rule_y)
