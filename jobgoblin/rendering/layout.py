from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.colors import Color, black
from reportlab.pdfbase import pdfmetrics

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


@dataclass(frozen=True)
class TextStyle:
    font: str
    size: float
    leading: float
    color: Color = black


def text_width(text: str, style: TextStyle) -> float:
    return pdfmetrics.stringWidth(text, style.font, style.size)


def wrap_words(text: str, style: TextStyle, max_width: float) -> list[str]:
    """Greedy word wrap measured with the style's font metrics.

    A single word wider than ``max_width`` is kept whole on its own line.
    """
    lines: list[str] = []
    current = ""
    for word in (text or "").split():
        candidate = f"{current} {word}" if current else word
        if current and text_width(candidate, style) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
