"""line wrapping and page geometry for the PDF exporter."""

import re
from dataclasses import dataclass
from typing import Callable

# pdfkit-compatible defaults: US Letter, one-inch margins
PAGE_WIDTH = 612.0
PAGE_HEIGHT = 792.0
MARGIN = 72.0
LINE_HEIGHT_FACTOR = 1.156
TAB_WIDTH = 4

_TOKEN_PATTERN = re.compile(r"\S+|\s+")


@dataclass(frozen=True)
class PageGeometry:
    """printable area of a page in points."""

    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    margin: float = MARGIN

    @property
    def text_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        return self.margin

    @property
    def bottom(self) -> float:
        return self.height - self.margin


def line_height(font_size: float) -> float:
    """height of one text line including the font's line gap."""
    return font_size * LINE_HEIGHT_FACTOR


def wrap_text(text: str, width: float, measure: Callable[[str], float]) -> list[str]:
    """
    wraps text to lines no wider than width.

    Each newline starts a new line; an empty paragraph yields an empty line.
    Breaks at whitespace, and inside words wider than a whole line.

    Args:
        text: text to wrap
        width: maximum line width
        measure: returns the rendered width of a string

    Returns:
        list of lines without trailing whitespace
    """
    lines: list[str] = []
    for paragraph in text.expandtabs(TAB_WIDTH).split("\n"):
        lines.extend(_wrap_paragraph(paragraph, width, measure))
    return lines


def _wrap_paragraph(
    paragraph: str, width: float, measure: Callable[[str], float]
) -> list[str]:
    if not paragraph or measure(paragraph) <= width:
        return [paragraph.rstrip()]

    lines: list[str] = []
    current = ""
    for token in _TOKEN_PATTERN.findall(paragraph):
        candidate = current + token
        if measure(candidate.rstrip()) <= width:
            current = candidate
            continue

        # whitespace before the break point is dropped with the line end
        if current.strip():
            lines.append(current.rstrip())
            current = ""

        pieces = _break_word(current + token, width, measure)
        lines.extend(pieces[:-1])
        current = pieces[-1]

    if current.strip() or not lines:
        lines.append(current.rstrip())
    return lines


def _break_word(word: str, width: float, measure: Callable[[str], float]) -> list[str]:
    """splits a word into chunks that each fit the width (at least one char)."""
    pieces: list[str] = []
    current = ""
    for char in word:
        if current and measure(current + char) > width:
            pieces.append(current)
            current = char
        else:
            current += char
    pieces.append(current)
    return pieces
