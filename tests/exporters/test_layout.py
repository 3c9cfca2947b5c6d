"""tests for PDF line wrapping and page geometry."""

from chatgpt2docs.exporters.layout import (
    PageGeometry,
    line_height,
    wrap_text,
)


def measure(text: str) -> float:
    """one unit per character."""
    return float(len(text))


def test_short_text_is_one_line() -> None:
    """text narrower than the width stays on one line."""
    assert wrap_text("hello", 10, measure) == ["hello"]


def test_newlines_start_new_lines() -> None:
    """each newline starts a new line; blank lines are kept."""
    assert wrap_text("a\n\nb", 10, measure) == ["a", "", "b"]


def test_wraps_at_whitespace() -> None:
    """words move to the next line when they don't fit."""
    assert wrap_text("hello world foo", 10, measure) == ["hello", "world foo"]


def test_breaks_long_words() -> None:
    """words wider than a line are split across lines."""
    assert wrap_text("abcdefghijkl", 5, measure) == ["abcde", "fghij", "kl"]


def test_long_word_after_text() -> None:
    """a long word after short text starts on its own line."""
    assert wrap_text("ab abcdefghij", 5, measure) == ["ab", "abcde", "fghij"]


def test_keeps_indentation() -> None:
    """leading spaces on a line are preserved."""
    assert wrap_text("    x = 1", 20, measure) == ["    x = 1"]


def test_expands_tabs() -> None:
    """tabs become spaces before measuring."""
    assert wrap_text("\tx", 20, measure) == ["    x"]


def test_empty_text_is_one_empty_line() -> None:
    """empty text yields a single empty line."""
    assert wrap_text("", 10, measure) == [""]


def test_lines_fit_width() -> None:
    """no wrapped line is wider than the width."""
    text = "lorem ipsum dolor sit amet, consectetur adipiscing elit " * 5
    for line in wrap_text(text, 17, measure):
        assert measure(line) <= 17


def test_default_geometry_is_letter_with_inch_margins() -> None:
    """default page is US Letter with 72pt margins."""
    geometry = PageGeometry()
    assert geometry.text_width == 468.0
    assert geometry.top == 72.0
    assert geometry.bottom == 720.0


def test_line_height_scales_with_font_size() -> None:
    """line height is proportional to font size."""
    assert line_height(12) == 12 * 1.156
    assert line_height(24) == 2 * line_height(12)
