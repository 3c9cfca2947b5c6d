"""Rendering configuration shared by the exporters."""

from dataclasses import dataclass
from pathlib import Path

from PIL import ImageColor

# PDF base-14 faces mapped to PyMuPDF's short font names
BASE14_FONTS = {
    "Helvetica": "helv",
    "Helvetica-Oblique": "heit",
    "Helvetica-Bold": "hebo",
    "Helvetica-BoldOblique": "hebi",
    "Courier": "cour",
    "Courier-Oblique": "coit",
    "Courier-Bold": "cobo",
    "Courier-BoldOblique": "cobi",
    "Times-Roman": "tiro",
    "Times-Italic": "tiit",
    "Times-Bold": "tibo",
    "Times-BoldItalic": "tibi",
    "Symbol": "symb",
    "ZapfDingbats": "zadb",
}


@dataclass
class RenderConfig:
    """
    Paths and styling for one conversion run.

    Colors accept CSS color names or #rrggbb strings. Fonts must be one of the
    PDF base-14 faces.
    """

    input_path: Path = Path("jsTeacher.json")
    output_path: Path = Path("chatConversation.pdf")
    markdown_output_path: Path = Path("conversation.md")
    user_color: str = "blue"
    assistant_color: str = "black"
    prose_font: str = "Helvetica"
    code_font: str = "Courier"
    font_size: float = 12.0
    include_timestamps: bool = False
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    def __post_init__(self) -> None:
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)
        self.markdown_output_path = Path(self.markdown_output_path)

    def validate(self) -> None:
        """
        checks fonts, colors and size.

        Raises:
            ValueError: naming the first invalid option
        """
        for font in (self.prose_font, self.code_font):
            font_short_name(font)
        for color in (self.user_color, self.assistant_color):
            color_to_rgb(color)
        if self.font_size <= 0:
            raise ValueError(f"Font size must be positive: {self.font_size}")


def font_short_name(font: str) -> str:
    """returns PyMuPDF's short name for a base-14 font."""
    try:
        return BASE14_FONTS[font]
    except KeyError:
        choices = ", ".join(sorted(BASE14_FONTS))
        raise ValueError(f"Unknown font {font!r} (choose from {choices})") from None


def color_to_rgb(color: str) -> tuple[float, float, float]:
    """converts a CSS color name or hex string to an RGB triple in 0..1."""
    try:
        rgb = ImageColor.getrgb(color)
    except ValueError:
        raise ValueError(f"Unknown color {color!r}") from None
    red, green, blue = rgb[:3]
    return (red / 255, green / 255, blue / 255)
