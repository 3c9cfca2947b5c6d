"""PDF exporter: one colored, font-selected paragraph per message."""

import logging
from typing import Optional

import pymupdf

from chatgpt2docs.core.config import RenderConfig, color_to_rgb, font_short_name
from chatgpt2docs.core.renderer import MessageBlock
from chatgpt2docs.exporters.base import Exporter
from chatgpt2docs.exporters.layout import PageGeometry, line_height, wrap_text

logger = logging.getLogger(__name__)

PARAGRAPH_SPACING = 0.5  # in lines, after every message


class PDFExporter(Exporter):
    """exports conversations to a paginated PDF document."""

    name = "PDF"

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        geometry: Optional[PageGeometry] = None,
    ) -> None:
        """
        Initialize PDF exporter.

        Args:
            config: colors, fonts and font size (defaults to RenderConfig())
            geometry: page size and margins (defaults to US Letter)

        Raises:
            ValueError: if a configured font or color is unknown
        """
        super().__init__(config)
        self.geometry = geometry or PageGeometry()

        self._user_color = color_to_rgb(self.config.user_color)
        self._assistant_color = color_to_rgb(self.config.assistant_color)
        self._prose_font = font_short_name(self.config.prose_font)
        self._code_font = font_short_name(self.config.code_font)
        self._fonts = {
            name: pymupdf.Font(name) for name in (self._prose_font, self._code_font)
        }
        self._font_size = self.config.font_size
        self._line_height = line_height(self._font_size)

        self._doc = pymupdf.open()
        self.page_count = 0
        self._page = self._new_page()
        self._y = self.geometry.top

    def _new_page(self) -> "pymupdf.Page":
        self.page_count += 1
        return self._doc.new_page(
            width=self.geometry.width, height=self.geometry.height
        )

    def style_for(self, block: MessageBlock) -> tuple[str, tuple[float, float, float]]:
        """
        returns (font short name, RGB color) for a message.

        Args:
            block: classified message

        Returns:
            code font when the message holds a fence marker, user color for
            user messages
        """
        font = self._code_font if block.is_code else self._prose_font
        color = self._user_color if block.is_user else self._assistant_color
        return font, color

    def emit(self, block: MessageBlock) -> None:
        """writes the message as a left-aligned paragraph on a fresh line."""
        self._check_open()
        if not block.text:
            return

        fontname, color = self.style_for(block)
        font = self._fonts[fontname]

        def measure(text: str) -> float:
            return float(font.text_length(text, fontsize=self._font_size))

        baseline_offset = font.ascender * self._font_size

        for line in wrap_text(block.text, self.geometry.text_width, measure):
            if self._y + self._line_height > self.geometry.bottom:
                self._page = self._new_page()
                self._y = self.geometry.top
                logger.debug("Page break before message %s", block.key)
            if line:
                self._page.insert_text(
                    (self.geometry.margin, self._y + baseline_offset),
                    line,
                    fontname=fontname,
                    fontsize=self._font_size,
                    color=color,
                )
            self._y += self._line_height

    def separate(self) -> None:
        """moves down half a line."""
        self._check_open()
        self._y += PARAGRAPH_SPACING * self._line_height

    def close(self) -> None:
        if not self._doc.is_closed:
            self._doc.close()

    def _finish(self) -> bytes:
        self._doc.set_metadata(
            {"producer": "chatgpt2docs", "creator": "chatgpt2docs"}
        )
        data: bytes = self._doc.tobytes()
        self._doc.close()
        return data

