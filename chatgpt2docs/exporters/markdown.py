"""Markdown exporter: a Question/Answer section per message."""

import logging
import re
from datetime import datetime
from typing import Optional

from chatgpt2docs.core.config import RenderConfig
from chatgpt2docs.core.models import Conversation
from chatgpt2docs.core.renderer import CODE_MARKER, ConversationRenderer, MessageBlock
from chatgpt2docs.exporters.base import Exporter

logger = logging.getLogger(__name__)

# rewrites bold spans onto themselves; kept as an explicit identity rule
BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")


def format_part(part: str) -> str:
    """
    prepares one content part for Markdown output.

    Fenced code parts pass through verbatim; other parts only get the bold
    normalization, which leaves them unchanged.
    """
    if part.startswith(CODE_MARKER):
        return part
    return BOLD_PATTERN.sub(r"**\1**", part)


def section_label(is_user: bool) -> str:
    """returns the section header label for a message."""
    return "Question" if is_user else "Answer"


class MarkdownExporter(Exporter):
    """exports conversations to a Markdown document."""

    name = "Markdown"

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        super().__init__(config)
        self._chunks: list[str] = []

    def render(self, conversation: Conversation) -> str:
        """
        renders a conversation to Markdown without touching this exporter's state.

        Args:
            conversation: conversation to render

        Returns:
            Markdown text, sections in conversation order
        """
        exporter = MarkdownExporter(self.config)
        ConversationRenderer(exporter).render(conversation)
        return exporter.text

    def emit(self, block: MessageBlock) -> None:
        """appends the section header and content for one message."""
        self._check_open()
        content = "\n".join(format_part(part) for part in block.parts)
        label = section_label(block.is_user)
        self._chunks.append(f"## {label} - {self._stamp(block)}\n\n{content}")

    def separate(self) -> None:
        self._check_open()
        self._chunks.append("\n\n")

    def _stamp(self, block: MessageBlock) -> str:
        if not self.config.include_timestamps or block.create_time is None:
            return ""
        try:
            stamp = datetime.fromtimestamp(block.create_time)
        except (OverflowError, OSError, ValueError):
            logger.debug("Message %s: create_time out of range", block.key)
            return ""
        return stamp.strftime(self.config.timestamp_format)

    @property
    def text(self) -> str:
        """Markdown emitted so far."""
        return "".join(self._chunks)

    def _finish(self) -> bytes:
        return self.text.encode("utf-8")
