"""Shared per-message decisions driving every exporter."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from chatgpt2docs.core.models import Conversation, MessageEntry

CODE_MARKER = "```"


@dataclass(frozen=True)
class MessageBlock:
    """one message, classified and ready for a backend to emit."""

    key: str
    parts: tuple[str, ...]
    text: str
    is_user: bool
    is_code: bool
    create_time: Optional[float] = None


class Backend(Protocol):
    """emission contract implemented by the exporters."""

    def emit(self, block: MessageBlock) -> None:
        """appends one message block."""

    def separate(self) -> None:
        """appends the separator that follows every block."""


def join_parts(parts: Sequence[str]) -> str:
    """joins content parts with newlines, no leading or trailing separator."""
    return "\n".join(parts)


def classify(entry: MessageEntry) -> MessageBlock:
    """
    Builds the MessageBlock for an entry.

    The code flag covers the whole message: any fence marker in the joined
    text selects code styling for every line.
    """
    message = entry.message
    text = join_parts(message.content.parts)
    return MessageBlock(
        key=entry.key,
        parts=tuple(message.content.parts),
        text=text,
        is_user=message.is_user,
        is_code=CODE_MARKER in text,
        create_time=message.create_time,
    )


class ConversationRenderer:  # pylint: disable=too-few-public-methods
    """walks a conversation in stored order and feeds a backend."""

    def __init__(
        self,
        backend: Backend,
        on_block: Optional[Callable[[MessageBlock], None]] = None,
    ) -> None:
        self.backend = backend
        self.on_block = on_block

    def render(self, conversation: Conversation) -> int:
        """
        emits every entry of the conversation.

        Args:
            conversation: conversation to render

        Returns:
            number of blocks emitted
        """
        count = 0
        for entry in conversation.entries:
            block = classify(entry)
            self.backend.emit(block)
            self.backend.separate()
            count += 1
            if self.on_block is not None:
                self.on_block(block)
        return count
