"""Data models for exported chat conversations."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Author:
    """Message author information."""

    role: str  # "user", "assistant", "system", "tool"
    name: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None

    def __post_init__(self) -> None:
        if self.metadata is None:
            self.metadata = {}


@dataclass
class MessageContent:
    """Message content structure."""

    content_type: str
    parts: list[str]


@dataclass
class Message:
    """Individual message in a conversation."""

    id: str
    author: Author
    content: MessageContent
    create_time: Optional[float] = None
    metadata: Optional[dict[str, Any]] = None

    def __post_init__(self) -> None:
        if self.metadata is None:
            self.metadata = {}

    @property
    def is_user(self) -> bool:
        """True when the message was written by the user."""
        return self.author.role == "user"


@dataclass
class MessageEntry:
    """One record of the export mapping, keyed by its message id."""

    key: str
    message: Message


@dataclass
class Conversation:
    """
    Complete conversation in source order.

    Entries keep the iteration order of the source mapping; nothing downstream
    reorders them. Keys of entries dropped while parsing are kept in skipped.
    """

    entries: list[MessageEntry] = field(default_factory=list)
    title: Optional[str] = None
    skipped: list[str] = field(default_factory=list)

    @property
    def messages(self) -> list[Message]:
        """messages in entry order."""
        return [entry.message for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
