"""Parser for chat export JSON (message-id -> entry mapping)."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from chatgpt2docs.core.errors import MalformedMessageError
from chatgpt2docs.core.models import (
    Author,
    Conversation,
    Message,
    MessageContent,
    MessageEntry,
)

logger = logging.getLogger(__name__)


def process_conversation(json_data: Mapping[str, Any]) -> Conversation:
    """
    Process a chat export into a Conversation.

    Accepts either the bare mapping of message entries or a full conversation
    object carrying that mapping under "mapping". Entries keep source order;
    malformed ones are logged and skipped.

    Args:
        json_data: decoded top-level JSON object

    Returns:
        Processed Conversation object
    """
    title: Optional[str] = None
    mapping = json_data

    if _is_full_conversation(json_data):
        mapping = json_data["mapping"]
        title = json_data.get("title")

    conversation = Conversation(title=title)

    for key, node in mapping.items():
        try:
            conversation.entries.append(parse_entry(key, node))
        except MalformedMessageError as e:
            logger.warning("Skipping entry %s: %s", e.key, e.reason)
            conversation.skipped.append(key)

    return conversation


def _is_full_conversation(json_data: Mapping[str, Any]) -> bool:
    """checks for the conversation-object shape (title + mapping)."""
    mapping = json_data.get("mapping")
    return isinstance(mapping, Mapping) and "message" not in mapping


def parse_entry(key: str, node: Any) -> MessageEntry:
    """
    Validate one mapping entry and build its MessageEntry.

    Args:
        key: mapping key of the entry
        node: raw entry value

    Returns:
        MessageEntry wrapping the parsed Message

    Raises:
        MalformedMessageError: if the entry has no message or no content.parts
    """
    if not isinstance(node, Mapping):
        raise MalformedMessageError(key, "entry is not an object")

    message_data = node.get("message")
    if not isinstance(message_data, Mapping):
        raise MalformedMessageError(key, "missing message")

    content_data = message_data.get("content")
    if not isinstance(content_data, Mapping):
        raise MalformedMessageError(key, "missing message.content")

    raw_parts = content_data.get("parts")
    if not isinstance(raw_parts, list):
        raise MalformedMessageError(key, "missing message.content.parts")

    # missing author falls back to non-user styling
    author_data = message_data.get("author")
    if author_data is None:
        author_data = {}
    if not isinstance(author_data, Mapping):
        raise MalformedMessageError(key, "message.author is not an object")

    author = Author(
        role=str(author_data.get("role") or "unknown"),
        name=author_data.get("name"),
        metadata=author_data.get("metadata") or {},
    )

    content = MessageContent(
        content_type=str(content_data.get("content_type", "text")),
        parts=_text_parts(key, raw_parts),
    )

    message = Message(
        id=str(message_data.get("id") or node.get("id") or key),
        author=author,
        content=content,
        create_time=_timestamp(message_data.get("create_time")),
        metadata=message_data.get("metadata") or {},
    )

    return MessageEntry(key=key, message=message)


def _text_parts(key: str, raw_parts: list[Any]) -> list[str]:
    """keeps string parts in order, dropping attachments and other objects."""
    parts = []
    for part in raw_parts:
        if isinstance(part, str):
            parts.append(part)
        else:
            logger.debug("Entry %s: dropping non-text part %r", key, type(part))
    return parts


def _timestamp(value: Any) -> Optional[float]:
    """returns create_time as float seconds, or None when absent/invalid."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
