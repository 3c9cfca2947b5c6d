"""Tests for data models."""

from typing import Optional

from chatgpt2docs.core.models import (
    Author,
    Conversation,
    Message,
    MessageContent,
    MessageEntry,
)


def _message(role: str = "user", parts: Optional[list[str]] = None) -> Message:
    return Message(
        id="msg-1",
        author=Author(role=role),
        content=MessageContent(content_type="text", parts=parts or ["Hello"]),
        create_time=1234567890.0,
    )


def test_conversation_defaults_to_empty() -> None:
    """Test creating an empty Conversation."""
    conv = Conversation()
    assert conv.entries == []
    assert conv.skipped == []
    assert conv.title is None
    assert len(conv) == 0


def test_message_creation() -> None:
    """Test creating a Message instance."""
    msg = _message()
    assert msg.id == "msg-1"
    assert msg.author.role == "user"
    assert msg.content.parts == ["Hello"]
    assert msg.create_time == 1234567890.0


def test_message_create_time_is_optional() -> None:
    """create_time defaults to None."""
    msg = Message(
        id="msg-1",
        author=Author(role="assistant"),
        content=MessageContent(content_type="text", parts=[]),
    )
    assert msg.create_time is None


def test_is_user_only_for_user_role() -> None:
    """only the exact "user" role counts as a user message."""
    assert _message(role="user").is_user
    assert not _message(role="assistant").is_user
    assert not _message(role="system").is_user
    assert not _message(role="User").is_user


def test_metadata_isolation() -> None:
    """Verify metadata dicts are not shared between instances."""
    a1 = Author(role="user")
    a2 = Author(role="assistant")
    assert a1.metadata is not None
    assert a2.metadata is not None
    a1.metadata["key"] = "value1"
    assert "key" not in a2.metadata


def test_metadata_defaults_to_empty_dict() -> None:
    """Verify None metadata becomes empty dict."""
    author = Author(role="user", metadata=None)
    assert author.metadata == {}
    assert _message().metadata == {}


def test_conversation_messages_follow_entry_order() -> None:
    """messages property returns messages in entry order."""
    first = _message(parts=["first"])
    second = _message(role="assistant", parts=["second"])
    conv = Conversation(
        entries=[MessageEntry("b", first), MessageEntry("a", second)]
    )
    assert conv.messages == [first, second]
    assert len(conv) == 2
