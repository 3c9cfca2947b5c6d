"""Streaming loader for chat export files."""

import codecs
import logging
from pathlib import Path
from typing import Any, BinaryIO, Union

import ijson

from chatgpt2docs.core.errors import InputParseError, InputReadError
from chatgpt2docs.core.models import Conversation
from chatgpt2docs.core.parser import process_conversation

logger = logging.getLogger(__name__)


def load_conversation(path: Union[str, Path]) -> Conversation:
    """
    Reads a chat export file and parses it into a Conversation.

    Args:
        path: path to the JSON export

    Returns:
        parsed Conversation, entries in file order

    Raises:
        InputReadError: if the file is missing or unreadable
        InputParseError: if the file is not a JSON object
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            json_data = read_mapping(f, path)
    except OSError as e:
        raise InputReadError(path, e.strerror or str(e)) from e

    conversation = process_conversation(json_data)
    logger.debug(
        "Loaded %d entries from %s (%d skipped)",
        len(conversation),
        path,
        len(conversation.skipped),
    )
    return conversation


def read_mapping(f: BinaryIO, path: Union[str, Path] = "<stream>") -> dict[str, Any]:
    """
    stream-parses the top-level JSON object, preserving key order.

    Args:
        f: binary file object positioned at the start of the document
        path: name used in error messages

    Returns:
        dict of top-level keys to decoded values, in file order

    Raises:
        InputParseError: if the document is not valid JSON or not an object
    """
    start = _skip_bom(f)
    first_char = _peek_first_char(f)
    if first_char == 0:
        raise InputParseError(path, "file is empty")
    if first_char != ord("{"):
        raise InputParseError(path, "top-level value is not an object")
    f.seek(start)

    mapping: dict[str, Any] = {}
    try:
        for key, value in ijson.kvitems(f, "", use_float=True):
            mapping[key] = value
    except (ijson.JSONError, UnicodeDecodeError) as e:
        raise InputParseError(path, str(e)) from e

    return mapping


def _skip_bom(f: BinaryIO) -> int:
    """moves past a leading UTF-8 BOM; returns the offset the JSON starts at."""
    if f.read(len(codecs.BOM_UTF8)) == codecs.BOM_UTF8:
        return len(codecs.BOM_UTF8)
    f.seek(0)
    return 0


def _peek_first_char(f: BinaryIO) -> int:
    """returns first non-whitespace byte from file."""
    while True:
        char = f.read(1)
        if not char:
            return 0
        if not char.isspace():
            return int(char[0])
