"""Exception hierarchy for conversion failures."""

from pathlib import Path
from typing import Union


class ConversionError(Exception):
    """base class for all conversion errors."""


class InputReadError(ConversionError):
    """input file is missing or cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error reading JSON file {self.path}: {reason}")


class InputParseError(ConversionError):
    """input file is not a JSON mapping of message entries."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error parsing JSON in {self.path}: {reason}")


class OutputWriteError(ConversionError):
    """output file cannot be created or written."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error writing {self.path}: {reason}")


class MalformedMessageError(ConversionError):
    """message entry lacks the fields needed to render it."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed entry {key!r}: {reason}")
