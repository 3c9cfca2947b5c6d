"""base exporter interface."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from chatgpt2docs.core.config import RenderConfig
from chatgpt2docs.core.errors import OutputWriteError
from chatgpt2docs.core.models import Conversation
from chatgpt2docs.core.renderer import ConversationRenderer, MessageBlock

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """outcome of one export, returned instead of finish/error callbacks."""

    destination: Path
    messages: int = 0
    written: bool = False
    error: Optional[OutputWriteError] = None

    @property
    def ok(self) -> bool:
        """True when the export did not fail."""
        return self.error is None


class Exporter(ABC):
    """abstract base class for conversation exporters."""

    name = "exporter"

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()
        self._finalized = False

    @abstractmethod
    def emit(self, block: MessageBlock) -> None:
        """appends one styled message block."""

    @abstractmethod
    def separate(self) -> None:
        """appends the separator that follows every block."""

    @abstractmethod
    def _finish(self) -> bytes:
        """closes the document and returns its encoded bytes."""

    def finalize(self) -> bytes:
        """
        closes the document; no further blocks may be emitted.

        Returns:
            encoded output document

        Raises:
            RuntimeError: if the exporter was already finalized
        """
        self._check_open()
        self._finalized = True
        return self._finish()

    def close(self) -> None:
        """releases resources held by an unfinished document."""

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError(f"{self.name} document already finalized")

    def export(
        self,
        conversation: Conversation,
        destination: Union[str, Path],
        dry_run: bool = False,
        overwrite: bool = True,
        on_block: Optional[Callable[[MessageBlock], None]] = None,
    ) -> ExportResult:
        """
        Export a conversation to the destination file.

        Args:
            conversation: The conversation to export
            destination: Output file path
            dry_run: If True, render but don't write anything
            overwrite: If False, leave an existing file untouched
            on_block: Optional callback invoked after each emitted block

        Returns:
            ExportResult; write failures are carried in its error field
        """
        output_path = Path(destination)
        result = ExportResult(destination=output_path)

        renderer = ConversationRenderer(self, on_block=on_block)
        try:
            result.messages = renderer.render(conversation)
            data = self.finalize()
        finally:
            self.close()

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return result

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return result

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as e:
            result.error = OutputWriteError(output_path, e.strerror or str(e))
            return result

        result.written = True
        return result
