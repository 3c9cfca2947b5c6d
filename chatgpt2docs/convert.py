"""Conversion runs: load once, export to each requested format."""

import logging
from collections.abc import Sequence
from typing import Optional

from chatgpt2docs.core.config import RenderConfig
from chatgpt2docs.core.errors import InputParseError, InputReadError
from chatgpt2docs.core.loader import load_conversation
from chatgpt2docs.core.models import Conversation
from chatgpt2docs.core.renderer import MessageBlock
from chatgpt2docs.exporters.base import Exporter, ExportResult
from chatgpt2docs.exporters.markdown import MarkdownExporter
from chatgpt2docs.exporters.pdf import PDFExporter
from chatgpt2docs.progress import ProgressHandler

logger = logging.getLogger(__name__)

FORMATS = ("pdf", "markdown")

SUCCESS_MESSAGES = {
    "pdf": "PDF created successfully: {path}",
    "markdown": "Markdown file successfully created: {path}",
}


def build_exporter(fmt: str, config: RenderConfig) -> Exporter:
    """
    creates the exporter for an output format.

    Args:
        fmt: "pdf" or "markdown"
        config: render configuration

    Returns:
        a fresh exporter instance

    Raises:
        ValueError: if fmt is unknown or the config holds an invalid font/color
    """
    if fmt == "pdf":
        return PDFExporter(config)
    if fmt == "markdown":
        return MarkdownExporter(config)
    raise ValueError(f"Unknown format: {fmt}")


def output_path_for(fmt: str, config: RenderConfig) -> str:
    """returns the configured destination for a format."""
    if fmt == "pdf":
        return str(config.output_path)
    return str(config.markdown_output_path)


def convert_conversation(
    config: RenderConfig,
    formats: Sequence[str] = FORMATS,
    dry_run: bool = False,
    overwrite: bool = True,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    converts the configured input to every requested format.

    Each format runs independently; a failed output does not stop the others.

    Args:
        config: paths and styling
        formats: formats to produce, in order
        dry_run: if True, render but don't write outputs
        overwrite: if False, leave existing outputs untouched
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    with ProgressHandler(quiet=quiet, show_progress=progress) as handler:
        handler.start_loading(str(config.input_path))
        try:
            conversation = load_conversation(config.input_path)
        except (InputReadError, InputParseError) as e:
            handler.log_error(str(e))
            return 2

        handler.log_info(
            f"Found {len(conversation)} message(s) in {config.input_path}"
        )

        completed = 0
        failed = 0
        for fmt in formats:
            result = _export_one(
                fmt, conversation, config, dry_run, overwrite, handler
            )
            if result is not None and result.ok:
                completed += 1
            else:
                failed += 1

        handler.finish(completed, failed, len(conversation.skipped))

        if formats and failed == len(formats):
            return 2
        if failed or conversation.skipped:
            return 1
        return 0


def _export_one(
    fmt: str,
    conversation: Conversation,
    config: RenderConfig,
    dry_run: bool,
    overwrite: bool,
    handler: ProgressHandler,
) -> Optional[ExportResult]:
    """
    runs one exporter and reports its outcome.

    Returns:
        ExportResult, or None when the exporter could not be set up or
        raised while rendering
    """
    destination = output_path_for(fmt, config)
    try:
        exporter = build_exporter(fmt, config)
    except ValueError as e:
        handler.log_error(f"{fmt}: {e}")
        return None

    handler.start_output(f"Writing {destination}", len(conversation))

    def on_block(block: MessageBlock) -> None:
        handler.update(block.key)

    try:
        result = exporter.export(
            conversation,
            destination,
            dry_run=dry_run,
            overwrite=overwrite,
            on_block=on_block,
        )
    except Exception as e:
        logger.debug("%s export failed", fmt, exc_info=True)
        handler.log_error(f"{fmt}: {e}")
        return None

    if result.error is not None:
        handler.log_error(str(result.error))
    elif result.written:
        handler.log_info(SUCCESS_MESSAGES[fmt].format(path=destination))
    logger.debug("%s export: %d message(s) -> %s", fmt, result.messages, destination)
    return result
