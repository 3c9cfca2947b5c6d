"""Chat export to PDF and Markdown converter."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from chatgpt2docs.convert import FORMATS, convert_conversation
from chatgpt2docs.core.config import RenderConfig

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for chatgpt2docs CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(
        description="Convert a chat export JSON file to PDF and Markdown"
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=str(defaults.input_path),
        help=f"chat export JSON file (default: {defaults.input_path})",
    )
    parser.add_argument(
        "--format",
        choices=[*FORMATS, "all"],
        default="all",
        help="output format to produce (default: all)",
    )
    parser.add_argument(
        "--pdf-output",
        default=str(defaults.output_path),
        help=f"PDF output path (default: {defaults.output_path})",
    )
    parser.add_argument(
        "--markdown-output",
        default=str(defaults.markdown_output_path),
        help=f"Markdown output path (default: {defaults.markdown_output_path})",
    )
    parser.add_argument(
        "--user-color",
        default=defaults.user_color,
        help=f"PDF text color for user messages (default: {defaults.user_color})",
    )
    parser.add_argument(
        "--assistant-color",
        default=defaults.assistant_color,
        help="PDF text color for other messages "
        f"(default: {defaults.assistant_color})",
    )
    parser.add_argument(
        "--prose-font",
        default=defaults.prose_font,
        help=f"PDF font for plain messages (default: {defaults.prose_font})",
    )
    parser.add_argument(
        "--code-font",
        default=defaults.code_font,
        help=f"PDF font for messages containing code (default: {defaults.code_font})",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=defaults.font_size,
        help=f"PDF font size in points (default: {defaults.font_size:g})",
    )
    parser.add_argument(
        "--timestamps",
        action="store_true",
        help="add message timestamps to Markdown section headers",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="render outputs but don't write files",
    )
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="leave existing output files untouched",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    config = RenderConfig(
        input_path=Path(args.source),
        output_path=Path(args.pdf_output),
        markdown_output_path=Path(args.markdown_output),
        user_color=args.user_color,
        assistant_color=args.assistant_color,
        prose_font=args.prose_font,
        code_font=args.code_font,
        font_size=args.font_size,
        include_timestamps=args.timestamps,
    )

    # validates source path and styling options
    if not config.input_path.exists():
        logger.error("Source not found: %s", args.source)
        return 2

    try:
        config.validate()
    except ValueError as e:
        logger.error("%s", e)
        return 2

    formats = FORMATS if args.format == "all" else (args.format,)

    try:
        return convert_conversation(
            config,
            formats=formats,
            dry_run=args.dry_run,
            overwrite=not args.no_overwrite,
            quiet=args.quiet,
            progress=args.progress,
        )
    except Exception as e:  # pylint: disable=broad-except
        logger.error("Fatal error: %s", e)
        return 2
