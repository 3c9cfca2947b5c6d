"""tests for progress module."""

from unittest.mock import MagicMock, patch

from rich.console import Console

from chatgpt2docs.progress import ProgressHandler


def test_progress_handler_init_defaults() -> None:
    """ProgressHandler initializes with default values."""
    handler = ProgressHandler()

    assert handler.quiet is False
    assert handler.show_progress is False


def test_progress_handler_context_manager_stops_progress() -> None:
    """leaving the context stops a running progress display."""
    with patch("chatgpt2docs.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress

        with ProgressHandler(show_progress=True) as handler:
            handler.start_loading("chat.json")

        mock_progress.stop.assert_called_once()


def test_start_loading_shows_spinner_when_progress_enabled() -> None:
    """start_loading shows spinner when show_progress is True."""
    with patch("chatgpt2docs.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 0

        handler = ProgressHandler(show_progress=True)
        handler.start_loading("chat.json")

        mock_progress.start.assert_called_once()
        mock_progress.add_task.assert_called_once()
        assert "chat.json" in mock_progress.add_task.call_args[0][0]


def test_start_loading_does_nothing_when_progress_disabled() -> None:
    """start_loading does nothing when show_progress is False."""
    with patch("chatgpt2docs.progress.Progress") as mock_progress_class:
        handler = ProgressHandler(show_progress=False)
        handler.start_loading("chat.json")

        mock_progress_class.assert_not_called()


def test_start_output_switches_to_determinate_progress() -> None:
    """start_output replaces the spinner with a bar sized to the messages."""
    with patch("chatgpt2docs.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 0

        handler = ProgressHandler(show_progress=True)
        handler.start_loading("chat.json")
        handler.start_output("Writing out.pdf", 10)

        assert mock_progress.stop.call_count == 1
        assert mock_progress.add_task.call_args[1]["total"] == 10


def test_update_advances_progress_and_sets_key() -> None:
    """update advances progress by 1 and sets the current key."""
    with patch("chatgpt2docs.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 0

        handler = ProgressHandler(show_progress=True)
        handler.start_output("Writing out.pdf", 10)
        handler.update("msg-1")

        mock_progress.update.assert_called_once_with(0, advance=1, key="msg-1")


def test_update_does_nothing_without_progress() -> None:
    """update is a no-op when progress is disabled."""
    handler = ProgressHandler(show_progress=False)
    handler.update("msg-1")  # should not raise


def test_log_error_prints_even_when_quiet() -> None:
    """log_error prints error message to console in quiet mode."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler(quiet=True)
        handler.log_error("Test error")

        mock_print.assert_called_once()
        assert "Test error" in mock_print.call_args[0][0]


def test_log_error_escapes_markup() -> None:
    """bracketed text in messages is not treated as rich markup."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler()
        handler.log_error("bad [bold]path[/bold]")

        assert "\\[bold]" in mock_print.call_args[0][0]


def test_log_info_prints_when_not_quiet() -> None:
    """log_info prints when quiet=False."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler(quiet=False)
        handler.log_info("Test info")

        mock_print.assert_called_once()


def test_log_info_skips_when_quiet() -> None:
    """log_info skips printing when quiet=True."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler(quiet=True)
        handler.log_info("Test info")

        mock_print.assert_not_called()


def test_finish_prints_summary_when_not_quiet() -> None:
    """finish prints summary when quiet is False."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler(quiet=False)
        handler.finish(completed=1, failed=1, skipped=1)

        summary = mock_print.call_args[0][0]
        assert "1 output(s), 1 failed" in summary
        assert "1 malformed entry skipped" in summary


def test_finish_skips_summary_when_quiet() -> None:
    """finish skips summary when quiet is True."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler(quiet=True)
        handler.finish(completed=2, failed=0, skipped=0)

        assert mock_print.call_count == 0
