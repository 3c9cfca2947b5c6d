"""console reporting for a conversion run."""

from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressHandler:
    """status lines on stderr, plus an optional live bar per output."""

    def __init__(self, quiet: bool = False, show_progress: bool = False) -> None:
        self.quiet = quiet
        self.show_progress = show_progress
        self._console = Console(stderr=True)
        self._live: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._end()

    def _begin(
        self,
        description: str,
        total: Optional[int],
        *columns: ProgressColumn,
        **fields: Any,
    ) -> None:
        # one live display at a time; a new phase replaces the previous one
        self._end()
        self._live = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            *columns,
            console=self._console,
            transient=True,
        )
        self._live.start()
        self._task = self._live.add_task(description, total=total, **fields)

    def _end(self) -> None:
        if self._live is None:
            return
        self._live.stop()
        self._live = None
        self._task = None

    def start_loading(self, source: str) -> None:
        """spinner shown while the input file is parsed."""
        if self.show_progress:
            self._begin(f"Loading {source}...", None)

    def start_output(self, label: str, total: int) -> None:
        """bar counting the messages rendered into one output."""
        if self.show_progress:
            self._begin(
                label,
                total,
                BarColumn(),
                MofNCompleteColumn(),
                TextColumn("- {task.fields[key]}"),
                key="",
            )

    def update(self, key: str) -> None:
        """counts one rendered message, labelled with its key."""
        if self._live is not None and self._task is not None:
            self._live.update(self._task, advance=1, key=key)

    def log_error(self, message: str) -> None:
        """errors are printed in quiet mode too."""
        self._console.print(f"[red]ERROR:[/red] {escape(message)}")

    def log_info(self, message: str) -> None:
        if not self.quiet:
            self._console.print(escape(message))

    def finish(self, completed: int, failed: int, skipped: int) -> None:
        """clears the live display, then prints the run summary."""
        self._end()
        if self.quiet:
            return

        entries = "entry" if skipped == 1 else "entries"
        self._console.print(
            f"Completed {completed} output(s), {failed} failed; "
            f"{skipped} malformed {entries} skipped"
        )
