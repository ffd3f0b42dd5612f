"""
Terminal reporting for batch conversions.

Draws the overall progress bar while files are converted and the results
table once they are done.
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

from ..models import ConversionResult

STATUS_LABELS = {
    True: "[green]Done[/green]",
    False: "[red]Failed[/red]",
}


class ConversionReporter:
    """
    Progress bar and summary table for a batch of conversions.

    Usage:
        >>> reporter = ConversionReporter()
        >>> with reporter.track(len(files)):
        ...     results = BatchRunner(progress_callback=reporter.advance).run(files, root)
        >>> reporter.print_table(results)
    """

    def __init__(self, console: Optional[Console] = None, show_progress: bool = True):
        self.console = console or Console()
        self.show_progress = show_progress
        self._progress: Optional[Progress] = None
        self._task_id = None

    def track(self, total: int) -> "ConversionReporter":
        """Prepare a progress bar for ``total`` files; use as a context manager."""
        self._progress = Progress(
            BarColumn(),
            TaskProgressColumn(),
            TextColumn("| ETA:"),
            TimeRemainingColumn(),
            TextColumn("|"),
            MofNCompleteColumn(),
            TextColumn("Files"),
            console=self.console,
            disable=not self.show_progress,
        )
        self._task_id = self._progress.add_task("Converting", total=total)
        return self

    def __enter__(self):
        if self._progress is None:
            raise RuntimeError("Call track() before entering the reporter")
        self._progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._progress.stop()
        return False

    def advance(self, result: ConversionResult) -> None:
        """Progress callback: one more file finished."""
        if self._progress is not None:
            self._progress.advance(self._task_id)

    @property
    def completed(self) -> int:
        if self._progress is None:
            return 0
        return int(self._progress.tasks[0].completed)

    def build_table(self, results: Iterable[ConversionResult]) -> Table:
        """Build the per-file results table."""
        table = Table(title="Conversion Results", header_style="bold green")
        table.add_column("File", justify="center")
        table.add_column("Source size (bytes)", justify="center")
        table.add_column("Elapsed (ms)", justify="center")
        table.add_column("Saved to", justify="center", overflow="fold")
        table.add_column("Result", justify="center")

        for result in results:
            # Size and timing are only reported for completed conversions.
            table.add_row(
                result.name,
                _cell(result.file_size) if result.succeeded else "-",
                _cell(result.elapsed_ms) if result.succeeded else "-",
                result.output_path,
                STATUS_LABELS[result.succeeded],
            )

        return table

    def print_table(self, results: Iterable[ConversionResult]) -> None:
        self.console.print(self.build_table(results))


def _cell(value) -> str:
    return str(value) if value is not None else "-"
