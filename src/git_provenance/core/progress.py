"""Progress reporting: wraps Rich or runs silently."""

from typing import Callable, Optional, TypeVar

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

T = TypeVar("T")

ScanProgress = Callable[[int, int], None]


class ProgressReporter:
    """Rich progress bar wrapper.

    ``run`` hands the callback a ``(done, total)`` function that advances a
    single "Scanning files" task.
    """

    def __init__(self, console: Console, description: str = "Scanning files"):
        self.console = console
        self.description = description

    def run(self, callback: Callable[[Optional[ScanProgress]], T]) -> T:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task(self.description, total=None)

            def update(done: int, total: int) -> None:
                progress.update(task, completed=done, total=total)

            return callback(update)


class SilentReporter:
    """No-op reporter for tests and --quiet mode."""

    def run(self, callback: Callable[[Optional[ScanProgress]], T]) -> T:
        return callback(None)
