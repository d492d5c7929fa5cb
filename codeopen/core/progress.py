"""Progress reporting utilities for CLI commands.

Provides a Rich-based spinner for editor discovery, which can take a few
seconds when several candidates are missing or slow to answer.
"""

from collections.abc import Generator
from contextlib import contextmanager

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn


class RichProgressCallback:
    """Rich-based progress callback for visual progress reporting."""

    def __init__(self, progress: Progress) -> None:
        """Initialize with a Rich Progress instance.

        Args:
            progress: Rich Progress instance to use for display.
        """
        self.progress = progress
        self.task_id: int | None = None

    def on_start(self, total: int, description: str) -> None:
        """Create the spinner task when discovery starts."""
        self.task_id = self.progress.add_task(description, total=total, current="")

    def on_progress(self, current: int, item_description: str | None = None) -> None:
        """Show which provider is being probed."""
        if self.task_id is not None:
            self.progress.update(
                self.task_id, completed=current - 1, current=item_description or ""
            )

    def on_complete(self) -> None:
        """Remove the task to hide the spinner."""
        if self.task_id is not None:
            self.progress.remove_task(self.task_id)


@contextmanager
def progress_context(
    quiet_mode: bool = False,
) -> Generator[RichProgressCallback | None, None, None]:
    """Context manager for creating a discovery spinner.

    Args:
        quiet_mode: If True, returns None (no progress reporting).

    Yields:
        RichProgressCallback if not quiet, None otherwise.

    Example:
        with progress_context(quiet_mode=False) as progress:
            registry.initialize(progress=progress)
    """
    if quiet_mode:
        yield None
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("[cyan]{task.fields[current]}"),
            console=Console(stderr=True),
            transient=True,
        ) as progress:
            yield RichProgressCallback(progress)
