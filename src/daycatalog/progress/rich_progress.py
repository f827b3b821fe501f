"""Terminal progress bars for catalog builds, drawn with Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


if TYPE_CHECKING:
    from types import TracebackType

    from rich.console import Console

    from daycatalog.core.ports import ProgressCallback


def _build_columns() -> tuple[object, ...]:
    return (
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("days"),
        TimeElapsedColumn(),
    )


class RichProgressReporter:
    """ProgressReporter showing one bar per catalog being built.

    The bar counts resolved days, skipped ones included, so it always
    reaches the total when the build finishes.

    Example:
        with RichProgressReporter() as reporter:
            path = builder.build(date_range, progress=reporter)
    """

    def __init__(self, console: Console | None = None, transient: bool = False) -> None:
        """Set up the display without starting it.

        Args:
            console: Console to draw on. Defaults to Rich's global console.
            transient: Remove the bars from the terminal once stopped.
        """
        self._progress = Progress(
            *_build_columns(),  # type: ignore[arg-type]
            console=console,
            transient=transient,
        )
        self._task_ids: dict[str, TaskID] = {}
        self._live = False

    def __enter__(self) -> RichProgressReporter:
        self._ensure_started()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.stop()

    def _ensure_started(self) -> None:
        if not self._live:
            self._progress.start()
            self._live = True

    def stop(self) -> None:
        """Stop refreshing the display."""
        if self._live:
            self._progress.stop()
            self._live = False

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Add a bar for a catalog build of ``total`` days.

        Starts the display if it is not running yet.
        """
        self._ensure_started()
        task_id = self._progress.add_task(name, total=total)
        self._task_ids[name] = task_id

        def advance_to(resolved: int, _total: int) -> None:
            self._progress.update(task_id, completed=resolved)

        return advance_to

    def finish_task(self, name: str) -> None:
        """Fill the bar of a finished build. Unknown names are ignored."""
        task_id = self._task_ids.pop(name, None)
        if task_id is None:
            return
        total = self._progress.tasks[task_id].total
        self._progress.update(task_id, completed=total)
