"""Progress reporting adapters."""

from daycatalog.progress.rich_progress import RichProgressReporter


__all__ = ["RichProgressReporter"]
