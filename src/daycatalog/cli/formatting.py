"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from rich.text import Text

from daycatalog.core.formatting import status_to_color


def _format_status_with_color(status: str) -> Text:
    """Format a cache state with color coding.

    Args:
        status: Cache state ("fresh", "stale", or "missing")

    Returns:
        Rich Text object with appropriate color:
        - "fresh" -> green
        - "stale" -> yellow
        - "missing" -> red
    """
    color = status_to_color(status)
    return Text(status, style=color) if color else Text(status)
