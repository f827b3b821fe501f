"""Status command for CLI."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path  # noqa: TC003

import typer
from rich.console import Console
from rich.table import Table

from daycatalog.cli.formatting import _format_status_with_color
from daycatalog.cli.main import (
    CACHE_DIR_OPTION,
    END_OPTION,
    MAX_AGE_OPTION,
    NO_EXCLUSIONS_OPTION,
    SOURCE_OPTION,
    START_OPTION,
    TEMPLATE_OPTION,
    app,
    fail,
    resolve_config,
    resolve_range,
    resolve_source,
)
from daycatalog.core.exceptions import DaycatalogError
from daycatalog.core.formatting import format_size


@app.command()
def status(
    source: str = SOURCE_OPTION,
    template: str | None = TEMPLATE_OPTION,
    start: datetime | None = START_OPTION,
    end: datetime | None = END_OPTION,
    no_exclusions: bool = NO_EXCLUSIONS_OPTION,
    cache_dir: Path | None = CACHE_DIR_OPTION,
    max_age: str | None = MAX_AGE_OPTION,
) -> None:
    """Show cache state (fresh/stale/missing) per day and cache totals."""
    from daycatalog.adapters.cache import FileCache
    from daycatalog.adapters.storage import create_router

    try:
        cat_source = resolve_source(source, template)
        date_range = resolve_range(start, end)
        config = resolve_config(cache_dir, max_age, cat_source)
        cache = FileCache(config, create_router())
    except (DaycatalogError, ValueError) as e:
        fail(e)

    use_exclusions = not no_exclusions

    # Build Rich table
    table = Table()
    table.add_column("Day")
    table.add_column("Status")
    table.add_column("Source")

    for day in cat_source.days(date_range, use_exclusions=use_exclusions):
        state = cache.state(day.remote_id)
        table.add_row(day.day.isoformat(), _format_status_with_color(state), day.remote_id)

    catalog_name = cat_source.catalog_name(date_range, use_exclusions)
    catalog_path = cache.cache_path(catalog_name)
    if cache.is_fresh(catalog_path):
        catalog_state = "fresh"
    elif catalog_path.exists():
        catalog_state = "stale"
    else:
        catalog_state = "missing"

    console = Console(force_terminal=True)
    console.print(table)

    stats = cache.statistics()
    typer.echo(f"Catalog: {catalog_name} ({catalog_state})")
    typer.echo(f"Cache: {cache.cache_dir}")
    typer.echo(
        f"Files: {stats['file_count']}, total {format_size(stats['total_size'])}"
    )
