"""CLI commands for daycatalog."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, NoReturn

import typer

from daycatalog.core.exceptions import DaycatalogError


if TYPE_CHECKING:
    from daycatalog.core.models import CacheConfig, CatalogSource, DateRange


app = typer.Typer(
    name="daycatalog",
    help="Build consolidated catalogs from per-day remote files.",
    no_args_is_help=True,
)

DEFAULT_SOURCE = "modis-catalog"

_DATE_FORMATS = ["%Y-%m-%d"]


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log build progress at INFO level.",
    ),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def fail(error: DaycatalogError | ValueError) -> NoReturn:
    """Report an error with its recovery hint and exit with status 1."""
    typer.echo(f"Error: {error}")
    hint = getattr(error, "recovery_hint", None)
    if hint:
        typer.echo(f"Hint: {hint}")
    raise typer.Exit(1)


def resolve_source(name: str, template: str | None) -> CatalogSource:
    """Get a registered source, or an ad-hoc one when a template is given."""
    from daycatalog.core.models import CatalogSource
    from daycatalog.sources import get_source

    if template is not None:
        return CatalogSource(name=name, template=template)
    return get_source(name)


def resolve_range(start: datetime | None, end: datetime | None) -> DateRange:
    """Build the date range, filling missing bounds with the defaults."""
    from daycatalog.sources import default_range

    return default_range(
        start=start.date() if start is not None else None,
        end=end.date() if end is not None else None,
        today=date.today(),
    )


def resolve_config(
    cache_dir: Path | None, max_age: str | None, source: CatalogSource
) -> CacheConfig:
    """Load cache settings.

    Command-line values override the environment, which overrides the
    source's own cache age.
    """
    from daycatalog.config import load_cache_config, parse_max_age

    if max_age is None:
        return load_cache_config(
            cache_dir=cache_dir, default_max_age_hours=source.max_age_hours
        )
    return load_cache_config(cache_dir=cache_dir, max_age_hours=parse_max_age(max_age))


SOURCE_OPTION = typer.Option(
    DEFAULT_SOURCE,
    "--source",
    "-s",
    help="Registered source name (or name for --template).",
)
TEMPLATE_OPTION = typer.Option(
    None,
    "--template",
    "-t",
    help="Ad-hoc URI template with a {date} placeholder, instead of a registered source.",
)
START_OPTION = typer.Option(
    None,
    "--start",
    help="First day (YYYY-MM-DD). Defaults to 2013-01-01.",
    formats=_DATE_FORMATS,
)
END_OPTION = typer.Option(
    None,
    "--end",
    help="Last day (YYYY-MM-DD). Defaults to one week ago.",
    formats=_DATE_FORMATS,
)
NO_EXCLUSIONS_OPTION = typer.Option(
    False,
    "--no-exclusions",
    help="Fetch days on the source's known-missing list anyway.",
)
CACHE_DIR_OPTION = typer.Option(
    None,
    "--cache-dir",
    help="Cache directory. Overrides DAYCATALOG_CACHE_DIR.",
)
MAX_AGE_OPTION = typer.Option(
    None,
    "--max-age",
    help="Hours before cached files are refetched, or 'inf'. Overrides DAYCATALOG_CACHE_AGE.",
)


@app.command()
def build(
    source: str = SOURCE_OPTION,
    template: str | None = TEMPLATE_OPTION,
    start: datetime | None = START_OPTION,
    end: datetime | None = END_OPTION,
    no_exclusions: bool = NO_EXCLUSIONS_OPTION,
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail if any day is unavailable instead of skipping it.",
    ),
    cache_dir: Path | None = CACHE_DIR_OPTION,
    max_age: str | None = MAX_AGE_OPTION,
    workers: int = typer.Option(
        8,
        "--workers",
        "-w",
        min=1,
        help="Maximum concurrent day fetches.",
    ),
) -> None:
    """Build the catalog for a date range and print its path."""
    from daycatalog import CatalogBuilder, RichProgressReporter

    try:
        cat_source = resolve_source(source, template)
        date_range = resolve_range(start, end)
        config = resolve_config(cache_dir, max_age, cat_source)
        builder = CatalogBuilder.from_config(cat_source, config, max_workers=workers)
        with RichProgressReporter() as progress:
            path = builder.build(
                date_range,
                use_exclusions=not no_exclusions,
                progress=progress,
                strict=strict,
            )
    except (DaycatalogError, ValueError) as e:
        fail(e)

    typer.echo(str(path))


@app.command()
def days(
    source: str = SOURCE_OPTION,
    template: str | None = TEMPLATE_OPTION,
    start: datetime | None = START_OPTION,
    end: datetime | None = END_OPTION,
    no_exclusions: bool = NO_EXCLUSIONS_OPTION,
) -> None:
    """List the days and URIs a build would fetch, without fetching."""
    try:
        cat_source = resolve_source(source, template)
        date_range = resolve_range(start, end)
    except (DaycatalogError, ValueError) as e:
        fail(e)

    for day in cat_source.days(date_range, use_exclusions=not no_exclusions):
        typer.echo(f"{day.day.isoformat()} {day.remote_id}")


def main() -> None:
    """Entry point for the CLI."""
    app()
