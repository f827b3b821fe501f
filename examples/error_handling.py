"""Error handling patterns with recovery hints.

This example demonstrates how to handle common build errors and use
the recovery_hint property to provide actionable guidance.
"""

from pathlib import Path

from daycatalog import (
    MODIS_MCD43A4,
    CatalogBuilder,
    DateRange,
    # Exceptions
    DaycatalogError,
    EmptyCatalog,
    IncompleteCatalog,
    SourceNotFoundError,
    get_source,
)


builder = CatalogBuilder.from_config(MODIS_MCD43A4)


# Pattern 1: Handle unknown source names
def builder_for(name: str) -> CatalogBuilder:
    """Look up a source with helpful error messages."""
    try:
        return CatalogBuilder.from_config(get_source(name))
    except SourceNotFoundError as e:
        # recovery_hint lists available sources
        print(f"Source '{name}' not found.")
        print(f"Hint: {e.recovery_hint}")
        raise


# Pattern 2: Require a complete catalog, falling back to a partial one
def build_complete_or_partial(date_range: DateRange) -> Path:
    """Try a strict build first; accept gaps if some days are unpublished."""
    try:
        return builder.build(date_range, strict=True)
    except IncompleteCatalog as e:
        print(f"Missing days: {', '.join(d.isoformat() for d in e.missing)}")
        return builder.build(date_range)


# Pattern 3: A range with nothing published
def build_or_none(date_range: DateRange) -> Path | None:
    """Return None instead of failing when no day is available."""
    try:
        return builder.build(date_range)
    except EmptyCatalog as e:
        print(f"Nothing to build: {e}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 4: Catch-all with recovery hints
def safe_build(date_range: DateRange) -> Path | None:
    """Build with comprehensive error handling."""
    try:
        return builder.build(date_range)
    except DaycatalogError as e:
        print(f"Error: {e}")
        if e.recovery_hint:
            print(f"Hint: {e.recovery_hint}")
        return None
