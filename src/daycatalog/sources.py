"""Registered catalog sources.

A source names a remote collection of per-day files, the URI template
locating each day's file, and the days known to be missing upstream.
"""

from __future__ import annotations

from datetime import date, timedelta

from daycatalog.core.exceptions import SourceNotFoundError
from daycatalog.core.models import CatalogSource, DateRange, parse_exclusions


MCD43A4_BASE = "https://modis-pds.s3.amazonaws.com/MCD43A4.006/"

# As of 2018-05-06, these days are missing from the MODIS public dataset.
MODIS_MISSING_DAYS = parse_exclusions(
    [
        "2018-02-27",
        "2018-02-28",
        "2018-03-01",
        "2018-03-02",
        "2018-03-03",
        "2018-03-04",
        "2018-03-05",
        "2018-03-06",
        "2018-03-07",
        "2018-03-08",
        "2018-03-09",
        "2018-03-10",
        "2018-03-11",
        "2018-03-12",
        "2018-03-13",
        "2018-03-14",
        "2018-03-15",
        "2018-04-27",
        "2018-04-28",
        "2018-04-29",
        "2018-04-30",
        "2018-05-01",
        "2018-05-02",
        "2018-05-03",
        "2018-05-04",
        "2018-05-05",
        "2018-05-06",
    ]
)

MODIS_MCD43A4 = CatalogSource(
    name="modis-catalog",
    template=MCD43A4_BASE + "{date}_scenes.txt",
    exclusions=MODIS_MISSING_DAYS,
    suffix=".csv",
    description="MODIS MCD43A4 surface reflectance daily scene lists (AWS PDS)",
    # Published scene lists are never revised
    max_age_hours=None,
)

# First day with MCD43A4 scene lists, and how far behind "today" they lag
MODIS_FIRST_DAY = date(2013, 1, 1)
MODIS_PUBLISH_LAG = timedelta(days=7)

SOURCES: dict[str, CatalogSource] = {MODIS_MCD43A4.name: MODIS_MCD43A4}


def get_source(name: str) -> CatalogSource:
    """Look up a registered source by name.

    Raises:
        SourceNotFoundError: If no source with that name is registered.
    """
    try:
        return SOURCES[name]
    except KeyError:
        raise SourceNotFoundError(name, available=sorted(SOURCES)) from None


def default_range(
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
) -> DateRange:
    """Fill in the MODIS defaults for missing range bounds.

    Start defaults to 2013-01-01 and end to one week before today, the
    most recent day reliably published.
    """
    if today is None:
        today = date.today()
    return DateRange(
        start if start is not None else MODIS_FIRST_DAY,
        end if end is not None else today - MODIS_PUBLISH_LAG,
    )
