"""Date-range enumeration of per-day remote resources."""

from __future__ import annotations

from collections.abc import Collection, Iterator
from datetime import date

from daycatalog.core.models import DateRange, DayResource


def enumerate_days(
    date_range: DateRange,
    template: str,
    exclusions: Collection[date] = frozenset(),
    use_exclusions: bool = True,
) -> Iterator[DayResource]:
    """Yield one resource per calendar day in ``date_range``, ascending.

    Pure and restartable: each call starts a new pass over the range and
    performs no I/O.

    Args:
        date_range: Inclusive range of days to enumerate.
        template: URI template with a ``{date}`` placeholder.
        exclusions: Days known to have no valid remote resource.
        use_exclusions: If False, excluded days are yielded anyway.

    Yields:
        DayResource for each non-excluded day.

    Example:
        >>> r = DateRange.parse("2018-01-01", "2018-01-03")
        >>> skip = {date(2018, 1, 2)}
        >>> [d.remote_id for d in enumerate_days(r, "{date}.txt", skip)]
        ['2018-01-01.txt', '2018-01-03.txt']
    """
    for day in date_range.days():
        if use_exclusions and day in exclusions:
            continue
        yield DayResource(day=day, remote_id=template.format(date=day.isoformat()))
