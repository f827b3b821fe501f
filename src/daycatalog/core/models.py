"""Core domain models for daycatalog.

These models are pure Python dataclasses with no I/O dependencies.
They represent the core domain concepts of the day catalog.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Self


_SECONDS_PER_HOUR = 3600

# Cache age used when no caller, environment or source sets one
DEFAULT_MAX_AGE_HOURS = 24


@dataclass(frozen=True, slots=True)
class DateRange:
    """An inclusive range of calendar days.

    Attributes:
        start: First day of the range.
        end: Last day of the range (inclusive).

    Example:
        >>> r = DateRange(date(2018, 1, 1), date(2018, 1, 3))
        >>> len(r)
        3
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        """Validate that the range is not inverted."""
        if self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")

    @classmethod
    def parse(cls, start: str, end: str) -> Self:
        """Build a range from ISO ``YYYY-MM-DD`` strings."""
        return cls(date.fromisoformat(start), date.fromisoformat(end))

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def days(self) -> Iterator[date]:
        """Iterate every calendar day in the range, ascending."""
        for offset in range(len(self)):
            yield self.start + timedelta(days=offset)


def parse_exclusions(values: Iterable[str]) -> frozenset[date]:
    """Parse ISO date strings into an exclusion set.

    Args:
        values: ISO ``YYYY-MM-DD`` strings.

    Returns:
        Frozen set of the parsed dates.
    """
    return frozenset(date.fromisoformat(v) for v in values)


@dataclass(frozen=True, slots=True)
class DayResource:
    """One enumerated day and the remote resource holding its data.

    Attributes:
        day: The calendar day.
        remote_id: URI of the per-day resource.
    """

    day: date
    remote_id: str


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Process-wide cache settings.

    Attributes:
        cache_dir: Directory where cached files and catalogs are stored.
        max_age_hours: Age after which a cached file is refetched.
            None means cached files never go stale.
    """

    cache_dir: Path
    max_age_hours: int | None = DEFAULT_MAX_AGE_HOURS

    def __post_init__(self) -> None:
        """Validate the maximum age."""
        if self.max_age_hours is not None and self.max_age_hours < 0:
            raise ValueError("max_age_hours cannot be negative")

    def is_fresh(self, modified: float, now: float) -> bool:
        """Check whether a file modified at ``modified`` is still usable at ``now``.

        Args:
            modified: File modification time (POSIX timestamp).
            now: Current time (POSIX timestamp).

        Returns:
            True if the file is younger than max_age_hours, or the age is infinite.
        """
        if self.max_age_hours is None:
            return True
        return (now - modified) < self.max_age_hours * _SECONDS_PER_HOUR


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A published copy of a remote resource in the cache directory.

    Built on demand from the file on disk; there is no separate index.

    Attributes:
        remote_id: URI the entry was fetched from.
        local_path: Path of the cached copy.
        fetched_at: Modification time of the cached copy.
        size_bytes: Size of the cached copy.
    """

    remote_id: str
    local_path: Path
    fetched_at: datetime
    size_bytes: int


class ConcatSupport(enum.Enum):
    """Result of probing a filesystem for native concatenation."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class CatalogSource:
    """A remote collection of per-day files sharing a naming template.

    Attributes:
        name: Identifier used for catalog file names and lookups.
        template: URI template with a ``{date}`` placeholder for the ISO day.
        exclusions: Days known to have no valid remote resource.
        suffix: File extension of the assembled catalog.
        description: Optional human-readable description.
        max_age_hours: Default cache age for this source's files, used when
            neither the caller nor the environment sets one. None means
            they never expire.

    Example:
        >>> src = CatalogSource(
        ...     name="scenes",
        ...     template="https://example.com/{date}_scenes.txt",
        ... )
        >>> src.remote_id(date(2018, 1, 1))
        'https://example.com/2018-01-01_scenes.txt'
    """

    name: str
    template: str
    exclusions: frozenset[date] = field(default_factory=frozenset)
    suffix: str = ".csv"
    description: str = ""
    max_age_hours: int | None = DEFAULT_MAX_AGE_HOURS

    def __post_init__(self) -> None:
        """Validate source fields after initialization."""
        if not self.name:
            raise ValueError("Source name cannot be empty")
        if "{date}" not in self.template:
            raise ValueError("Source template must contain a '{date}' placeholder")
        if self.max_age_hours is not None and self.max_age_hours < 0:
            raise ValueError("max_age_hours cannot be negative")

    def remote_id(self, day: date) -> str:
        """Return the URI of the resource for ``day``."""
        return self.template.format(date=day.isoformat())

    def catalog_name(self, date_range: DateRange, use_exclusions: bool) -> str:
        """Name of the assembled catalog slot for a build.

        Identical parameters always give the same name; disabling the
        exclusion list gives a distinct one.
        """
        flag = "" if use_exclusions else "-all"
        return (
            f"{self.name}-{date_range.start.isoformat()}-to-"
            f"{date_range.end.isoformat()}{flag}{self.suffix}"
        )

    def days(
        self,
        date_range: DateRange,
        use_exclusions: bool = True,
        exclusions: frozenset[date] | None = None,
    ) -> Iterator[DayResource]:
        """Enumerate the resources of this source over ``date_range``.

        Args:
            date_range: Days to enumerate.
            use_exclusions: Whether to skip excluded days.
            exclusions: Overrides the source's own exclusion set.
        """
        from daycatalog.core.enumerator import enumerate_days

        return enumerate_days(
            date_range,
            self.template,
            self.exclusions if exclusions is None else exclusions,
            use_exclusions,
        )
