"""Error types raised by daycatalog.

Every error derives from DaycatalogError. Where a user can do something
about a failure, ``recovery_hint`` says what.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from datetime import date
    from pathlib import Path

    from daycatalog.core.models import DateRange


class DaycatalogError(Exception):
    """Root of the daycatalog error hierarchy."""

    @property
    def recovery_hint(self) -> str | None:
        """What the user could try next, when known."""
        return None


class StorageError(DaycatalogError):
    """A storage backend could not deliver a resource.

    Attributes:
        source: URI or path that was requested.
        cause: Backend exception (botocore, httpx or OSError), if any.
    """

    def __init__(self, message: str, source: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.cause = cause


class StorageNotFoundError(StorageError):
    """The resource does not exist, typically a day not yet published."""

    @property
    def recovery_hint(self) -> str:
        return f"Check that {self.source} exists"


class StorageAccessError(StorageError):
    """The backend refused access to the resource."""

    @property
    def recovery_hint(self) -> str:
        return "Check your credentials and read permissions for the source"


class ResourceUnavailable(DaycatalogError):
    """Raised when a single remote resource could not be fetched.

    Recoverable: the builder skips the day and keeps going.

    Attributes:
        remote_id: URI of the resource that could not be fetched.
        cause: The storage error that triggered this, if any.
    """

    def __init__(self, remote_id: str, cause: Exception | None = None) -> None:
        self.remote_id = remote_id
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Resource unavailable '{remote_id}'{detail}")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking whether the day has been published."""
        return f"Check that {self.remote_id} has been published upstream"


class CacheError(DaycatalogError):
    """Base class for cache-related errors."""

    pass


class CacheWriteFailed(CacheError):
    """Raised when a fetched resource cannot be written into the cache.

    Attributes:
        remote_id: URI of the resource being cached.
        path: The cache path that could not be published.
        cause: The underlying OSError, if any.
    """

    def __init__(
        self,
        remote_id: str,
        path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.remote_id = remote_id
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write cache entry {path} for '{remote_id}'")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the cache directory."""
        return f"Check free space and permissions of {self.path.parent}"


class AssemblyFailed(DaycatalogError):
    """Raised when the catalog file could not be assembled.

    No partial catalog is published when this is raised.

    Attributes:
        dest: The catalog path that was being assembled.
        cause: The underlying exception, if any.
    """

    def __init__(self, dest: Path, cause: Exception | None = None) -> None:
        self.dest = dest
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to assemble catalog {dest}{detail}")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the output directory."""
        return f"Check free space and permissions of {self.dest.parent}"


class EmptyCatalog(DaycatalogError):
    """Raised when no day in the requested range could be resolved.

    Attributes:
        date_range: The range that produced no usable days.
    """

    def __init__(self, date_range: DateRange) -> None:
        self.date_range = date_range
        super().__init__(
            f"No days available between {date_range.start} and {date_range.end}"
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest widening the range or disabling exclusions."""
        return "Widen the date range or check that the remote source is reachable"


class IncompleteCatalog(DaycatalogError):
    """Raised in strict mode when some days in the range are missing.

    Attributes:
        missing: Days whose resources could not be resolved, ascending.
    """

    def __init__(self, missing: list[date]) -> None:
        self.missing = missing
        days = ", ".join(d.isoformat() for d in missing)
        super().__init__(f"{len(missing)} day(s) unavailable: {days}")

    @property
    def recovery_hint(self) -> str:
        """Suggest the non-strict mode."""
        return "Retry later or build without strict mode to skip missing days"


class ConfigurationError(DaycatalogError):
    """Raised for configuration problems (malformed or missing settings)."""

    pass


class SourceNotFoundError(DaycatalogError):
    """Raised when a requested catalog source isn't registered.

    Attributes:
        name: The source name that was not found.
        available: List of available source names.
    """

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available if available is not None else []
        super().__init__(f"Source '{name}' not found")

    @property
    def recovery_hint(self) -> str:
        """Suggest available sources."""
        if self.available:
            return f"Available sources: {', '.join(self.available)}"
        return "No catalog sources are registered"
