"""Protocols the core depends on.

The builder and cache talk to storage, concatenation, progress display,
readers and executors only through these protocols. Adapters live in
daycatalog.adapters and daycatalog.progress.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Sequence
    from concurrent.futures import Future
    from pathlib import Path

    from daycatalog.core.models import ConcatSupport

ProgressCallback = Callable[[int, int], None]

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class StoragePort(Protocol):
    """Remote storage backend (S3, HTTP, local filesystem)."""

    def fetch(self, source: str) -> bytes:
        """Fetch the full contents of a remote resource.

        Args:
            source: Remote URI or path of the resource.

        Returns:
            The resource bytes.

        Raises:
            StorageNotFoundError: If the resource does not exist.
            StorageAccessError: If access is denied.
            StorageError: For transient or other transport failures.
        """
        ...


@runtime_checkable
class CachePort(Protocol):
    """Local cache store mapping remote resources to fresh local copies."""

    cache_dir: Path

    def resolve(self, remote_id: str) -> Path:
        """Return a fresh local copy of a remote resource, fetching if needed.

        Raises:
            ResourceUnavailable: If the resource could not be fetched.
            CacheWriteFailed: If the fetched bytes could not be published.
        """
        ...

    def cache_path(self, name: str) -> Path:
        """Get the path for a named file in the cache directory."""
        ...

    def cached_file(self, name: str) -> Path | None:
        """Return the named cache file if it exists and is fresh."""
        ...


@runtime_checkable
class ConcatPort(Protocol):
    """Native, filesystem-level concatenation of local files."""

    def probe(self, directory: Path) -> ConcatSupport:
        """Report whether native concatenation works for files in ``directory``."""
        ...

    def concat(self, dest: Path, inputs: Sequence[Path]) -> None:
        """Concatenate ``inputs`` in order into the existing file ``dest``.

        Only called after probe() returned ConcatSupport.SUPPORTED.

        Raises:
            OSError: If any input cannot be read or dest cannot be written.
        """
        ...


@runtime_checkable
class Reader(Protocol[T_co]):
    """Loads an assembled catalog file into a typed object."""

    def read(self, path: Path) -> T_co:
        """Read the file at ``path``."""
        ...


@runtime_checkable
class ProgressReporter(Protocol):
    """Receives per-day progress of a catalog build.

    The builder calls start_task() once per build, the returned callback
    once per resolved or skipped day, and finish_task() when resolution
    ends, whether it succeeded or not.
    """

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Begin reporting a build of ``total`` days named ``name``.

        Returns:
            Callback taking (days_done, total_days).
        """
        ...

    def finish_task(self, name: str) -> None:
        """End reporting for the build started as ``name``."""
        ...


class NullProgressReporter:
    """ProgressReporter that discards every update."""

    def start_task(self, name: str, total: int) -> ProgressCallback:  # noqa: ARG002
        return _ignore_progress

    def finish_task(self, name: str) -> None:  # noqa: ARG002
        return None


def _ignore_progress(done: int, total: int) -> None:  # noqa: ARG001
    return None


@runtime_checkable
class ExecutorPort(Protocol):
    """Runs day fetches, possibly in parallel.

    A context manager in the style of concurrent.futures executors: leaving
    the context waits for submitted work. Thread pools stay in the adapter
    layer behind this protocol.
    """

    def submit(
        self, fn: Callable[..., object], *args: object, **kwargs: object
    ) -> Future[object]:  # type: ignore[name-defined, unused-ignore]
        """Schedule ``fn(*args, **kwargs)`` and return its future."""
        ...

    def __enter__(self) -> ExecutorPort: ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None: ...
