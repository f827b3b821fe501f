"""File-based cache store mapping remote resources to local copies."""

from __future__ import annotations

import contextlib
import hashlib
import logging
import os
import re
import tempfile
import time
from datetime import UTC, datetime
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from daycatalog.core.exceptions import (
    CacheWriteFailed,
    ConfigurationError,
    ResourceUnavailable,
    StorageError,
)
from daycatalog.core.models import CacheEntry


if TYPE_CHECKING:
    from daycatalog.core.models import CacheConfig
    from daycatalog.core.ports import StoragePort


logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")

# Prefix of in-progress writes; never a published entry
_TEMP_PREFIX = "."


class FileCache:
    """Local file cache whose directory is the only source of truth.

    Each remote resource maps to one deterministic file name. Freshness is
    judged from the file's modification time against the configured maximum
    age, so no metadata sidecar or index is kept. New content is written to a
    hidden temporary file and renamed into place, so readers only ever see
    complete files.

    Attributes:
        config: Cache directory and maximum age settings.
        cache_dir: Directory where cached files are stored.
    """

    def __init__(self, config: CacheConfig, storage: StoragePort) -> None:
        """Initialize the cache and create its directory if absent.

        Args:
            config: Cache directory and maximum age.
            storage: Transport used to fetch missing or stale resources.

        Raises:
            ConfigurationError: If the cache directory cannot be created.
        """
        self.config = config
        self.cache_dir = config.cache_dir
        self._storage = storage
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot create cache directory {self.cache_dir}: {e}"
            ) from e

    def key_for(self, remote_id: str) -> str:
        """Get the cache file name for a remote resource.

        The name combines a hash of the full URI with its sanitized basename,
        so it is stable across runs and readable in a directory listing.
        """
        digest = hashlib.sha256(remote_id.encode("utf-8")).hexdigest()[:16]
        basename = PurePosixPath(urlsplit(remote_id).path).name or "resource"
        return f"{digest}-{_UNSAFE_CHARS.sub('_', basename)}"

    def cache_path(self, name: str) -> Path:
        """Get the path for a named file in the cache directory."""
        return self.cache_dir / name

    def is_fresh(self, path: Path) -> bool:
        """Check whether a cached file exists and is younger than the maximum age."""
        try:
            modified = path.stat().st_mtime
        except FileNotFoundError:
            return False
        return self.config.is_fresh(modified, time.time())

    def cached_file(self, name: str) -> Path | None:
        """Return the named cache file if it exists and is fresh."""
        path = self.cache_path(name)
        return path if self.is_fresh(path) else None

    def lookup(self, remote_id: str) -> CacheEntry | None:
        """Get the published cache entry for a remote resource, or None.

        Args:
            remote_id: URI of the resource.

        Returns:
            CacheEntry describing the cached copy, fresh or not.
        """
        path = self.cache_path(self.key_for(remote_id))
        try:
            stat = path.stat()
        except FileNotFoundError:
            return None
        return CacheEntry(
            remote_id=remote_id,
            local_path=path,
            fetched_at=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
            size_bytes=stat.st_size,
        )

    def state(self, remote_id: str) -> str:
        """Get the cache state of a resource: "fresh", "stale" or "missing"."""
        entry = self.lookup(remote_id)
        if entry is None:
            return "missing"
        return "fresh" if self.is_fresh(entry.local_path) else "stale"

    def resolve(self, remote_id: str) -> Path:
        """Return a fresh local copy of a remote resource.

        A fresh cached copy is returned without touching the network.
        Otherwise the resource is fetched and atomically published.

        Args:
            remote_id: URI of the resource.

        Returns:
            Path to the cached copy.

        Raises:
            ResourceUnavailable: If the resource could not be fetched.
            CacheWriteFailed: If the fetched bytes could not be published.
        """
        path = self.cache_path(self.key_for(remote_id))
        if self.is_fresh(path):
            logger.debug("Cache hit for %s", remote_id)
            return path

        logger.debug("Fetching %s", remote_id)
        try:
            data = self._storage.fetch(remote_id)
        except StorageError as e:
            raise ResourceUnavailable(remote_id, e) from e

        self._publish(remote_id, path, data)
        return path

    def _publish(self, remote_id: str, path: Path, data: bytes) -> None:
        """Write ``data`` to a temporary file and rename it onto ``path``."""
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                delete=False,
                dir=self.cache_dir,
                prefix=f"{_TEMP_PREFIX}{path.name}.",
                suffix=".part",
            ) as tmp_file:
                tmp_path = Path(tmp_file.name)
                tmp_file.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            raise CacheWriteFailed(remote_id, path, e) from e
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

    def statistics(self) -> dict[str, int]:
        """Get cache statistics.

        In-progress temporary files are not counted.

        Returns:
            Dictionary with 'total_size' (bytes) and 'file_count' (number of files).
        """
        total_size = 0
        file_count = 0

        if not self.cache_dir.exists():
            return {"total_size": 0, "file_count": 0}

        for file_path in self.cache_dir.iterdir():
            if file_path.name.startswith(_TEMP_PREFIX) or not file_path.is_file():
                continue
            with contextlib.suppress(OSError):
                total_size += file_path.stat().st_size
                file_count += 1

        return {"total_size": total_size, "file_count": file_count}
