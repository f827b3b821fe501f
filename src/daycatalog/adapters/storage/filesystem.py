"""Filesystem storage adapter for local file operations."""

from __future__ import annotations

from pathlib import Path

from daycatalog.core.exceptions import (
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)


class FilesystemStorage:
    """Storage adapter for local filesystem operations.

    Implements StoragePort protocol for local file operations.
    Useful for local development and testing without S3 or HTTP.
    """

    def fetch(self, source: str) -> bytes:
        """Read a local file.

        Args:
            source: Path to file (absolute or relative).

        Returns:
            The file contents.

        Raises:
            StorageNotFoundError: If file does not exist.
            StorageAccessError: If the file cannot be read due to permissions.
            StorageError: For other I/O errors.
        """
        path = Path(source)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise StorageNotFoundError(
                f"File not found: {source}",
                source=source,
                cause=e,
            ) from e
        except PermissionError as e:
            raise StorageAccessError(
                f"Permission denied: {source}",
                source=source,
                cause=e,
            ) from e
        except OSError as e:
            raise StorageError(
                f"Could not read {source}: {e}",
                source=source,
                cause=e,
            ) from e
