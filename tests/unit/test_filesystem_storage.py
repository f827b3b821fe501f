"""Unit tests for FilesystemStorage adapter."""

from pathlib import Path

import pytest

from daycatalog.core.exceptions import StorageError, StorageNotFoundError
from daycatalog.core.ports import StoragePort


@pytest.mark.storage
@pytest.mark.tier(0)
class TestFetch:
    """Tests for FilesystemStorage.fetch()."""

    def test_reads_file_bytes(self, tmp_path: Path) -> None:
        """fetch() returns the file contents."""
        from daycatalog.adapters.storage import FilesystemStorage

        source = tmp_path / "2018-01-01_scenes.txt"
        source.write_bytes(b"productId\nA\n")

        assert FilesystemStorage().fetch(str(source)) == b"productId\nA\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is StorageNotFoundError."""
        from daycatalog.adapters.storage import FilesystemStorage

        with pytest.raises(StorageNotFoundError) as exc_info:
            FilesystemStorage().fetch(str(tmp_path / "missing.txt"))

        assert "missing.txt" in exc_info.value.source

    def test_directory_is_storage_error(self, tmp_path: Path) -> None:
        """Reading a directory fails as a storage error."""
        from daycatalog.adapters.storage import FilesystemStorage

        with pytest.raises(StorageError):
            FilesystemStorage().fetch(str(tmp_path))

    def test_satisfies_storage_port(self) -> None:
        """FilesystemStorage is a StoragePort."""
        from daycatalog.adapters.storage import FilesystemStorage

        assert isinstance(FilesystemStorage(), StoragePort)
