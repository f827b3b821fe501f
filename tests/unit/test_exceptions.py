"""Unit tests for domain exception hierarchy."""

from datetime import date
from pathlib import Path

import pytest


@pytest.mark.core
class TestDaycatalogError:
    """Tests for base exception class."""

    def test_is_exception_subclass(self) -> None:
        """DaycatalogError should be an Exception subclass."""
        from daycatalog.core.exceptions import DaycatalogError

        assert issubclass(DaycatalogError, Exception)

    def test_recovery_hint_returns_none_by_default(self) -> None:
        """Base exception should return None for recovery_hint."""
        from daycatalog.core.exceptions import DaycatalogError

        err = DaycatalogError("something went wrong")
        assert err.recovery_hint is None

    @pytest.mark.parametrize(
        "name",
        [
            "StorageError",
            "ResourceUnavailable",
            "CacheError",
            "AssemblyFailed",
            "EmptyCatalog",
            "IncompleteCatalog",
            "ConfigurationError",
            "SourceNotFoundError",
        ],
    )
    def test_all_errors_share_the_base(self, name: str) -> None:
        """Every library error can be caught as DaycatalogError."""
        from daycatalog.core import exceptions

        assert issubclass(getattr(exceptions, name), exceptions.DaycatalogError)


@pytest.mark.core
class TestResourceUnavailable:
    """Tests for ResourceUnavailable."""

    def test_carries_remote_id_and_cause(self) -> None:
        """The failing URI and storage error are kept."""
        from daycatalog.core.exceptions import ResourceUnavailable, StorageNotFoundError

        cause = StorageNotFoundError("gone", source="https://h/a.txt")
        err = ResourceUnavailable("https://h/a.txt", cause)

        assert err.remote_id == "https://h/a.txt"
        assert err.cause is cause
        assert "https://h/a.txt" in str(err)
        assert "https://h/a.txt" in err.recovery_hint


@pytest.mark.core
class TestCacheWriteFailed:
    """Tests for CacheWriteFailed."""

    def test_is_cache_error(self, tmp_path: Path) -> None:
        """CacheWriteFailed is a CacheError naming the directory in its hint."""
        from daycatalog.core.exceptions import CacheError, CacheWriteFailed

        err = CacheWriteFailed("https://h/a.txt", tmp_path / "entry", OSError(28, "full"))

        assert isinstance(err, CacheError)
        assert str(tmp_path) in err.recovery_hint


@pytest.mark.core
class TestCatalogErrors:
    """Tests for build-level errors."""

    def test_empty_catalog_names_range(self) -> None:
        """EmptyCatalog mentions both range bounds."""
        from daycatalog.core.exceptions import EmptyCatalog
        from daycatalog.core.models import DateRange

        err = EmptyCatalog(DateRange.parse("2018-01-01", "2018-01-03"))

        assert "2018-01-01" in str(err)
        assert "2018-01-03" in str(err)
        assert err.recovery_hint is not None

    def test_incomplete_catalog_lists_days(self) -> None:
        """IncompleteCatalog lists every missing day."""
        from daycatalog.core.exceptions import IncompleteCatalog

        err = IncompleteCatalog([date(2018, 1, 2), date(2018, 1, 4)])

        assert err.missing == [date(2018, 1, 2), date(2018, 1, 4)]
        assert "2 day(s)" in str(err)
        assert "2018-01-04" in str(err)

    def test_assembly_failed_keeps_dest(self, tmp_path: Path) -> None:
        """AssemblyFailed records the catalog path."""
        from daycatalog.core.exceptions import AssemblyFailed

        err = AssemblyFailed(tmp_path / "c.csv", OSError("boom"))

        assert err.dest == tmp_path / "c.csv"
        assert "boom" in str(err)


@pytest.mark.core
class TestSourceNotFoundError:
    """Tests for SourceNotFoundError."""

    def test_hint_lists_available(self) -> None:
        """Available sources appear in the hint."""
        from daycatalog.core.exceptions import SourceNotFoundError

        err = SourceNotFoundError("landsat", available=["modis-catalog"])

        assert "landsat" in str(err)
        assert "modis-catalog" in err.recovery_hint

    def test_hint_without_sources(self) -> None:
        """A registry with no sources says so."""
        from daycatalog.core.exceptions import SourceNotFoundError

        assert "No catalog sources" in SourceNotFoundError("x").recovery_hint
