"""Tests validating that example code patterns work correctly.

These tests ensure the examples in the examples/ directory represent
working, copy-pasteable code patterns.
"""

from datetime import date
from pathlib import Path

import pytest

from daycatalog import (
    CacheConfig,
    CatalogAssembler,
    CatalogBuilder,
    CatalogSource,
    DateRange,
    EmptyCatalog,
    FileCache,
    FilesystemStorage,
    IncompleteCatalog,
    UnsupportedConcat,
)


def _local_builder(tmp_path: Path, *days: str) -> CatalogBuilder:
    remote = tmp_path / "remote"
    remote.mkdir()
    for day in days:
        (remote / f"{day}_scenes.txt").write_text(f"productId\nscene-{day}\n")
    source = CatalogSource(name="local-scenes", template=str(remote / "{date}_scenes.txt"))
    cache = FileCache(
        CacheConfig(tmp_path / "cache", max_age_hours=None), FilesystemStorage()
    )
    return CatalogBuilder(
        source, cache, CatalogAssembler(UnsupportedConcat()), max_workers=1
    )


@pytest.mark.core
class TestLocalDevelopment:
    """Tests for local_development.py example pattern."""

    def test_manual_wiring_builds_catalog(self, tmp_path: Path) -> None:
        """Manually wired adapters produce the ordered catalog."""
        builder = _local_builder(tmp_path, "2018-01-01", "2018-01-02", "2018-01-03")

        path = builder.build(DateRange.parse("2018-01-01", "2018-01-03"))

        assert path.read_text() == (
            "productId\nscene-2018-01-01\n"
            "productId\nscene-2018-01-02\n"
            "productId\nscene-2018-01-03\n"
        )

    def test_load_gives_one_row_per_scene(self, tmp_path: Path) -> None:
        """load() hands the catalog to pandas."""
        builder = _local_builder(tmp_path, "2018-01-01", "2018-01-02")

        df = builder.load(DateRange.parse("2018-01-01", "2018-01-02"))

        assert list(df["productId"]) == ["scene-2018-01-01", "scene-2018-01-02"]


@pytest.mark.core
class TestErrorHandling:
    """Tests for error_handling.py example patterns."""

    def test_strict_then_partial(self, tmp_path: Path) -> None:
        """A strict failure can fall back to a partial catalog."""
        builder = _local_builder(tmp_path, "2018-01-01")
        r = DateRange.parse("2018-01-01", "2018-01-02")

        with pytest.raises(IncompleteCatalog) as exc_info:
            builder.build(r, strict=True)
        assert exc_info.value.missing == [date(2018, 1, 2)]

        assert builder.build(r).read_text() == "productId\nscene-2018-01-01\n"

    def test_empty_catalog_has_hint(self, tmp_path: Path) -> None:
        """EmptyCatalog carries a recovery hint."""
        builder = _local_builder(tmp_path)

        with pytest.raises(EmptyCatalog) as exc_info:
            builder.build(DateRange.parse("2018-01-01", "2018-01-01"))

        assert exc_info.value.recovery_hint
