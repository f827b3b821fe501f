"""Unit tests for the pandas catalog reader."""

from pathlib import Path

import pandas as pd
import pytest


HEADER = "productId,date,download_url\n"


@pytest.mark.core
@pytest.mark.tra("Reader.SceneList")
@pytest.mark.tier(1)
class TestSceneListReader:
    """Tests for SceneListReader."""

    def test_repeated_headers_dropped(self, tmp_path: Path) -> None:
        """Each per-day header after the first is removed."""
        from daycatalog.adapters.readers import SceneListReader

        path = tmp_path / "catalog.csv"
        path.write_text(
            HEADER
            + "A,2018-01-01,https://h/a.tif\n"
            + HEADER
            + "B,2018-01-02,https://h/b.tif\n"
            + "C,2018-01-02,https://h/c.tif\n"
        )

        df = SceneListReader().read(path)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["productId", "date", "download_url"]
        assert list(df["productId"]) == ["A", "B", "C"]
        assert list(df.index) == [0, 1, 2]

    def test_values_kept_as_strings(self, tmp_path: Path) -> None:
        """Values are not coerced; empty cells stay empty strings."""
        from daycatalog.adapters.readers import SceneListReader

        path = tmp_path / "catalog.csv"
        path.write_text("id,count\n007,\n")

        df = SceneListReader().read(path)

        assert df.loc[0, "id"] == "007"
        assert df.loc[0, "count"] == ""

    def test_parse_dates(self, tmp_path: Path) -> None:
        """Listed columns become datetimes."""
        from daycatalog.adapters.readers import SceneListReader

        path = tmp_path / "catalog.csv"
        path.write_text(HEADER + "A,2018-01-01,x\n" + HEADER + "B,2018-01-02,y\n")

        df = SceneListReader(parse_dates=["date"]).read(path)

        assert pd.api.types.is_datetime64_any_dtype(df["date"])
        assert df.loc[1, "date"] == pd.Timestamp("2018-01-02")

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing catalog raises FileNotFoundError."""
        from daycatalog.adapters.readers import SceneListReader

        with pytest.raises(FileNotFoundError):
            SceneListReader().read(tmp_path / "missing.csv")

    def test_satisfies_reader_protocol(self) -> None:
        """SceneListReader is a Reader."""
        from daycatalog.adapters.readers import SceneListReader
        from daycatalog.core.ports import Reader

        assert isinstance(SceneListReader(), Reader)
