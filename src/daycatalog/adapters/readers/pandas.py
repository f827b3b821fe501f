"""Pandas reader adapter for assembled CSV catalogs.

Provides the Reader implementation that hands a catalog file to pandas.
"""

from pathlib import Path

import pandas as pd


class SceneListReader:
    """Reader adapter for catalogs assembled from per-day CSV files.

    Each per-day file carries its own header line, so an assembled catalog
    repeats the header once per day. The first header names the columns and
    the repeats are dropped. All values are kept as strings unless listed in
    ``parse_dates``.

    Args:
        parse_dates: Optional column names to convert to datetimes.
    """

    def __init__(self, parse_dates: list[str] | None = None) -> None:
        self.parse_dates = parse_dates

    def read(self, path: Path) -> pd.DataFrame:
        """Load an assembled catalog into a pandas DataFrame.

        Args:
            path: Path to the assembled catalog file.

        Returns:
            pandas DataFrame with one row per record, repeated headers removed.

        Raises:
            FileNotFoundError: If the file does not exist.
            Exception: Any pandas-specific exceptions (e.g., ParserError).
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        header = pd.Series(df.columns, index=df.columns)
        repeated = (df == header).all(axis=1)
        df = df.loc[~repeated].reset_index(drop=True)

        for column in self.parse_dates or []:
            df[column] = pd.to_datetime(df[column])

        return df
