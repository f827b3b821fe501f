"""Reader adapters for loading assembled catalogs into typed objects."""

from daycatalog.adapters.readers.pandas import SceneListReader


__all__ = ["SceneListReader"]
