"""daycatalog - Consolidated catalogs from per-day remote files.

This library fetches the per-day files of a remote collection over a date
range, caches each one locally with an age-based staleness policy, and
concatenates them in date order into a single catalog file.

Example:
    >>> from daycatalog import CatalogBuilder, DateRange, MODIS_MCD43A4
    >>> builder = CatalogBuilder.from_config(MODIS_MCD43A4)
    >>> path = builder.build(DateRange.parse("2018-01-01", "2018-01-31"))
"""

from daycatalog.adapters.cache import FileCache
from daycatalog.adapters.concat import CopyFileRangeConcat, UnsupportedConcat
from daycatalog.adapters.readers import SceneListReader
from daycatalog.adapters.storage import (
    FilesystemStorage,
    HttpStorage,
    RouterStorage,
    S3Storage,
    create_router,
)
from daycatalog.config import load_cache_config
from daycatalog.core.assembler import CatalogAssembler
from daycatalog.core.enumerator import enumerate_days
from daycatalog.core.exceptions import (
    AssemblyFailed,
    CacheError,
    CacheWriteFailed,
    ConfigurationError,
    DaycatalogError,
    EmptyCatalog,
    IncompleteCatalog,
    ResourceUnavailable,
    SourceNotFoundError,
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)
from daycatalog.core.models import (
    CacheConfig,
    CacheEntry,
    CatalogSource,
    ConcatSupport,
    DateRange,
    DayResource,
    parse_exclusions,
)
from daycatalog.core.ports import (
    CachePort,
    ConcatPort,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    Reader,
    StoragePort,
)
from daycatalog.core.services import CatalogBuilder
from daycatalog.progress import RichProgressReporter
from daycatalog.sources import MODIS_MCD43A4, get_source


__version__ = "0.1.0"

__all__ = [
    "MODIS_MCD43A4",
    "AssemblyFailed",
    "CacheConfig",
    "CacheEntry",
    "CacheError",
    "CachePort",
    "CacheWriteFailed",
    "CatalogAssembler",
    "CatalogBuilder",
    "CatalogSource",
    "ConcatPort",
    "ConcatSupport",
    "ConfigurationError",
    "CopyFileRangeConcat",
    "DateRange",
    "DayResource",
    "DaycatalogError",
    "EmptyCatalog",
    "FileCache",
    "FilesystemStorage",
    "HttpStorage",
    "IncompleteCatalog",
    "NullProgressReporter",
    "ProgressCallback",
    "ProgressReporter",
    "Reader",
    "ResourceUnavailable",
    "RichProgressReporter",
    "RouterStorage",
    "S3Storage",
    "SceneListReader",
    "SourceNotFoundError",
    "StorageAccessError",
    "StorageError",
    "StorageNotFoundError",
    "StoragePort",
    "UnsupportedConcat",
    "__version__",
    "create_router",
    "enumerate_days",
    "get_source",
    "load_cache_config",
    "parse_exclusions",
]
