"""Core domain module for daycatalog.

This module contains the domain models, ports, enumeration, assembly and
the catalog builder. Concrete storage, cache and executor implementations
live in daycatalog.adapters.
"""

from daycatalog.core.models import (
    CacheConfig,
    CacheEntry,
    CatalogSource,
    ConcatSupport,
    DateRange,
    DayResource,
)
from daycatalog.core.ports import (
    CachePort,
    ConcatPort,
    ExecutorPort,
    ProgressCallback,
    Reader,
    StoragePort,
)


__all__ = [
    "CacheConfig",
    "CacheEntry",
    "CachePort",
    "CatalogSource",
    "ConcatPort",
    "ConcatSupport",
    "DateRange",
    "DayResource",
    "ExecutorPort",
    "ProgressCallback",
    "Reader",
    "StoragePort",
]
