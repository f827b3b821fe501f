"""Core domain services for daycatalog."""

import logging
from collections.abc import Callable
from concurrent.futures import as_completed
from datetime import date
from pathlib import Path
from typing import Any

from daycatalog.core.assembler import CatalogAssembler
from daycatalog.core.exceptions import (
    CacheWriteFailed,
    EmptyCatalog,
    IncompleteCatalog,
    ResourceUnavailable,
)
from daycatalog.core.models import CacheConfig, CatalogSource, DateRange, DayResource
from daycatalog.core.ports import (
    CachePort,
    ExecutorPort,
    NullProgressReporter,
    ProgressCallback,
    ProgressReporter,
    Reader,
    StoragePort,
)


logger = logging.getLogger(__name__)

ExecutorFactory = Callable[[int], ExecutorPort]

DEFAULT_MAX_WORKERS = 8


class CatalogBuilder:
    """Builds a consolidated catalog file for a date range of one source.

    Enumerates the days of the range, resolves each day's resource through
    the cache store on a bounded worker pool, and assembles the resolved
    files in date order into a single catalog file kept in the cache
    directory.
    """

    def __init__(
        self,
        source: CatalogSource,
        cache: CachePort,
        assembler: CatalogAssembler | None = None,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
        executor_factory: ExecutorFactory | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            source: Naming template and exclusion list of the remote collection.
            cache: Cache store (FileCache) resolving remote ids to local paths.
            assembler: Assembler for the final file. Defaults to a streaming one.
            max_workers: Upper bound on concurrent day fetches.
            executor_factory: Creates an executor for a given worker count.
                Defaults to create_executor().
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if executor_factory is None:
            from daycatalog.adapters.executor import create_executor

            executor_factory = create_executor
        self._source = source
        self._cache = cache
        self._assembler = assembler or CatalogAssembler()
        self._max_workers = max_workers
        self._executor_factory = executor_factory

    @classmethod
    def from_config(
        cls,
        source: CatalogSource,
        config: CacheConfig | None = None,
        *,
        storage: StoragePort | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> "CatalogBuilder":
        """Create a builder wired with the default adapters.

        Args:
            source: The remote collection to build catalogs of.
            config: Cache settings. Defaults to load_cache_config() with the
                source's own cache age as the fallback.
            storage: Transport for remote resources. Defaults to create_router().
            max_workers: Upper bound on concurrent day fetches.

        Returns:
            CatalogBuilder with FileCache, RouterStorage and a native-concat
            capable assembler.
        """
        from daycatalog.adapters.cache import FileCache
        from daycatalog.adapters.concat import CopyFileRangeConcat
        from daycatalog.adapters.storage import create_router
        from daycatalog.config import load_cache_config

        if config is None:
            config = load_cache_config(default_max_age_hours=source.max_age_hours)
        if storage is None:
            storage = create_router()

        return cls(
            source=source,
            cache=FileCache(config, storage),
            assembler=CatalogAssembler(CopyFileRangeConcat()),
            max_workers=max_workers,
        )

    @property
    def source(self) -> CatalogSource:
        """The remote collection this builder assembles."""
        return self._source

    @property
    def cache(self) -> CachePort:
        """The cache store used for day files and catalogs."""
        return self._cache

    def catalog_path(self, date_range: DateRange, use_exclusions: bool = True) -> Path:
        """Path of the catalog slot for a build with these parameters."""
        return self._cache.cache_path(
            self._source.catalog_name(date_range, use_exclusions)
        )

    def build(
        self,
        date_range: DateRange,
        exclusions: frozenset[date] | None = None,
        use_exclusions: bool = True,
        *,
        progress: ProgressReporter | None = None,
        strict: bool = False,
    ) -> Path:
        """Build (or reuse) the catalog file for ``date_range``.

        A fresh catalog from an earlier identical build is returned as is.
        Otherwise every non-excluded day is resolved through the cache,
        unavailable days are skipped with a warning, and the rest are
        concatenated in date order.

        Args:
            date_range: Inclusive range of days.
            exclusions: Days to skip. Defaults to the source's exclusion set.
            use_exclusions: If False, excluded days are fetched anyway.
            progress: Optional progress reporter, advanced once per day.
            strict: If True, fail instead of skipping unavailable days.

        Returns:
            Path to the assembled catalog file.

        Raises:
            EmptyCatalog: If no day could be resolved.
            IncompleteCatalog: If strict and at least one day is unavailable.
            AssemblyFailed: If the catalog file could not be written.
            ConfigurationError: If the source's URIs name no known backend.
        """
        if progress is None:
            progress = NullProgressReporter()

        name = self._source.catalog_name(date_range, use_exclusions)
        cached = self._cache.cached_file(name)
        if cached is not None:
            logger.info("Reusing cached catalog %s", cached)
            return cached

        days = list(self._source.days(date_range, use_exclusions, exclusions))
        logger.info(
            "Building %s from %d day(s) using '%s' for the cache",
            name,
            len(days),
            self._cache.cache_dir,
        )
        if not days:
            raise EmptyCatalog(date_range)

        callback = progress.start_task(name, len(days))
        try:
            slots = self._resolve_all(days, callback)
        finally:
            progress.finish_task(name)

        missing = [day.day for day, slot in zip(days, slots, strict=True) if slot is None]
        paths = [slot for slot in slots if slot is not None]
        if not paths:
            raise EmptyCatalog(date_range)
        if strict and missing:
            raise IncompleteCatalog(missing)
        if missing:
            logger.warning(
                "Catalog %s is missing %d of %d day(s)", name, len(missing), len(days)
            )

        return self._assembler.assemble(paths, self._cache.cache_path(name))

    def load(
        self,
        date_range: DateRange,
        reader: Reader[Any] | None = None,
        **build_kwargs: Any,
    ) -> Any:
        """Build the catalog and load it with a reader.

        Args:
            date_range: Inclusive range of days.
            reader: Reader for the catalog file. Defaults to SceneListReader.
            **build_kwargs: Forwarded to build().

        Returns:
            Whatever the reader returns (a pandas DataFrame by default).
        """
        if reader is None:
            from daycatalog.adapters.readers import SceneListReader

            reader = SceneListReader()
        return reader.read(self.build(date_range, **build_kwargs))

    def _resolve_all(
        self, days: list[DayResource], callback: ProgressCallback
    ) -> list[Path | None]:
        """Resolve every day, keeping results in the order of ``days``.

        Results land in a slot list indexed by each day's position, so the
        order in which fetches complete never reaches the output.
        """
        slots: list[Path | None] = [None] * len(days)
        executor = self._executor_factory(min(self._max_workers, len(days)))
        with executor:
            futures = {
                executor.submit(self._resolve_one, day): index
                for index, day in enumerate(days)
            }
            for completed, future in enumerate(as_completed(futures), start=1):
                result = future.result()
                assert result is None or isinstance(result, Path)
                slots[futures[future]] = result
                callback(completed, len(days))
        return slots

    def _resolve_one(self, day: DayResource) -> Path | None:
        """Resolve one day, turning recoverable failures into None."""
        try:
            return self._cache.resolve(day.remote_id)
        except ResourceUnavailable as e:
            logger.warning("Skipping %s: %s unavailable (%s)", day.day, day.remote_id, e.cause)
        except CacheWriteFailed as e:
            logger.warning(
                "Skipping %s: could not cache %s (%s)", day.day, day.remote_id, e.cause
            )
        return None
