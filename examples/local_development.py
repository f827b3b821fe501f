"""Build catalogs from local per-day files.

Useful for development and tests: day files live in a local directory,
FilesystemStorage reads them, and the cache sits next to them. Manual
wiring gives full control over every adapter.
"""

from pathlib import Path

from daycatalog import (
    CacheConfig,
    CatalogAssembler,
    CatalogBuilder,
    CatalogSource,
    DateRange,
    FileCache,
    FilesystemStorage,
    UnsupportedConcat,
)


remote = Path("./remote")
remote.mkdir(exist_ok=True)
for day in ("2018-01-01", "2018-01-02", "2018-01-03"):
    (remote / f"{day}_scenes.txt").write_text(f"productId\nscene-{day}\n")

source = CatalogSource(
    name="local-scenes",
    template=str(remote / "{date}_scenes.txt"),
    description="Scene lists copied to the local disk",
)

# Infinite max age: local files never go stale
cache = FileCache(CacheConfig(Path("./cache"), max_age_hours=None), FilesystemStorage())

builder = CatalogBuilder(
    source,
    cache,
    CatalogAssembler(UnsupportedConcat()),  # always stream
    max_workers=1,
)

path = builder.build(DateRange.parse("2018-01-01", "2018-01-03"))
print(path.read_text())
