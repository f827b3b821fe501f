"""Build a MODIS scene catalog for one month.

This example shows the simplest usage pattern: pick a registered source,
wire a builder with the default adapters, and build. Day files are cached
under ~/.daycatalog_cache (or DAYCATALOG_CACHE_DIR) and reused for 24
hours, so running it twice only fetches once.
"""

from daycatalog import MODIS_MCD43A4, CatalogBuilder, DateRange, RichProgressReporter


# Factory method wires RouterStorage, FileCache and a native-concat assembler
builder = CatalogBuilder.from_config(MODIS_MCD43A4)

january = DateRange.parse("2018-01-01", "2018-01-31")

with RichProgressReporter() as progress:
    path = builder.build(january, progress=progress)

print(f"Catalog available at: {path}")

# Load it into pandas; the repeated per-day headers are dropped
scenes = builder.load(january)
print(f"{len(scenes)} scenes")
