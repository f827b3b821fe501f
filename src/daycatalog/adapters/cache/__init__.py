"""Cache store adapters."""

from daycatalog.adapters.cache.file_cache import FileCache


__all__ = ["FileCache"]
