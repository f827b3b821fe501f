"""Storage backend adapters."""

from daycatalog.adapters.storage.filesystem import FilesystemStorage
from daycatalog.adapters.storage.http import HttpStorage
from daycatalog.adapters.storage.router import RouterStorage, create_router
from daycatalog.adapters.storage.s3 import S3Storage


__all__ = [
    "FilesystemStorage",
    "HttpStorage",
    "RouterStorage",
    "S3Storage",
    "create_router",
]
