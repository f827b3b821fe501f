"""Scheme-based dispatch of fetches to storage backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from daycatalog.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from daycatalog.core.ports import StoragePort


_FILE_PREFIX = "file://"


def parse_uri_scheme(uri: str) -> str | None:
    """Return the lowercased scheme of ``uri``, or None for a plain path.

    Single-letter schemes are Windows drive letters, not schemes.
    """
    scheme, sep, _ = uri.partition("://")
    if not sep or len(scheme) < 2:
        return None
    return scheme.lower()


def strip_file_scheme(uri: str) -> str:
    """Turn a file:// URI into a plain path; other strings pass through."""
    return uri.removeprefix(_FILE_PREFIX)


class RouterStorage:
    """StoragePort that picks a backend from the URI scheme.

    Catalog sources can mix S3, HTTP(S) and local files; the cache only
    ever sees this one StoragePort.

    Args:
        backends: Scheme to backend mapping. The None key serves plain
            local paths.
    """

    def __init__(self, backends: Mapping[str | None, StoragePort]) -> None:
        self._backends = dict(backends)

    def route(self, uri: str) -> tuple[StoragePort, str]:
        """Get the backend for ``uri`` and the location to hand it.

        Raises:
            ConfigurationError: If no backend serves the scheme.
        """
        scheme = parse_uri_scheme(uri)
        backend = self._backends.get(scheme)
        if backend is None:
            where = f"scheme '{scheme}'" if scheme else "local path"
            raise ConfigurationError(f"No storage backend registered for {where}")
        if scheme == "file":
            return backend, strip_file_scheme(uri)
        return backend, uri

    def fetch(self, source: str) -> bytes:
        backend, location = self.route(source)
        return backend.fetch(location)


def create_router(
    s3_client: Any | None = None,
    http_client: httpx.Client | None = None,
) -> RouterStorage:
    """Create a RouterStorage serving s3://, http(s)://, file:// and local paths.

    Args:
        s3_client: boto3 S3 client. Created lazily when omitted.
        http_client: httpx client. Created lazily when omitted.
    """
    from daycatalog.adapters.storage import FilesystemStorage, HttpStorage, S3Storage

    local = FilesystemStorage()
    web = HttpStorage(client=http_client)
    return RouterStorage(
        {
            "s3": S3Storage(client=s3_client),
            "http": web,
            "https": web,
            "file": local,
            None: local,
        }
    )
