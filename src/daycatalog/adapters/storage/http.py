"""HTTP(S) storage adapter using httpx."""

from __future__ import annotations

import httpx

from daycatalog.core.exceptions import (
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)


HTTP_CONNECT_TIMEOUT = 10.0
HTTP_READ_TIMEOUT = 60.0

_NOT_FOUND_STATUSES = frozenset({404, 410})
_DENIED_STATUSES = frozenset({401, 403})


def _create_http_client() -> httpx.Client:
    """Create the default client: bounded timeouts, connect retries, redirects."""
    return httpx.Client(
        transport=httpx.HTTPTransport(retries=2),  # connect errors only
        timeout=httpx.Timeout(HTTP_READ_TIMEOUT, connect=HTTP_CONNECT_TIMEOUT),
        follow_redirects=True,
    )


class HttpStorage:
    """Storage adapter for resources served over HTTP(S).

    Implements StoragePort protocol with a shared httpx.Client, which is
    safe to use from several worker threads.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize HTTP storage.

        Args:
            client: Optional httpx client. If not provided, one is created on
                first use.
        """
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """The httpx client, created lazily."""
        if self._client is None:
            self._client = _create_http_client()
        return self._client

    def fetch(self, source: str) -> bytes:
        """Download a resource body.

        Args:
            source: http:// or https:// URL.

        Returns:
            The response body.

        Raises:
            StorageNotFoundError: On 404 or 410.
            StorageAccessError: On 401 or 403.
            StorageError: On other error statuses and transport failures.
        """
        try:
            response = self.client.get(source)
        except httpx.RequestError as e:
            raise StorageError(
                f"HTTP connection error: {e}",
                source=source,
                cause=e,
            ) from e

        status = response.status_code
        if status in _NOT_FOUND_STATUSES:
            raise StorageNotFoundError(f"Not found ({status}): {source}", source=source)
        if status in _DENIED_STATUSES:
            raise StorageAccessError(f"Access denied ({status}): {source}", source=source)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise StorageError(
                f"HTTP error {status}: {source}",
                source=source,
                cause=e,
            ) from e
        return response.content

    def close(self) -> None:
        """Close the underlying client if one was created."""
        if self._client is not None:
            self._client.close()
