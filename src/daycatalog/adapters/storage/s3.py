"""S3 storage adapter using boto3."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from daycatalog.core.exceptions import (
    ConfigurationError,
    StorageAccessError,
    StorageError,
    StorageNotFoundError,
)


if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client


_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NoSuchBucket"})
_DENIED_CODES = frozenset({"403", "AccessDenied"})


def split_s3_uri(uri: str) -> tuple[str, str]:
    """Split ``s3://bucket/key`` into bucket and key.

    Raises:
        ConfigurationError: If the URI is not s3:// or has no key.
    """
    parts = urlsplit(uri)
    if parts.scheme != "s3" or not parts.netloc:
        raise ConfigurationError(f"Invalid S3 URI: {uri}")
    key = parts.path.lstrip("/")
    if not key:
        raise ConfigurationError(f"Invalid S3 URI (missing key): {uri}")
    return parts.netloc, key


def storage_error_from(error: ClientError, source: str) -> StorageError:
    """Map a botocore ClientError onto the storage error hierarchy."""
    code = str(error.response.get("Error", {}).get("Code", ""))
    if code in _NOT_FOUND_CODES:
        return StorageNotFoundError(
            f"Object not found: {source}", source=source, cause=error
        )
    if code in _DENIED_CODES:
        return StorageAccessError(f"Access denied: {source}", source=source, cause=error)
    return StorageError(f"S3 error ({code}): {error}", source=source, cause=error)


class S3Storage:
    """StoragePort for objects in S3 buckets.

    Each fetch is a single GetObject. The boto3 client is thread-safe and
    shared by all fetch workers.
    """

    def __init__(self, client: S3Client | None = None) -> None:
        """Initialize S3 storage.

        Args:
            client: boto3 S3 client. Created from the default session on
                first use when omitted.
        """
        self._client = client

    @property
    def client(self) -> S3Client:
        if self._client is None:
            self._client = boto3.client("s3")
        return self._client

    def fetch(self, source: str) -> bytes:
        """Read a whole object into memory.

        Args:
            source: S3 URI (s3://bucket/key).

        Raises:
            ConfigurationError: If ``source`` is not a valid S3 URI.
            StorageNotFoundError: If the bucket or key does not exist.
            StorageAccessError: If access is denied.
            StorageError: For other S3 or transport failures.
        """
        bucket, key = split_s3_uri(source)
        try:
            body = self.client.get_object(Bucket=bucket, Key=key)["Body"]
            return body.read()
        except ClientError as e:
            raise storage_error_from(e, source) from e
        except BotoCoreError as e:
            raise StorageError(f"S3 transport error: {e}", source=source, cause=e) from e
