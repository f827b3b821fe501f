"""Unit tests for RouterStorage and URI helpers."""

from pathlib import Path

import httpx
import pytest

from daycatalog.core.exceptions import ConfigurationError

from daycatalog.adapters.storage.router import (
    RouterStorage,
    create_router,
    parse_uri_scheme,
    strip_file_scheme,
)


class StubBackend:
    """Backend returning a fixed payload and recording requests."""

    def __init__(self, payload: bytes) -> None:
        self.payload = payload
        self.requests: list[str] = []

    def fetch(self, source: str) -> bytes:
        self.requests.append(source)
        return self.payload


@pytest.mark.storage
@pytest.mark.tier(0)
class TestParseUriScheme:
    """Tests for parse_uri_scheme()."""

    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("s3://bucket/key", "s3"),
            ("HTTPS://host/path", "https"),
            ("file:///tmp/x", "file"),
            ("/tmp/x", None),
            ("relative/path.txt", None),
            ("C://weird/path", None),
        ],
    )
    def test_schemes(self, uri: str, expected: str | None) -> None:
        """Scheme is lowercased; plain paths have none."""
        assert parse_uri_scheme(uri) == expected

    def test_strip_file_scheme(self) -> None:
        """file:// is removed, other strings are unchanged."""
        assert strip_file_scheme("file:///tmp/x") == "/tmp/x"
        assert strip_file_scheme("/tmp/x") == "/tmp/x"


@pytest.mark.storage
@pytest.mark.tra("Storage.Router")
@pytest.mark.tier(0)
class TestRouterStorage:
    """Tests for RouterStorage.fetch()."""

    def test_routes_by_scheme(self) -> None:
        """Each scheme goes to its backend with the original URI."""
        s3 = StubBackend(b"s3")
        http = StubBackend(b"http")
        router = RouterStorage({"s3": s3, "https": http})

        assert router.fetch("s3://bucket/key") == b"s3"
        assert router.fetch("https://host/a.txt") == b"http"
        assert s3.requests == ["s3://bucket/key"]
        assert http.requests == ["https://host/a.txt"]

    def test_file_scheme_is_stripped(self) -> None:
        """The filesystem backend receives a plain path."""
        fs = StubBackend(b"fs")
        router = RouterStorage({"file": fs, None: fs})

        router.fetch("file:///data/a.txt")
        router.fetch("/data/b.txt")

        assert fs.requests == ["/data/a.txt", "/data/b.txt"]

    def test_unknown_scheme_raises(self) -> None:
        """Unregistered schemes are rejected."""
        router = RouterStorage({"s3": StubBackend(b"")})
        with pytest.raises(ConfigurationError, match="'gs'"):
            router.fetch("gs://bucket/key")

    def test_local_path_without_default_raises(self) -> None:
        """Plain paths need a None backend."""
        router = RouterStorage({"s3": StubBackend(b"")})
        with pytest.raises(ConfigurationError, match="local path"):
            router.fetch("/tmp/x")


@pytest.mark.storage
@pytest.mark.tier(0)
class TestCreateRouter:
    """Tests for create_router()."""

    def test_default_router_reads_local_files(self, tmp_path: Path) -> None:
        """Local paths and file:// URIs go to the filesystem."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"local")
        router = create_router()

        assert router.fetch(str(path)) == b"local"
        assert router.fetch(f"file://{path}") == b"local"

    def test_default_router_uses_given_http_client(self) -> None:
        """http and https share the injected client."""
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"ok"))
        )
        router = create_router(http_client=client)

        assert router.fetch("https://host/a.txt") == b"ok"
        assert router.fetch("http://host/a.txt") == b"ok"
