"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from daycatalog.core.exceptions import StorageNotFoundError
from daycatalog.core.models import CacheConfig, CatalogSource


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "storage: Storage adapters (s3, http, filesystem)")
    config.addinivalue_line("markers", "cache: File cache adapter")
    config.addinivalue_line("markers", "assembly: Catalog assembly and concat adapters")
    config.addinivalue_line("markers", "progress: Rich progress integration")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class FakeStorage:
    """In-memory StoragePort recording every fetch.

    Resources are looked up by exact URI; unknown URIs raise
    StorageNotFoundError like a missing remote object.
    """

    def __init__(self, resources: dict[str, bytes] | None = None) -> None:
        self.resources = dict(resources or {})
        self.fetches: list[str] = []
        self._lock = threading.Lock()

    def fetch(self, source: str) -> bytes:
        with self._lock:
            self.fetches.append(source)
        try:
            return self.resources[source]
        except KeyError:
            raise StorageNotFoundError(f"Not found: {source}", source=source) from None


@pytest.fixture
def fake_storage() -> FakeStorage:
    """Empty in-memory storage; tests add resources as needed."""
    return FakeStorage()


@pytest.fixture
def cache_config(tmp_path: Path) -> CacheConfig:
    """Cache config pointing at a temporary directory with a 24 hour age."""
    return CacheConfig(cache_dir=tmp_path / "cache", max_age_hours=24)


@pytest.fixture
def scenes_source() -> CatalogSource:
    """Source with a memory:// template, for use with FakeStorage."""
    return CatalogSource(name="scenes", template="memory://scenes/{date}_scenes.txt")
