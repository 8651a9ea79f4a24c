# conftest.py
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from swasthyaq.config import Settings
from swasthyaq.dependencies import get_settings, get_store
from swasthyaq.main import create_app
from swasthyaq.storage import InMemoryKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Fresh in-memory substrate per test."""
    return InMemoryKeyValueStore()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        storage_backend="memory",
        default_page_size=20,
        max_page_size=1000,
        export_limit=10000,
    )


@pytest.fixture
def client(store: InMemoryKeyValueStore, test_settings: Settings) -> Iterator[TestClient]:
    """TestClient over an app whose store and settings are isolated per test."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
