# tests/conftest.py — v2
"""Shared test fixtures for unit and integration tests.

Every store lives under pytest's tmp_path, so no cleanup of a shared
caches directory is needed between runs.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from pathlib import Path

import pytest

from feedstore.cache.file_store import FileFeedStore
from feedstore.core.models import FeedImage
from feedstore.logging.context import clear_context


# === FIXTURES: Sample data ===


@pytest.fixture
def make_image() -> Callable[..., FeedImage]:
    """Factory for unique FeedImage values."""

    def _make(
        description: str | None = "any description",
        location: str | None = "any location",
    ) -> FeedImage:
        image_id = uuid.uuid4()
        return FeedImage(
            id=image_id,
            description=description,
            location=location,
            url=f"https://images.example.com/{image_id}.png",
        )

    return _make


@pytest.fixture
def sample_feed(make_image: Callable[..., FeedImage]) -> list[FeedImage]:
    """Two unique images, one with optional fields left empty."""
    return [make_image(), make_image(description=None, location=None)]


@pytest.fixture
def timestamp() -> datetime:
    return datetime(2026, 10, 17, 12, 30, 45, 123456, tzinfo=timezone.utc)


# === FIXTURES: Store ===


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Test-specific cache file location."""
    return tmp_path / "FeedStoreTests-test.store"


@pytest.fixture
def make_store(store_path: Path) -> Iterator[Callable[..., FileFeedStore]]:
    """Build stores and close them after the test."""
    stores: list[FileFeedStore] = []

    def _make(path: Path | None = None) -> FileFeedStore:
        store = FileFeedStore(path if path is not None else store_path)
        stores.append(store)
        return store

    yield _make

    for store in stores:
        store.close()


@pytest.fixture
def store(make_store: Callable[..., FileFeedStore]) -> FileFeedStore:
    return make_store()


@pytest.fixture(autouse=True)
def _reset_log_context() -> Iterator[None]:
    clear_context()
    yield
    clear_context()
