# src/cache/base_feed_store.py — v1
"""Abstract feed store interface.

Implementations persist exactly one (feed, timestamp) snapshot and report
every failure through the returned result instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime

from feedstore.cache.models import DeletionResult, InsertionResult, RetrievalResult
from feedstore.core.models import FeedImage


class BaseFeedStore(ABC):
    """Unified interface for feed cache backends."""

    @abstractmethod
    async def retrieve(self) -> RetrievalResult:
        """Return Empty, Found(feed, timestamp) or Failure(error)."""

    @abstractmethod
    async def insert(
        self, feed: Sequence[FeedImage], timestamp: datetime
    ) -> InsertionResult:
        """Replace the stored snapshot with (feed, timestamp)."""

    @abstractmethod
    async def delete_cached_feed(self) -> DeletionResult:
        """Remove the stored snapshot, if any."""
