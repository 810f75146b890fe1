# src/cache/file_store.py — v2
"""File-backed feed store.

One instance owns one cache file. Retrieves run concurrently with each
other; inserts and deletes run alone, in submission order, on the store's
SyncQueue. Inserts go through an atomic replace, so a reader (or a crash)
never sees a half-written snapshot.

Two ways to call it:

    result = await store.retrieve()                  # from a coroutine
    store.submit_retrieve().add_done_callback(cb)    # from any thread
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from concurrent.futures import Future
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from feedstore.cache import file_ops
from feedstore.cache.base_feed_store import BaseFeedStore
from feedstore.cache.codec import decode_snapshot, encode_snapshot
from feedstore.cache.errors import FeedStoreError, WriteFailedError
from feedstore.cache.models import (
    DeletionResult,
    Empty,
    Failure,
    Found,
    InsertionResult,
    RetrievalResult,
    Success,
)
from feedstore.cache.sync_queue import SyncQueue
from feedstore.core.models import CacheSnapshot, FeedImage
from feedstore.logging.context import operation_context

logger = logging.getLogger(__name__)


class FileFeedStore(BaseFeedStore):
    """Feed store persisting its snapshot as a single JSON file."""

    def __init__(self, store_path: Path | str) -> None:
        self._store_path = Path(store_path)
        self._queue = SyncQueue(name="FileFeedStore")

    @property
    def store_path(self) -> Path:
        return self._store_path

    # --- Coroutine API ---

    async def retrieve(self) -> RetrievalResult:
        """Read the stored snapshot."""
        return await asyncio.wrap_future(self.submit_retrieve())

    async def insert(
        self, feed: Sequence[FeedImage], timestamp: datetime
    ) -> InsertionResult:
        """Overwrite the stored snapshot with (feed, timestamp)."""
        return await asyncio.wrap_future(self.submit_insert(feed, timestamp))

    async def delete_cached_feed(self) -> DeletionResult:
        """Remove the stored snapshot. Succeeds if there was none."""
        return await asyncio.wrap_future(self.submit_delete_cached_feed())

    # --- Future API ---

    def submit_retrieve(self) -> Future[RetrievalResult]:
        return self._queue.submit(self._retrieve)

    def submit_insert(
        self, feed: Sequence[FeedImage], timestamp: datetime
    ) -> Future[InsertionResult]:
        items = list(feed)
        return self._queue.submit(lambda: self._insert(items, timestamp), exclusive=True)

    def submit_delete_cached_feed(self) -> Future[DeletionResult]:
        return self._queue.submit(self._delete, exclusive=True)

    # --- Lifetime ---

    def close(self, wait: bool = True) -> None:
        """Refuse new operations; already submitted ones still complete."""
        self._queue.shutdown(wait=wait)

    def __enter__(self) -> FileFeedStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileFeedStore(store_path={str(self._store_path)!r})"

    # --- Operations (run on the queue) ---

    def _retrieve(self) -> RetrievalResult:
        path = self._store_path
        with operation_context("retrieve", str(path)):
            try:
                data = file_ops.read_bytes(path)
                if data is None:
                    logger.debug("No snapshot stored")
                    return Empty()
                snapshot = decode_snapshot(data, path)
            except FeedStoreError as exc:
                logger.debug("Retrieve failed: %s", exc)
                return Failure(exc)
            logger.debug("Found %d item(s)", len(snapshot.feed))
            return Found(feed=snapshot.feed, timestamp=snapshot.timestamp)

    def _insert(self, feed: list[FeedImage], timestamp: datetime) -> InsertionResult:
        path = self._store_path
        with operation_context("insert", str(path)):
            try:
                try:
                    snapshot = CacheSnapshot(feed=feed, timestamp=timestamp)
                except ValidationError as exc:
                    raise WriteFailedError(path, "invalid snapshot") from exc
                file_ops.atomic_write(path, encode_snapshot(snapshot, path))
            except FeedStoreError as exc:
                logger.debug("Insert failed: %s", exc)
                return Failure(exc)
            logger.debug("Inserted %d item(s)", len(feed))
            return Success()

    def _delete(self) -> DeletionResult:
        path = self._store_path
        with operation_context("delete", str(path)):
            try:
                removed = file_ops.remove_file(path)
            except FeedStoreError as exc:
                logger.debug("Delete failed: %s", exc)
                return Failure(exc)
            logger.debug("Snapshot deleted" if removed else "Nothing to delete")
            return Success()
