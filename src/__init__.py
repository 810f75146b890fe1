# src/__init__.py — v1
"""feedstore: single-slot, disk-persisted feed cache."""

from feedstore.cache.errors import (
    DeleteFailedError,
    FeedStoreError,
    NotDecodableError,
    ReadFailedError,
    WriteFailedError,
)
from feedstore.cache.file_store import FileFeedStore
from feedstore.cache.models import Empty, Failure, Found, Success
from feedstore.core.models import CacheSnapshot, FeedImage
from feedstore.version import __version__

__all__ = [
    "CacheSnapshot",
    "DeleteFailedError",
    "Empty",
    "Failure",
    "FeedImage",
    "FeedStoreError",
    "FileFeedStore",
    "Found",
    "NotDecodableError",
    "ReadFailedError",
    "Success",
    "WriteFailedError",
    "__version__",
]
