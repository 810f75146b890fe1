# src/cache/models.py — v2
"""Operation results delivered by the feed store.

retrieve  -> Empty | Found | Failure
insert    -> Success | Failure
delete    -> Success | Failure
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from feedstore.cache.errors import FeedStoreError
from feedstore.core.models import FeedImage


@dataclass(frozen=True)
class Empty:
    """No snapshot is stored."""


@dataclass(frozen=True)
class Found:
    """A fully written snapshot was read back."""

    feed: list[FeedImage]
    timestamp: datetime


@dataclass(frozen=True)
class Success:
    """A mutation completed."""


@dataclass(frozen=True)
class Failure:
    """The operation failed; ``error`` says how."""

    error: FeedStoreError


RetrievalResult = Union[Empty, Found, Failure]
InsertionResult = Union[Success, Failure]
DeletionResult = Union[Success, Failure]
