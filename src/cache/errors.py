# src/cache/errors.py — v1
"""Feed store error taxonomy.

Every failure inside a store operation is one of these and is delivered
as the payload of a Failure result. The underlying OS or validation error
is chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class FeedStoreError(Exception):
    """Base class for all feed store failures."""

    kind: str = "unknown"

    def __init__(self, store_path: Path | str, reason: str) -> None:
        self.store_path = Path(store_path)
        self.reason = reason
        super().__init__(f"{self.kind} at {self.store_path}: {reason}")


class NotDecodableError(FeedStoreError):
    """Stored bytes do not parse as a valid snapshot."""

    kind = "not_decodable"


class ReadFailedError(FeedStoreError):
    """The cache file exists but could not be read."""

    kind = "read_failed"


class WriteFailedError(FeedStoreError):
    """The snapshot could not be serialized or written."""

    kind = "write_failed"


class DeleteFailedError(FeedStoreError):
    """The cache file exists but could not be removed."""

    kind = "delete_failed"
