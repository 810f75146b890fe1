# src/cache/codec.py — v1
"""Snapshot codec: CacheSnapshot <-> JSON bytes.

The on-disk shape is decoupled from the domain models so that renaming
a FeedImage field never silently changes the file format:

    {"items": [{"id", "description", "location", "image_url"}, ...],
     "timestamp": "<ISO 8601>"}

Decoding is strict. Unknown keys, missing keys, malformed UUIDs or URLs
and non-JSON bytes all raise NotDecodableError.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ConfigDict, ValidationError

from feedstore.cache.errors import NotDecodableError, WriteFailedError
from feedstore.core.models import CacheSnapshot, FeedImage


class _StoredImage(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: UUID
    description: str | None
    location: str | None
    image_url: AnyUrl

    @classmethod
    def from_image(cls, image: FeedImage) -> _StoredImage:
        return cls(
            id=image.id,
            description=image.description,
            location=image.location,
            image_url=image.url,
        )

    def to_image(self) -> FeedImage:
        return FeedImage(
            id=self.id,
            description=self.description,
            location=self.location,
            url=self.image_url,
        )


class _StoredCache(BaseModel):
    model_config = ConfigDict(extra="forbid")

    items: list[_StoredImage]
    timestamp: datetime


def encode_snapshot(snapshot: CacheSnapshot, store_path: Path | str) -> bytes:
    """Serialize a snapshot to UTF-8 JSON bytes.

    Raises:
        WriteFailedError: If the snapshot cannot be serialized.
    """
    try:
        stored = _StoredCache(
            items=[_StoredImage.from_image(image) for image in snapshot.feed],
            timestamp=snapshot.timestamp,
        )
        return stored.model_dump_json().encode("utf-8")
    except (ValidationError, ValueError, TypeError) as exc:
        raise WriteFailedError(store_path, f"cannot encode snapshot: {exc}") from exc


def decode_snapshot(data: bytes, store_path: Path | str) -> CacheSnapshot:
    """Parse bytes produced by encode_snapshot.

    Raises:
        NotDecodableError: If the bytes are not a valid stored snapshot.
    """
    try:
        stored = _StoredCache.model_validate_json(data)
    except ValidationError as exc:
        raise NotDecodableError(
            store_path, f"{exc.error_count()} validation error(s)"
        ) from exc
    except ValueError as exc:
        raise NotDecodableError(store_path, str(exc)) from exc
    return CacheSnapshot(
        feed=[item.to_image() for item in stored.items],
        timestamp=stored.timestamp,
    )
