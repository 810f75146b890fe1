# src/core/models.py — v2
"""Shared Pydantic domain models: FeedImage and CacheSnapshot.

These are the caller-facing value types. The store round-trips them
without inspecting their fields.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ConfigDict, Field


class FeedImage(BaseModel):
    """Single feed item as handed to and returned by the store."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    description: str | None = None
    location: str | None = None
    url: AnyUrl


class CacheSnapshot(BaseModel):
    """The one persisted (feed, timestamp) pair."""

    model_config = ConfigDict(frozen=True)

    feed: list[FeedImage] = Field(default_factory=list)
    timestamp: datetime
