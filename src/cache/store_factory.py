# src/cache/store_factory.py — v2
"""Factory wiring Settings to a feed store instance."""

from __future__ import annotations

from feedstore.cache.base_feed_store import BaseFeedStore
from feedstore.cache.file_store import FileFeedStore
from feedstore.config.settings import Settings, load_settings
from feedstore.logging.logger import setup_logging


def create_feed_store(settings: Settings | None = None) -> BaseFeedStore:
    """Instantiate the file-backed feed store at the configured path.

    Args:
        settings: Application settings. Loaded from the environment if None.

    Returns:
        A FileFeedStore owning ``settings.store_path``.

    Raises:
        ConfigurationError: If no store path is configured.
    """
    settings = settings if settings is not None else load_settings()
    return FileFeedStore(settings.resolved_store_path)


def configure_logging(settings: Settings) -> None:
    """Apply the logging section of settings to the feedstore logger."""
    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
