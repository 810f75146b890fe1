# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Only the wiring layer reads these. FileFeedStore itself is configured with
nothing but its cache file path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Store ===
    store_path: Path | None = None

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:  # noqa: N805
        if isinstance(v, str):
            return v.upper()
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field rules."""
        errors: list[str] = []

        if self.store_path is not None and self.store_path.is_dir():
            errors.append("STORE_PATH must name a file, not a directory")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def resolved_store_path(self) -> Path:
        """Absolute cache file path.

        Raises:
            ConfigurationError: If no store path is configured.
        """
        if self.store_path is None:
            raise ConfigurationError("FEEDSTORE_STORE_PATH is not set")
        return self.store_path.expanduser().absolute()


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment and .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
