"""Centralized runtime settings for the flyer extraction engine."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings powered by pydantic-settings.

    Values come from ``FLYER_*`` environment variables and an optional
    ``.env`` file in the working directory.
    """

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # -------------------------------------------------------------------------
    # OCR
    # -------------------------------------------------------------------------
    OCR_LANGUAGE: str = Field(default="eng", min_length=1)
    TESSERACT_CMD: str | None = None

    # -------------------------------------------------------------------------
    # PATHS
    # -------------------------------------------------------------------------
    EXTRACTION_CONFIG_PATH: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="FLYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached runtime settings.

    Returns
    -------
    Settings
        The singleton settings instance.
    """
    return Settings()
