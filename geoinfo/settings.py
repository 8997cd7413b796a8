"""Application configuration primitives."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration, read from GEOINFO_* environment variables."""

    # None means the user default locale is asked from the OS once
    locale_id: int | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # JSON lines when true, readable console output otherwise
    log_json: bool = True

    model_config = SettingsConfigDict(env_prefix="GEOINFO_", env_file=(), extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
