"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Site
    site_url: str = Field(default="http://localhost:5173", alias="SITE_URL")
    api_title: str = Field(default="Skipwire API", alias="API_TITLE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Dashboard
    snapshot_stale_minutes: int = Field(default=60, ge=1, alias="SNAPSHOT_STALE_MINUTES")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
