"""Application configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPEEDREADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Speed Reader"

    # Playback (bounds mirror MIN_RATE / MAX_RATE / RATE_STEP)
    default_wpm: int = Field(500, ge=50, le=1500, multiple_of=50)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Limits
    max_article_chars: int = 10_000_000


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
