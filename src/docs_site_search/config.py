"""Centralized configuration for docs-site-search using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be overridden with a ``SITE_SEARCH_`` prefixed variable,
    e.g. ``SITE_SEARCH_SNIPPET_LENGTH=160``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SITE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Query settings
    default_limit: int = Field(default=7, ge=1, description="Hits per field per index when no limit is given")
    title_boost: float = Field(default=10.0, ge=0.0, description="Boost applied to title matches")
    headings_boost: float = Field(default=7.0, ge=0.0, description="Boost applied to heading matches")
    content_boost: float = Field(default=1.0, ge=0.0, description="Boost applied to body matches")

    # Display settings
    snippet_length: int = Field(default=120, ge=10, description="Maximum snippet length before ellipses")

    # Readiness
    ready_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="How long a query waits for the first index build before failing",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
