"""
Library configuration using Pydantic Settings.

Loads configuration from ``EXCEPTION_FACTORY_*`` environment variables and an
optional .env file. Settings are only read when ``get_settings()`` is first
called, never on import, so the builder and the template catalog do not touch
the environment.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="EXCEPTION_FACTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = Field(default="development", description="Environment (development/production)")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Fail fast on unknown level names."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"`log_level` MUST be valid, got `{value}`")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once; ``get_settings.cache_clear()`` forces a reload."""
    return Settings()
