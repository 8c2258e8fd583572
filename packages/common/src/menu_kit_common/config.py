"""Configuration management for menu-kit.

Settings are read from ``MENU_KIT_*`` environment variables or a local
``.env`` file. They only control logging; the catalog path and selection
limit are command-line flags with fixed defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"console", "json"}


class Settings(BaseSettings):
    """Runtime settings for the menu-kit tools."""

    model_config = SettingsConfigDict(
        env_prefix="MENU_KIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum log level written to stderr")
    log_format: str = Field(default="console", description="Log renderer: console or json")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}")
        return fmt


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
