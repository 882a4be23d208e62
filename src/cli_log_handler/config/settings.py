"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.rendering.levels import LOGGING_LEVEL_NAMES, parse_level
from ..domain.shared.enums import ColorMode
from ..domain.shared.exceptions import InvalidLevelError
from ..domain.shared.messages import ErrorMessages


class RenderSettings(BaseModel):
    """Line rendering configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    color: ColorMode = Field(
        default=ColorMode.AUTO, validation_alias=AliasChoices("color", "color_mode")
    )
    label_width: int = Field(default=5, ge=0, le=64)
    message_width: int = Field(default=30, ge=0, le=512)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, LOG_LEVEL (top-level)
    - RENDER__COLOR, RENDER__LABEL_WIDTH, RENDER__MESSAGE_WIDTH (nested)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    render: RenderSettings = Field(default_factory=RenderSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level and normalize it to the stdlib logging name."""
        try:
            level = parse_level(v)
        except InvalidLevelError:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(
                    level=v, valid_levels=sorted(LOGGING_LEVEL_NAMES.values())
                )
            ) from None
        return LOGGING_LEVEL_NAMES[level]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
