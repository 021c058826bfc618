"""Client configuration using Pydantic Settings.

Values are read from ``BRIGHTSKY_*`` environment variables or a ``.env``
file. Only ``BrightSkyClient`` consults these settings; the query builders and
the serializer take everything as explicit arguments.

Example:
    >>> from brightsky.config import get_settings
    >>> get_settings().base_url
    'https://api.brightsky.dev'
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import BRIGHT_SKY_API, DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT

LOGGER = logging.getLogger(__name__)


class BrightSkySettings(BaseSettings):
    """Bright Sky client settings.

    Example .env file:
        BRIGHTSKY_BASE_URL=https://brightsky.example.org
        BRIGHTSKY_TIMEOUT_SECONDS=10
    """

    model_config = SettingsConfigDict(
        env_prefix="BRIGHTSKY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default=BRIGHT_SKY_API,
        description="Base URL of the Bright Sky instance",
    )
    timeout_seconds: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=1,
        description="HTTP request timeout in seconds",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Bright Sky base URL must start with http:// or https://")
        return v.rstrip("/")


_settings: Optional[BrightSkySettings] = None
_settings_lock = threading.Lock()


def get_settings() -> BrightSkySettings:
    """Get or create the settings singleton (thread-safe).

    Raises:
        ValidationError: If an environment value is invalid.
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            LOGGER.debug("Loading Bright Sky settings from environment and .env file")
            try:
                _settings = BrightSkySettings()
            except ValidationError as e:
                LOGGER.error("Bright Sky configuration validation failed: %s", e)
                raise

    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = ["BrightSkySettings", "get_settings", "reset_settings"]
