"""Pydantic Settings for the Slide API client.

All environment variables use the SLIDE_ prefix.
Example: SLIDE_API_TOKEN=tk_abc123, SLIDE_BASE_URL=https://api.slide.tech
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from pyslide.version import __version__


class SlideSettings(BaseSettings):
    """Client configuration, validated once and frozen afterwards."""

    # Credentials
    api_token: str = Field(..., min_length=1)  # Bearer token

    # Endpoint
    base_url: str = "https://api.slide.tech"
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = f"pyslide/{__version__}"

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "SLIDE_", "frozen": True}

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("https://", "http://")):
            raise ValueError("base_url must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level
