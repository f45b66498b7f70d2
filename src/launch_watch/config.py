"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with LAUNCH_WATCH_
  - Fall back to a .env file at the project root
  - Validate types and ranges before anything runs

Only AppSettings is a BaseSettings instance. Sub-settings are plain BaseModel
classes populated through env_nested_delimiter="__", so
LAUNCH_WATCH_SPACEX__TIMEOUT_SECONDS maps to spacex.timeout_seconds and
LAUNCH_WATCH_RETRY__ATTEMPTS maps to retry.attempts.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file),
# so settings load correctly regardless of the working directory at runtime.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SpaceXSettings(BaseModel):
    """SpaceX REST API location and per-request timeout."""

    base_url: str = Field(
        default="https://api.spacexdata.com",
        description="Base URL of the SpaceX REST API (no trailing path)",
    )
    timeout_seconds: float = Field(default=10.0, gt=0, description="Per-request timeout")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class RetrySettings(BaseModel):
    """
    Retry policy for transient transport errors (timeouts, dropped connections).

    HTTP error statuses are never retried.
    """

    attempts: int = Field(default=3, ge=1, le=10, description="Total attempts per request")
    max_wait_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound of the exponential backoff between attempts",
    )


class AppSettings(BaseSettings):
    """
    Root application settings, aggregating all sub-settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="LAUNCH_WATCH_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    spacex: SpaceXSettings = Field(default_factory=SpaceXSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)

    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False, description="Render log lines as JSON instead of console text")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any casing of a standard logging level name."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level
