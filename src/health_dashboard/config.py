"""Application configuration."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_key: str
    environment: str = _ENVIRONMENT
    timezone: str = "UTC"
    days_before: int = 2
    days_after: int = 2
    session_ttl_seconds: int = 3600

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if not is_valid_timezone(value):
            raise ValueError(f"Unknown timezone: {value}")
        return value

    @field_validator("days_before", "days_after")
    @classmethod
    def _check_window_size(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Day window offsets must not be negative")
        return value


def is_valid_timezone(value: str) -> bool:
    """Return True when ``value`` names a known IANA timezone."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
