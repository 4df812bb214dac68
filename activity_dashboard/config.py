"""Application configuration settings."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to determine the current calendar day",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied when the application starts",
    )
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser (comma separated or JSON)",
    )
    school_name: str = Field(
        default="Horizon Prep School",
        description="School name shown in the dashboard header",
        min_length=1,
    )
    reporting_window: str = Field(
        default="April 2024",
        description="Label describing the period covered by the catalog",
        min_length=1,
    )

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        candidate = value.strip()
        if candidate.startswith("["):
            return json.loads(candidate)
        return [origin.strip() for origin in candidate.split(",") if origin.strip()]

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported LOG_LEVEL '{value}'")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment.

    The resolved application timezone derives from the settings, so its cache
    is cleared as well.
    """

    from activity_dashboard.utils.datetime import get_app_timezone

    get_settings.cache_clear()
    get_app_timezone.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
