"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority)
2. Google Cloud Secret Manager (for the Gemini API key)
3. .env file (for local development fallback)

Generation sampling parameters are fixed in src.llm and are not part of
the settings.
"""

import os
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_secret_value(key: str) -> str | None:
    """Lazy import to avoid circular dependency."""
    # Only try Secret Manager if we have a project ID
    project_id = os.environ.get("GOOGLE_PROJECT_ID")
    if not project_id:
        return None

    try:
        from src.secret_manager import get_app_secret

        return get_app_secret(key)
    except Exception:
        return None


class Settings(BaseSettings):
    """Application settings with Secret Manager integration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )
    llm_model: str = "gemini-2.5-pro"

    # Google Cloud
    google_project_id: str | None = None
    environment: str = "dev"

    # Logging
    log_level: str = "INFO"

    @model_validator(mode="before")
    @classmethod
    def load_secrets_from_secret_manager(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Load secret values from Secret Manager if not already set."""
        secret_fields = ["gemini_api_key"]

        for field in secret_fields:
            # Skip if already set via env var or .env
            if data.get(field) or data.get("api_key"):
                continue

            value = _get_secret_value(field)
            if value:
                data[field] = value

        return data

    @property
    def is_production(self) -> bool:
        """Whether the app runs in the production environment."""
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
