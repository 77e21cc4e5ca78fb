"""
Unified application settings.

Aggregates the per-concern settings into a single Settings object and
exposes the cached factory used by the API layer.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from knowledge_assistant.configs.base import BaseSettings
from knowledge_assistant.configs.database import DatabaseSettings
from knowledge_assistant.configs.gemini import GeminiSettings


class Settings(BaseSettings):
    """Application-wide settings."""

    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once, on first call.

    Usage:
        from knowledge_assistant.configs import get_settings
        settings = get_settings()
    """
    return Settings()
