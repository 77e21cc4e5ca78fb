"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from knowledge_assistant.configs.database import DatabaseSettings
from knowledge_assistant.configs.gemini import GeminiSettings
from knowledge_assistant.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "GeminiSettings", "Settings", "get_settings"]
