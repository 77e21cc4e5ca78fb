"""
Base configuration settings.

Every settings class reads the process environment and an optional
``.env`` file in the working directory, case-insensitively, ignoring
unknown keys. Subclasses add their own ``env_prefix``.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


class BaseSettings(PydanticBaseSettings):
    """Shared environment loading rules."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
