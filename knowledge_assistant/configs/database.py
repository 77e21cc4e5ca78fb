"""
Knowledge store configuration settings.

Manages the location of the local SQLite file that backs the
knowledge chunks and chat history collections.

Dependencies: pydantic, pydantic_settings
System role: Durable store connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge_assistant.configs.base import BaseSettings

IN_MEMORY_PATH = ":memory:"


class DatabaseSettings(BaseSettings):
    """Local SQLite knowledge store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KNOWLEDGE_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    path: str = Field(
        default="knowledge_assistant.db",
        description="SQLite file path (':memory:' for a throwaway store)",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def is_in_memory(self) -> bool:
        """Whether the store lives only for the lifetime of the engine."""
        return self.path == IN_MEMORY_PATH

    @property
    def async_database_url(self) -> str:
        """
        Construct async SQLite connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL (aiosqlite driver)
        """
        return f"sqlite+aiosqlite:///{self.path}"
