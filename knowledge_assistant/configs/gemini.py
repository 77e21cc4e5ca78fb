"""
Model gateway configuration settings.

Holds the credential and sampling parameters for the remote
text-generation endpoint.

Dependencies: pydantic, pydantic_settings
System role: Remote language-model configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge_assistant.configs.base import BaseSettings


class GeminiSettings(BaseSettings):
    """Gemini generateContent endpoint configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Model service API key (required to answer questions)",
    )
    model: str = Field(default="gemini-2.0-flash", description="Generation model name")
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative Language API base URL",
    )
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_output_tokens: int = Field(default=1000, description="Output length cap")

    @property
    def generate_url(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"
