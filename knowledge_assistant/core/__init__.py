"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
All business rules and domain-specific logic reside here.
"""

from knowledge_assistant.core.exceptions import (
    ConfigurationError,
    DuplicateKeyError,
    KnowledgeAssistantError,
    StorageError,
    UpstreamServiceError,
    ValidationError,
)

__all__ = [
    "KnowledgeAssistantError",
    "ValidationError",
    "ConfigurationError",
    "UpstreamServiceError",
    "StorageError",
    "DuplicateKeyError",
]
