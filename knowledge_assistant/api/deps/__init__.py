"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceContainer,
    get_chat_service,
    get_knowledge_service,
    get_knowledge_store,
    get_service_container,
)

__all__ = [
    "ServiceContainer",
    "get_chat_service",
    "get_knowledge_service",
    "get_knowledge_store",
    "get_service_container",
]
