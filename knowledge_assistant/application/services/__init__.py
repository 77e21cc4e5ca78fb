"""Service orchestrators."""

from .chat_service import ChatService
from .knowledge_service import KnowledgeService

__all__ = [
    "ChatService",
    "KnowledgeService",
]
