"""ORM models for the knowledge store collections."""

from .chat_message_model import ChatMessageModel
from .knowledge_chunk_model import KnowledgeChunkModel

__all__ = ["ChatMessageModel", "KnowledgeChunkModel"]
