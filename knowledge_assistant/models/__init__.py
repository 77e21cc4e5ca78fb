"""
Domain models and API schemas.
"""

from knowledge_assistant.models.chat import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    MessageRole,
)
from knowledge_assistant.models.chunk import ContextChunk, KnowledgeChunk, ScoredChunk

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "MessageRole",
    "ContextChunk",
    "KnowledgeChunk",
    "ScoredChunk",
]
