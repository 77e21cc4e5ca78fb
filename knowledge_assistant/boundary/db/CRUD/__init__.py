"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from knowledge_assistant.boundary.db.CRUD import knowledge_chunk_crud

    chunks = await knowledge_chunk_crud.get_all(session)
"""

from knowledge_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from knowledge_assistant.boundary.db.CRUD.chat_message_crud import (
    ChatMessageCRUD,
    chat_message_crud,
)
from knowledge_assistant.boundary.db.CRUD.knowledge_chunk_crud import (
    KnowledgeChunkCRUD,
    knowledge_chunk_crud,
)

__all__ = [
    "BaseCRUD",
    "ChatMessageCRUD",
    "chat_message_crud",
    "KnowledgeChunkCRUD",
    "knowledge_chunk_crud",
]
