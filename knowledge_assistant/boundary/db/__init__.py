"""
Database boundary layer: ORM models, CRUD operations, connection management
and the knowledge store handle.

Exports:
  - Base, StringKeyMixin, EpochTimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - KnowledgeChunkModel, ChatMessageModel: Persisted collections
  - knowledge_chunk_crud, chat_message_crud: CRUD operation singletons
  - KnowledgeStore: Store handle passed to services

Dependencies: sqlalchemy, aiosqlite, knowledge_assistant.configs
System role: Local durable storage for knowledge chunks and chat history.
"""

from knowledge_assistant.boundary.db.base import Base, EpochTimestampMixin, StringKeyMixin
from knowledge_assistant.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from knowledge_assistant.boundary.db.models import ChatMessageModel, KnowledgeChunkModel
from knowledge_assistant.boundary.db.CRUD import (
    BaseCRUD,
    ChatMessageCRUD,
    KnowledgeChunkCRUD,
    chat_message_crud,
    knowledge_chunk_crud,
)
from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore

__all__ = [
    # Base classes
    "Base",
    "StringKeyMixin",
    "EpochTimestampMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "KnowledgeChunkModel",
    "ChatMessageModel",
    # CRUD
    "BaseCRUD",
    "KnowledgeChunkCRUD",
    "ChatMessageCRUD",
    "knowledge_chunk_crud",
    "chat_message_crud",
    # Store handle
    "KnowledgeStore",
]
