"""
Knowledge store handle.

Durable, keyed storage for the two logical collections: knowledge chunks
and chat messages. One instance is constructed at application startup and
passed to every component that needs persistence. Each operation runs in
its own transaction; SQLAlchemy failures surface as StorageError.

Dependencies: sqlalchemy, aiosqlite, knowledge_assistant.boundary.db
System role: Durable store for chunks and chat history
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from knowledge_assistant.boundary.db.base import Base
from knowledge_assistant.boundary.db.connection import get_async_session_factory
from knowledge_assistant.boundary.db.CRUD import chat_message_crud, knowledge_chunk_crud
from knowledge_assistant.boundary.db.models import ChatMessageModel, KnowledgeChunkModel
from knowledge_assistant.core.exceptions import DuplicateKeyError, StorageError
from knowledge_assistant.models.chat import ChatMessage, MessageRole
from knowledge_assistant.models.chunk import KnowledgeChunk

logger = logging.getLogger(__name__)


def _to_chunk(row: KnowledgeChunkModel) -> KnowledgeChunk:
    return KnowledgeChunk(
        id=row.id,
        file_name=row.file_name,
        content=row.content,
        timestamp=row.timestamp,
    )


def _to_message(row: ChatMessageModel) -> ChatMessage:
    return ChatMessage(
        id=row.id,
        role=MessageRole(row.role),
        content=row.content,
        timestamp=row.timestamp,
    )


class KnowledgeStore:
    """
    Async durable store for knowledge chunks and chat messages.

    Entities are write-once: the store exposes insert, list, delete and
    clear operations but no update.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """
        Initialize store with an async engine.

        Args:
            engine: Async SQLAlchemy engine (see connection.get_async_engine)
        """
        self._engine = engine
        self._session_factory = get_async_session_factory(engine)

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Run one store operation in a committed transaction."""
        try:
            async with self._session_factory.begin() as session:
                yield session
        except IntegrityError as e:
            logger.warning("Duplicate key rejected", extra={"operation": operation})
            raise DuplicateKeyError("Entity with this key already exists", operation) from e
        except SQLAlchemyError as e:
            logger.error(
                "Knowledge store operation failed",
                extra={"operation": operation, "error": str(e)},
            )
            raise StorageError("Knowledge store unavailable", operation) from e

    async def initialize(self) -> None:
        """Create both collections; a no-op when they already exist."""
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError("Failed to initialize knowledge store", "initialize") from e
        logger.info("Knowledge store initialized")

    async def ping(self) -> None:
        """Round-trip a trivial query to verify the store is reachable."""
        async with self._transaction("ping") as session:
            await session.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self._engine.dispose()

    # Knowledge chunks

    async def add_chunk(self, chunk: KnowledgeChunk) -> None:
        """
        Insert one chunk.

        Raises:
            DuplicateKeyError: If a chunk with the same id exists
            StorageError: If the store is unavailable
        """
        async with self._transaction("add_chunk") as session:
            await knowledge_chunk_crud.create(
                session,
                id=chunk.id,
                file_name=chunk.file_name,
                content=chunk.content,
                timestamp=chunk.timestamp,
            )

    async def add_chunks(self, chunks: list[KnowledgeChunk]) -> None:
        """
        Insert the chunks of one ingestion in a single transaction.

        Either every chunk is stored or none is.

        Raises:
            DuplicateKeyError: If any chunk id already exists
            StorageError: If the store is unavailable
        """
        if not chunks:
            return
        async with self._transaction("add_chunks") as session:
            for chunk in chunks:
                await knowledge_chunk_crud.create(
                    session,
                    id=chunk.id,
                    file_name=chunk.file_name,
                    content=chunk.content,
                    timestamp=chunk.timestamp,
                )

    async def get_all_chunks(self) -> list[KnowledgeChunk]:
        """All stored chunks (no ordering guarantee)."""
        async with self._transaction("get_all_chunks") as session:
            rows = await knowledge_chunk_crud.get_all(session)
            return [_to_chunk(row) for row in rows]

    async def get_file_names(self) -> list[str]:
        """Distinct file names contributing chunks, in order of first ingestion."""
        async with self._transaction("get_file_names") as session:
            return list(await knowledge_chunk_crud.get_file_names(session))

    async def delete_chunks_by_file_name(self, file_name: str) -> int:
        """
        Delete every chunk from one file.

        Returns:
            int: Number of deleted chunks (0 when the file is unknown)
        """
        async with self._transaction("delete_chunks_by_file_name") as session:
            deleted = await knowledge_chunk_crud.delete_by_file_name(session, file_name)
        logger.info("Deleted knowledge file", extra={"file_name": file_name, "chunks": deleted})
        return deleted

    async def clear_chunks(self) -> int:
        """Delete all chunks. Returns the number removed."""
        async with self._transaction("clear_chunks") as session:
            deleted = await knowledge_chunk_crud.delete_all(session)
        logger.info("Cleared knowledge base", extra={"chunks": deleted})
        return deleted

    # Chat messages

    async def add_message(self, message: ChatMessage) -> None:
        """
        Append one chat message.

        Raises:
            DuplicateKeyError: If a message with the same id exists
            StorageError: If the store is unavailable
        """
        async with self._transaction("add_message") as session:
            await chat_message_crud.create(
                session,
                id=message.id,
                role=message.role.value,
                content=message.content,
                timestamp=message.timestamp,
            )

    async def get_chat_history(self) -> list[ChatMessage]:
        """All chat messages ordered by timestamp ascending."""
        async with self._transaction("get_chat_history") as session:
            rows = await chat_message_crud.get_all(session)
            return [_to_message(row) for row in rows]

    async def clear_chat_history(self) -> int:
        """Delete all chat messages. Returns the number removed."""
        async with self._transaction("clear_chat_history") as session:
            deleted = await chat_message_crud.delete_all(session)
        logger.info("Cleared chat history", extra={"messages": deleted})
        return deleted
