"""
Knowledge chunk CRUD operations.

Extends BaseCRUD with file-name scoped deletion and the distinct file listing.

Dependencies: sqlalchemy, knowledge_assistant.boundary.db.models
System role: Knowledge chunk persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from knowledge_assistant.boundary.db.models.knowledge_chunk_model import KnowledgeChunkModel


class KnowledgeChunkCRUD(BaseCRUD[KnowledgeChunkModel]):
    """CRUD operations for KnowledgeChunkModel."""

    def __init__(self) -> None:
        """Initialize KnowledgeChunkCRUD with KnowledgeChunkModel."""
        super().__init__(KnowledgeChunkModel)

    async def delete_by_file_name(self, session: AsyncSession, file_name: str) -> int:
        """
        Delete every chunk ingested from the given file.

        Args:
            session: Async database session
            file_name: Source file name

        Returns:
            Number of deleted chunks
        """
        stmt = delete(KnowledgeChunkModel).where(KnowledgeChunkModel.file_name == file_name)
        result = await session.execute(stmt)
        return result.rowcount or 0

    async def get_file_names(self, session: AsyncSession) -> Sequence[str]:
        """
        Distinct source file names, in order of first ingestion.

        Args:
            session: Async database session

        Returns:
            Sequence of unique file names
        """
        stmt = (
            select(KnowledgeChunkModel.file_name)
            .group_by(KnowledgeChunkModel.file_name)
            .order_by(func.min(KnowledgeChunkModel.timestamp), KnowledgeChunkModel.file_name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


knowledge_chunk_crud = KnowledgeChunkCRUD()
