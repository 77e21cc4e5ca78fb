"""
Knowledge chunk ORM model.

Dependencies: sqlalchemy, knowledge_assistant.boundary.db.base
System role: Chunk persistence for keyword retrieval
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from knowledge_assistant.boundary.db.base import Base, EpochTimestampMixin, StringKeyMixin


class KnowledgeChunkModel(Base, StringKeyMixin, EpochTimestampMixin):
    """
    Knowledge chunk row.

    Rows are written once at ingestion and removed by file name or in bulk.
    Indexed by file name (delete-by-file, file listing) and by timestamp.

    Attributes:
        id: '{file_name}-{timestamp}-{index}'
        file_name: Source file name
        content: Chunk text
        timestamp: Ingestion time in epoch milliseconds
    """

    __tablename__ = "knowledge_chunks"

    file_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
