"""
Chat message ORM model.

Dependencies: sqlalchemy, knowledge_assistant.boundary.db.base
System role: Append-only chat history persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from knowledge_assistant.boundary.db.base import Base, EpochTimestampMixin, StringKeyMixin


class ChatMessageModel(Base, StringKeyMixin, EpochTimestampMixin):
    """
    Chat message row, listed by timestamp ascending.

    Attributes:
        id: '{role}-{timestamp}' (or 'error-{timestamp}' for failed replies)
        role: 'user' or 'assistant'
        content: Message text
        timestamp: Creation time in epoch milliseconds
    """

    __tablename__ = "chat_messages"

    role: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
