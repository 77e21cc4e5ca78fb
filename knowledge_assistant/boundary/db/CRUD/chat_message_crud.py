"""
Chat message CRUD operations.

Dependencies: sqlalchemy, knowledge_assistant.boundary.db.models
System role: Chat history persistence operations
"""

from sqlalchemy import Select

from knowledge_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from knowledge_assistant.boundary.db.models.chat_message_model import ChatMessageModel


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel; listings are oldest first."""

    def __init__(self) -> None:
        super().__init__(ChatMessageModel)

    def _listing(self) -> Select:
        # Same-millisecond messages fall back to key order
        return super()._listing().order_by(ChatMessageModel.timestamp, ChatMessageModel.id)


chat_message_crud = ChatMessageCRUD()
