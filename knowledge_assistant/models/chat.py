"""
Chat domain models and schemas.

Chat message entity plus request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from knowledge_assistant.models.chunk import ContextChunk


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


ERROR_MESSAGE_PREFIX = "error"


def build_message_id(prefix: str, timestamp: int) -> str:
    """Message key: role (or 'error') prefix plus epoch-millis timestamp."""
    return f"{prefix}-{timestamp}"


class ChatMessage(BaseModel):
    """Append-only chat history entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique key: '{role}-{timestamp}'")
    role: MessageRole = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    timestamp: int = Field(description="Creation time in epoch milliseconds")


class ChatRequest(BaseModel):
    """Request schema for the chat endpoint."""

    message: str | None = Field(default=None, description="User question or message")
    context: list[ContextChunk] | None = Field(
        default=None,
        description="Retrieved excerpts used to ground the answer",
    )


class ConversationRequest(BaseModel):
    """Request schema for a full conversation turn (retrieval done server-side)."""

    message: str | None = Field(default=None, description="User question or message")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    message: str = Field(description="Assistant answer")
    sources: list[str] = Field(default_factory=list, description="Grounding file names")


class ChatMessageResponse(BaseModel):
    """Single chat message in history."""

    id: str
    role: MessageRole = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    timestamp: int


class ChatHistoryResponse(BaseModel):
    """Response schema for chat history."""

    messages: list[ChatMessageResponse]
    total: int = Field(description="Total number of messages")
