"""
Chat service for grounded Q&A.

Orchestrates a full chat turn: message persistence, keyword retrieval,
model gateway invocation and reply persistence. Also serves the stateless
chat contract where the caller supplies the grounding context.

Dependencies: knowledge_assistant.core, knowledge_assistant.boundary.db
System role: Chat service orchestration layer
"""

import logging
from collections.abc import Sequence

from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.core.exceptions import (
    ConfigurationError,
    UpstreamServiceError,
    ValidationError,
)
from knowledge_assistant.core.rag_query.gateway import GeminiGateway
from knowledge_assistant.core.rag_query.schema import RAGAnswer
from knowledge_assistant.core.retriever import KeywordRetriever
from knowledge_assistant.models.chat import (
    ERROR_MESSAGE_PREFIX,
    ChatMessage,
    MessageRole,
    build_message_id,
)
from knowledge_assistant.models.chunk import ContextChunk
from knowledge_assistant.models.common import epoch_millis

logger = logging.getLogger(__name__)


def validate_message(message: str | None) -> str:
    """
    Reject missing or blank questions before any side effect.

    Raises:
        ValidationError: Message is missing or blank
    """
    if message is None or not message.strip():
        raise ValidationError("Message is required", field="message")
    return message


class ChatService:
    """
    Chat service for grounded Q&A.

    Coordinates retrieval from the knowledge store, the model gateway and
    chat history persistence.
    """

    def __init__(
        self,
        store: KnowledgeStore,
        retriever: KeywordRetriever,
        gateway: GeminiGateway,
    ) -> None:
        """
        Initialize chat service.

        Args:
            store: Knowledge store handle
            retriever: Keyword retriever
            gateway: Model gateway
        """
        self.store = store
        self.retriever = retriever
        self.gateway = gateway

    async def answer(
        self,
        message: str | None,
        context: Sequence[ContextChunk] | None = None,
    ) -> RAGAnswer:
        """
        Answer a question from caller-supplied context, without persistence.

        Args:
            message: User question
            context: Grounding excerpts (optional)

        Returns:
            RAGAnswer: Answer text with the context file names as sources

        Raises:
            ValidationError: Message is missing or blank
            ConfigurationError: API key is not configured
            UpstreamServiceError: Remote call failed
        """
        question = validate_message(message)
        return await self.gateway.ask(question, list(context or []))

    async def process_chat(self, message: str | None) -> RAGAnswer:
        """
        Process one chat turn end to end.

        Flow:
        1. Validate the question
        2. Store the user message
        3. Retrieve matching chunks from the knowledge store
        4. Invoke the model gateway
        5. Store the assistant reply, or an error reply when the gateway fails

        Args:
            message: User question

        Returns:
            RAGAnswer: Answer with grounding file names

        Raises:
            ValidationError: Message is missing or blank
            ConfigurationError: API key is not configured
            UpstreamServiceError: Remote call failed
            StorageError: Knowledge store unavailable
        """
        question = validate_message(message)

        user_timestamp = epoch_millis()
        await self.store.add_message(
            ChatMessage(
                id=build_message_id(MessageRole.USER.value, user_timestamp),
                role=MessageRole.USER,
                content=question,
                timestamp=user_timestamp,
            )
        )

        chunks = await self.store.get_all_chunks()
        relevant = self.retriever.search(question, chunks)
        logger.info(
            "Retrieved grounding context",
            extra={"candidates": len(chunks), "hits": len(relevant)},
        )

        try:
            rag_answer = await self.gateway.ask(question, relevant)
        except (ConfigurationError, UpstreamServiceError) as e:
            await self._store_reply(
                ERROR_MESSAGE_PREFIX,
                f"Error: {e.message}",
                after=user_timestamp,
            )
            raise

        await self._store_reply(MessageRole.ASSISTANT.value, rag_answer.answer, after=user_timestamp)
        return rag_answer

    async def _store_reply(self, prefix: str, content: str, after: int) -> None:
        # Strictly later than the question so history ordering is stable
        timestamp = max(epoch_millis(), after + 1)
        await self.store.add_message(
            ChatMessage(
                id=build_message_id(prefix, timestamp),
                role=MessageRole.ASSISTANT,
                content=content,
                timestamp=timestamp,
            )
        )

    async def get_history(self) -> list[ChatMessage]:
        """Chat history, oldest first."""
        return await self.store.get_chat_history()

    async def clear_history(self) -> int:
        """Delete all chat messages. Returns the number removed."""
        return await self.store.clear_chat_history()
