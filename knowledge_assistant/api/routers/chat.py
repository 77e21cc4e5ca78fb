"""Chat API endpoints.

Routes:
- POST /chat - Answer a question from caller-supplied context (stateless)
- POST /conversation - Full chat turn with server-side retrieval and history
- GET /history - Chat history, oldest first
- DELETE /history - Clear chat history

Failures are rendered as ``{"error": ...}`` by the registered exception
handlers; see knowledge_assistant.api.error_handling.

Dependencies: knowledge_assistant.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from knowledge_assistant.api.deps import get_chat_service
from knowledge_assistant.application.services.chat_service import ChatService
from knowledge_assistant.models.chat import (
    ChatHistoryResponse,
    ChatMessageResponse,
    ChatRequest,
    ChatResponse,
    ConversationRequest,
)
from knowledge_assistant.models.common import DeleteResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer a question grounded in the excerpts sent with the request.

    Args:
        request: ChatRequest with message and optional context excerpts
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer text and the file names of the excerpts used
    """
    rag_answer = await chat_service.answer(request.message, request.context)
    return ChatResponse(message=rag_answer.answer, sources=rag_answer.sources)


@router.post("/conversation", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def conversation(
    request: ConversationRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Run one chat turn against the stored knowledge base.

    Flow:
    1. Store the question in chat history
    2. Retrieve the top keyword matches from the knowledge store
    3. Ask the model and store its reply (or the error reply)

    Args:
        request: ConversationRequest with the user message
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer text with grounding file names
    """
    rag_answer = await chat_service.process_chat(request.message)
    return ChatResponse(message=rag_answer.answer, sources=rag_answer.sources)


@router.get("/history", response_model=ChatHistoryResponse)
async def get_history(
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatHistoryResponse:
    """Chat history, oldest first."""
    messages = await chat_service.get_history()
    return ChatHistoryResponse(
        messages=[
            ChatMessageResponse(
                id=message.id,
                role=message.role,
                content=message.content,
                timestamp=message.timestamp,
            )
            for message in messages
        ],
        total=len(messages),
    )


@router.delete("/history", response_model=DeleteResponse)
async def clear_history(
    chat_service: ChatService = Depends(get_chat_service),
) -> DeleteResponse:
    """Delete every stored chat message."""
    deleted = await chat_service.clear_history()
    logger.info("Chat history cleared", extra={"deleted": deleted})
    return DeleteResponse(deleted=deleted)
