"""
Model gateway for grounded answers.

Sends the assembled prompt to the Gemini generateContent endpoint in a
single request/response exchange and normalizes the reply into a
RAGAnswer. No streaming, no retry and no client-side timeout.

Dependencies: httpx, knowledge_assistant.configs, knowledge_assistant.core.rag_query
System role: Remote language-model integration
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from knowledge_assistant.configs import GeminiSettings
from knowledge_assistant.core.exceptions import ConfigurationError, UpstreamServiceError
from knowledge_assistant.core.rag_query.prompt import build_prompt
from knowledge_assistant.core.rag_query.response_decoder import (
    ResponseKind,
    UNKNOWN_ERROR_TEXT,
    decode_generation_response,
    error_message_of,
)
from knowledge_assistant.core.rag_query.schema import RAGAnswer
from knowledge_assistant.models.chunk import ContextChunk, KnowledgeChunk

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Gemini API key not configured. Please add GEMINI_API_KEY to your environment or .env file"
)


class GeminiGateway:
    """
    Prompt assembler and Gemini client.

    The HTTP client may be injected (tests use httpx.MockTransport);
    otherwise a short-lived client is opened per request.
    """

    def __init__(
        self,
        settings: GeminiSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize gateway.

        Args:
            settings: Endpoint, credential and sampling configuration
            client: Optional shared async HTTP client
        """
        self._settings = settings
        self._client = client

    def build_request_body(self, prompt: str) -> dict[str, Any]:
        """generateContent request body for a single-turn text prompt."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self._settings.temperature,
                "maxOutputTokens": self._settings.max_output_tokens,
            },
        }

    async def _post(self, body: dict[str, Any], api_key: str) -> httpx.Response:
        url = self._settings.generate_url
        params = {"key": api_key}
        if self._client is not None:
            return await self._client.post(url, params=params, json=body)
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.post(url, params=params, json=body)

    async def generate(self, prompt: str) -> str:
        """
        Run one text completion.

        Args:
            prompt: Fully assembled prompt

        Returns:
            str: Model text, the fixed safety apology, or the no-response placeholder

        Raises:
            ConfigurationError: API key is not configured
            UpstreamServiceError: Transport failure, non-2xx status, or an
                error field in the response body
        """
        api_key = self._settings.api_key
        if not api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE, setting="GEMINI_API_KEY")

        try:
            response = await self._post(self.build_request_body(prompt), api_key)
        except httpx.HTTPError as e:
            logger.error(
                "Gemini request failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise UpstreamServiceError(f"Gemini API request failed: {e}") from e

        if not response.is_success:
            message = _remote_error_message(response)
            logger.error(
                "Gemini API error",
                extra={"status_code": response.status_code, "error": message},
            )
            raise UpstreamServiceError(
                f"Gemini API error: {message}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamServiceError("Gemini API error: invalid JSON response") from e

        decoded = decode_generation_response(payload)
        logger.info("Gemini response decoded", extra={"kind": decoded.kind.value})

        if decoded.kind is ResponseKind.ERROR:
            raise UpstreamServiceError(f"Gemini API error: {decoded.error_message}")
        return decoded.answer_text

    async def ask(
        self,
        question: str,
        chunks: Sequence[ContextChunk | KnowledgeChunk],
    ) -> RAGAnswer:
        """
        Answer a question grounded in retrieved chunks.

        Args:
            question: User question
            chunks: Retrieved excerpts (empty when nothing matched)

        Returns:
            RAGAnswer: Answer text and the grounding file names in order

        Raises:
            ConfigurationError: API key is not configured
            UpstreamServiceError: Remote call failed
        """
        prompt = build_prompt(question, chunks)
        answer = await self.generate(prompt)
        return RAGAnswer(answer=answer, sources=[chunk.file_name for chunk in chunks])


def _remote_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return UNKNOWN_ERROR_TEXT
    return error_message_of(payload) or UNKNOWN_ERROR_TEXT
