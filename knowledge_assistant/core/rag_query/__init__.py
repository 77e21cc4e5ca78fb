"""RAG query business logic.

Prompt assembly, generation response decoding and the model gateway.
"""

from .gateway import GeminiGateway
from .prompt import build_prompt
from .response_decoder import DecodedResponse, ResponseKind, decode_generation_response
from .schema import RAGAnswer

__all__ = [
    "GeminiGateway",
    "build_prompt",
    "DecodedResponse",
    "ResponseKind",
    "decode_generation_response",
    "RAGAnswer",
]
