"""
Generation response decoding.

The generateContent endpoint answers with several envelope shapes. The
decoder checks a closed, ordered set of known shapes and falls through to
an explicit UNRECOGNIZED case; no field is read without checking it.

Dependencies: None
System role: Response normalization for the model gateway
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

SAFETY_FINISH_REASON = "SAFETY"
SAFETY_APOLOGY = (
    "I apologize, but I cannot respond to this query due to safety guidelines."
)
NO_RESPONSE_TEXT = "No response generated"
UNKNOWN_ERROR_TEXT = "Unknown error"


class ResponseKind(str, Enum):
    """Recognized response envelope shapes."""

    SAFETY_BLOCKED = "safety_blocked"
    CANDIDATE_TEXT = "candidate_text"
    TOP_LEVEL_TEXT = "top_level_text"
    ERROR = "error"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class DecodedResponse:
    """Decoded envelope: the matched shape and its payload."""

    kind: ResponseKind
    text: str | None = None
    error_message: str | None = None

    @property
    def answer_text(self) -> str:
        """User-facing text for every non-error shape."""
        if self.kind is ResponseKind.SAFETY_BLOCKED:
            return SAFETY_APOLOGY
        if self.kind is ResponseKind.UNRECOGNIZED:
            return NO_RESPONSE_TEXT
        return self.text or NO_RESPONSE_TEXT


def _first_candidate(payload: dict[str, Any]) -> dict[str, Any] | None:
    candidates = payload.get("candidates")
    if isinstance(candidates, list) and candidates and isinstance(candidates[0], dict):
        return candidates[0]
    return None


def _nested_part_text(candidate: dict[str, Any]) -> str | None:
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) and text else None


def _non_empty_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _wrapped_text(payload: dict[str, Any]) -> str | None:
    data = payload.get("data")
    return _non_empty_text(data.get("text")) if isinstance(data, dict) else None


def _is_safety_blocked(payload: dict[str, Any], candidate: dict[str, Any] | None) -> bool:
    if candidate is not None and candidate.get("finishReason") == SAFETY_FINISH_REASON:
        return True
    if payload.get("finishReason") == SAFETY_FINISH_REASON:
        return True
    feedback = payload.get("promptFeedback")
    return isinstance(feedback, dict) and feedback.get("blockReason") == SAFETY_FINISH_REASON


def error_message_of(payload: Any) -> str | None:
    """Remote-reported message from an ``error`` field, if any."""
    if not isinstance(payload, dict) or "error" not in payload:
        return None
    error = payload["error"]
    if isinstance(error, dict):
        return _non_empty_text(error.get("message")) or UNKNOWN_ERROR_TEXT
    return _non_empty_text(error) or UNKNOWN_ERROR_TEXT


def decode_generation_response(payload: Any) -> DecodedResponse:
    """
    Match a response body against the known shapes, in priority order.

    1. finishReason == "SAFETY" (first candidate
       or envelope) or a SAFETY prompt block   -> SAFETY_BLOCKED
    2. candidates[0].content.parts[0].text     -> CANDIDATE_TEXT
       (or candidates[0].text)
    3. top-level text (or data.text)            -> TOP_LEVEL_TEXT
    4. error field                              -> ERROR
    5. anything else                            -> UNRECOGNIZED

    Args:
        payload: Parsed JSON body

    Returns:
        DecodedResponse: Matched shape
    """
    if not isinstance(payload, dict):
        return DecodedResponse(ResponseKind.UNRECOGNIZED)

    candidate = _first_candidate(payload)
    if _is_safety_blocked(payload, candidate):
        return DecodedResponse(ResponseKind.SAFETY_BLOCKED)

    if candidate is not None:
        text = _nested_part_text(candidate) or _non_empty_text(candidate.get("text"))
        if text is not None:
            return DecodedResponse(ResponseKind.CANDIDATE_TEXT, text=text)

    text = _non_empty_text(payload.get("text")) or _wrapped_text(payload)
    if text is not None:
        return DecodedResponse(ResponseKind.TOP_LEVEL_TEXT, text=text)

    error_message = error_message_of(payload)
    if error_message is not None:
        return DecodedResponse(ResponseKind.ERROR, error_message=error_message)

    return DecodedResponse(ResponseKind.UNRECOGNIZED)
