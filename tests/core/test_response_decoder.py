"""
Test suite for generation response decoding.

Tests each recognized envelope shape and the precedence between them.

System role: Verification of response normalization
"""

import pytest

from knowledge_assistant.core.rag_query.response_decoder import (
    NO_RESPONSE_TEXT,
    SAFETY_APOLOGY,
    UNKNOWN_ERROR_TEXT,
    ResponseKind,
    decode_generation_response,
    error_message_of,
)


def candidate_payload(text: str, finish_reason: str = "STOP") -> dict:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": finish_reason,
            }
        ]
    }


class TestCandidateText:
    def test_nested_part_text_should_be_returned(self) -> None:
        # Act
        decoded = decode_generation_response(candidate_payload("Paris."))

        # Assert
        assert decoded.kind is ResponseKind.CANDIDATE_TEXT
        assert decoded.answer_text == "Paris."

    def test_flat_candidate_text_should_be_returned(self) -> None:
        decoded = decode_generation_response({"candidates": [{"text": "Flat answer"}]})

        assert decoded.kind is ResponseKind.CANDIDATE_TEXT
        assert decoded.answer_text == "Flat answer"


class TestSafetyBlocked:
    def test_safety_finish_reason_should_yield_apology(self) -> None:
        # Act
        decoded = decode_generation_response(candidate_payload("partial", finish_reason="SAFETY"))

        # Assert
        assert decoded.kind is ResponseKind.SAFETY_BLOCKED
        assert decoded.answer_text == SAFETY_APOLOGY

    def test_safety_should_take_precedence_over_error_field(self) -> None:
        payload = {"finishReason": "SAFETY", "error": {"message": "blocked"}}

        assert decode_generation_response(payload).kind is ResponseKind.SAFETY_BLOCKED

    def test_prompt_block_should_yield_apology(self) -> None:
        decoded = decode_generation_response({"promptFeedback": {"blockReason": "SAFETY"}})

        assert decoded.answer_text == SAFETY_APOLOGY


class TestTopLevelText:
    def test_top_level_text_should_be_returned(self) -> None:
        decoded = decode_generation_response({"text": "Direct"})

        assert decoded.kind is ResponseKind.TOP_LEVEL_TEXT
        assert decoded.answer_text == "Direct"

    def test_wrapped_text_should_be_returned(self) -> None:
        decoded = decode_generation_response({"data": {"text": "Wrapped"}})

        assert decoded.answer_text == "Wrapped"

    def test_candidate_text_should_win_over_top_level_text(self) -> None:
        payload = candidate_payload("From candidate") | {"text": "From envelope"}

        assert decode_generation_response(payload).answer_text == "From candidate"


class TestErrorAndUnrecognized:
    def test_error_object_should_be_reported(self) -> None:
        # Act
        decoded = decode_generation_response({"error": {"code": 400, "message": "Bad key"}})

        # Assert
        assert decoded.kind is ResponseKind.ERROR
        assert decoded.error_message == "Bad key"

    def test_error_without_message_should_be_unknown(self) -> None:
        decoded = decode_generation_response({"error": {"code": 500}})

        assert decoded.error_message == UNKNOWN_ERROR_TEXT

    def test_string_error_should_be_reported(self) -> None:
        assert error_message_of({"error": "quota"}) == "quota"

    def test_error_message_should_be_none_without_error_field(self) -> None:
        assert error_message_of({"text": "fine"}) is None

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
            {"text": 42},
            ["not", "an", "object"],
            None,
        ],
    )
    def test_unknown_shapes_should_yield_no_response_text(self, payload: object) -> None:
        # Act
        decoded = decode_generation_response(payload)

        # Assert
        assert decoded.kind is ResponseKind.UNRECOGNIZED
        assert decoded.answer_text == NO_RESPONSE_TEXT
