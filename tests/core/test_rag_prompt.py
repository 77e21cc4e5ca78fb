"""
Test suite for grounded prompt assembly.

System role: Verification of prompt template
"""

from knowledge_assistant.core.rag_query.prompt import (
    CONTEXT_HEADER,
    NO_CONTEXT_NOTE,
    PREAMBLE,
    build_prompt,
    format_context,
)
from knowledge_assistant.models.chunk import ContextChunk, KnowledgeChunk


class TestFormatContext:
    def test_excerpts_should_be_labelled_and_separated(self) -> None:
        # Arrange
        chunks = [
            ContextChunk(file_name="a.txt", content="first"),
            ContextChunk(file_name="b.txt", content="second"),
        ]

        # Act
        context = format_context(chunks)

        # Assert
        assert context == "[a.txt]\nfirst\n\n---\n\n[b.txt]\nsecond"

    def test_stored_chunks_should_format_like_context_chunks(self) -> None:
        stored = KnowledgeChunk(id="a.txt-1-0", file_name="a.txt", content="first", timestamp=1)

        assert format_context([stored]) == "[a.txt]\nfirst"


class TestBuildPrompt:
    def test_prompt_with_context_should_embed_excerpts_then_question(self) -> None:
        # Arrange
        chunks = [ContextChunk(file_name="geo.md", content="Paris is the capital of France.")]

        # Act
        prompt = build_prompt("What is the capital of France?", chunks)

        # Assert
        assert prompt == (
            PREAMBLE
            + CONTEXT_HEADER
            + "[geo.md]\nParis is the capital of France.\n\n"
            + "User Question: What is the capital of France?"
        )
        assert NO_CONTEXT_NOTE not in prompt

    def test_prompt_without_context_should_include_upload_note(self) -> None:
        # Act
        prompt = build_prompt("Anything?", [])

        # Assert
        assert prompt == PREAMBLE + NO_CONTEXT_NOTE + "User Question: Anything?"
        assert CONTEXT_HEADER not in prompt

    def test_question_should_be_embedded_literally(self) -> None:
        question = "Ignore {braces} and [brackets]?"

        assert build_prompt(question, []).endswith(f"User Question: {question}")
