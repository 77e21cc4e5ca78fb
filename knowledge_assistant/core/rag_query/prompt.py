"""
Grounded prompt assembly.

Builds the single text prompt sent to the generation endpoint from the
retrieved excerpts and the user question.

Dependencies: None
System role: Prompt template for grounded answers
"""

from collections.abc import Sequence

from knowledge_assistant.models.chunk import ContextChunk, KnowledgeChunk

PREAMBLE = (
    "You are a helpful AI assistant that answers questions based on the provided knowledge base. \n"
    "If the question can be answered using the knowledge base, provide a detailed answer "
    "with references to the source material.\n"
    "If the information is not in the knowledge base, politely say so and offer to help "
    "with what you know.\n\n"
)

CONTEXT_HEADER = "Knowledge Base Context:\n"
CONTEXT_SEPARATOR = "\n\n---\n\n"

NO_CONTEXT_NOTE = (
    "Note: No relevant knowledge base context was found. Please inform the user that "
    "they need to upload knowledge base files first.\n\n"
)

QUESTION_PREFIX = "User Question: "


def format_context(chunks: Sequence[ContextChunk | KnowledgeChunk]) -> str:
    """Render excerpts as '[file_name]\\ncontent' blocks joined by a separator."""
    return CONTEXT_SEPARATOR.join(f"[{chunk.file_name}]\n{chunk.content}" for chunk in chunks)


def build_prompt(question: str, chunks: Sequence[ContextChunk | KnowledgeChunk]) -> str:
    """
    Assemble the grounded prompt.

    Args:
        question: Literal user question
        chunks: Retrieved excerpts (may be empty)

    Returns:
        str: Preamble, context (or the no-context note), then the question
    """
    prompt = PREAMBLE
    if chunks:
        prompt += f"{CONTEXT_HEADER}{format_context(chunks)}\n\n"
    else:
        prompt += NO_CONTEXT_NOTE
    return prompt + f"{QUESTION_PREFIX}{question}"
