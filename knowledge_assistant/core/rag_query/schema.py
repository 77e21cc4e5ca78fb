"""
RAG answer schema.

Dependencies: pydantic
System role: Gateway response contract
"""

from pydantic import BaseModel, Field


class RAGAnswer(BaseModel):
    """Normalized answer returned by the model gateway."""

    answer: str = Field(description="Answer text (or the fixed safety apology)")
    sources: list[str] = Field(
        default_factory=list,
        description="File names of the grounding chunks, in order, duplicates kept",
    )
