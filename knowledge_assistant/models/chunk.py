"""
Knowledge chunk domain models.

Represents a stored chunk of ingested document text and its transient
scored form produced by retrieval.

Dependencies: pydantic
System role: Knowledge chunk data structures
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def build_chunk_id(file_name: str, timestamp: int, index: int) -> str:
    """Chunk key derived from file name, ingestion timestamp and sequence index."""
    return f"{file_name}-{timestamp}-{index}"


class KnowledgeChunk(BaseModel):
    """Immutable chunk of document text held by the knowledge store."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(description="Unique key: '{file_name}-{timestamp}-{index}'")
    file_name: str = Field(alias="fileName", description="Source file name")
    content: str = Field(description="Chunk text content")
    timestamp: int = Field(description="Ingestion time in epoch milliseconds")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("chunk content must not be empty")
        return value


class ScoredChunk(BaseModel):
    """Chunk paired with its lexical relevance score (never persisted)."""

    model_config = ConfigDict(frozen=True)

    chunk: KnowledgeChunk
    score: int = Field(ge=0, description="Summed query-term occurrence count")


class ContextChunk(BaseModel):
    """Grounding excerpt supplied with a chat request."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName", description="Source file name")
    content: str = Field(description="Excerpt text")
