"""
Knowledge base API schemas.

Response schemas for upload, listing and retrieval preview endpoints.

Dependencies: pydantic
System role: Knowledge base API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class IngestedFileResponse(BaseModel):
    """Outcome of ingesting a single uploaded file."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    chunk_count: int = Field(alias="chunkCount", description="Chunks persisted")
    size: int = Field(description="File size in bytes")
    type: str = Field(description="Declared media type")
    last_modified: str = Field(alias="lastModified", description="ISO-8601 last-modified time")


class UploadResponse(BaseModel):
    """Response schema for a multi-file upload."""

    uploaded: list[IngestedFileResponse]
    files: list[str] = Field(description="Knowledge file listing after the upload")


class KnowledgeFilesResponse(BaseModel):
    """Distinct file names currently held in the knowledge store."""

    files: list[str]
    total: int


class SearchHit(BaseModel):
    """Single retrieval preview hit."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    file_name: str = Field(alias="fileName")
    content: str
    score: int


class SearchResponse(BaseModel):
    """Ranked retrieval preview for a query."""

    query: str
    results: list[SearchHit]
