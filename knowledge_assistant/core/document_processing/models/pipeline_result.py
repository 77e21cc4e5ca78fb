"""
Pipeline result model for document processing.

Represents the outcome of ingesting one file through the pipeline.

Dependencies: pydantic
System role: Return type for DocumentPipeline.process()
"""

from pydantic import BaseModel, Field

from .upload import FileMetadata


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    file_name: str = Field(description="Ingested file name")
    chunk_count: int = Field(description="Number of chunks persisted")
    timestamp: int = Field(description="Ingestion timestamp shared by the file's chunks")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
    metadata: FileMetadata = Field(description="Name, size, media type and modification time")
