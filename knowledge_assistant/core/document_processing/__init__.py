"""
Document processing pipeline for ingestion.

Extraction, chunking and persistence of uploaded files.

Dependencies: pydantic, pydantic_settings, knowledge_assistant.boundary.db
System role: Document ingestion pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import DocumentPipeline
from .models import FileMetadata, PipelineResult, UploadedFile

__all__ = [
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "FileMetadata",
    "PipelineResult",
    "UploadedFile",
]
