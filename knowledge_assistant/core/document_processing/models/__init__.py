"""
Models for document processing pipeline.

Exports: UploadedFile, FileMetadata, PipelineResult
"""

from .pipeline_result import PipelineResult
from .upload import FileMetadata, UploadedFile

__all__ = [
    "FileMetadata",
    "PipelineResult",
    "UploadedFile",
]
