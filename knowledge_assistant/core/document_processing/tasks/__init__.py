"""
Task modules for document processing pipeline.

Exports: ParsingTask, ChunkingTask, chunk_text
"""

from .chunking_task import ChunkingTask, chunk_text
from .parsing_task import ParsingTask

__all__ = [
    "ParsingTask",
    "ChunkingTask",
    "chunk_text",
]
