"""
Document pipeline orchestrator.

Coordinates extraction, chunking and persistence for uploaded files.
Files are processed strictly one after another so the knowledge-file
listing never observes a half-ingested batch.

Dependencies: All task modules, configs, knowledge_assistant.boundary.db
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.models.chunk import KnowledgeChunk, build_chunk_id
from knowledge_assistant.models.common import epoch_millis

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .models import PipelineResult, UploadedFile
from .tasks import (
    ChunkingTask,
    ParsingTask,
)

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: extract -> chunk -> persist."""

    def __init__(
        self,
        store: KnowledgeStore,
        settings: DocumentPipelineSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            store: Knowledge store receiving the chunks
            settings: Pipeline settings (uses defaults if None)
        """
        self._store = store
        self._settings = settings or get_pipeline_settings()

        self._parsing_task = ParsingTask(max_preview_chars=self._settings.max_preview_chars)
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )

    def build_chunks(self, upload: UploadedFile, timestamp: int | None = None) -> list[KnowledgeChunk]:
        """
        Extract and chunk one file without persisting it.

        Args:
            upload: Raw uploaded file
            timestamp: Ingestion time shared by every chunk (now if None)

        Returns:
            list[KnowledgeChunk]: Chunks keyed '{file_name}-{timestamp}-{index}'
        """
        timestamp = epoch_millis() if timestamp is None else timestamp
        text = self._parsing_task.parse(upload)
        return [
            KnowledgeChunk(
                id=build_chunk_id(upload.file_name, timestamp, index),
                file_name=upload.file_name,
                content=content,
                timestamp=timestamp,
            )
            for index, content in enumerate(self._chunking_task.chunk(text))
        ]

    async def process(self, upload: UploadedFile) -> PipelineResult:
        """
        Ingest one file into the knowledge store.

        Args:
            upload: Raw uploaded file

        Returns:
            PipelineResult: Chunk count and timing

        Raises:
            StorageError: Knowledge store write failed
        """
        start_time = time.perf_counter()
        timestamp = epoch_millis()

        chunks = self.build_chunks(upload, timestamp)
        await self._store.add_chunks(chunks)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Ingested file",
            extra={
                "file_name": upload.file_name,
                "chunk_count": len(chunks),
                "processing_time_ms": round(elapsed_ms, 2),
            },
        )

        return PipelineResult(
            file_name=upload.file_name,
            chunk_count=len(chunks),
            timestamp=timestamp,
            processing_time_ms=elapsed_ms,
            metadata=upload.metadata(),
        )

    async def process_batch(self, uploads: list[UploadedFile]) -> list[PipelineResult]:
        """
        Ingest several files sequentially.

        Args:
            uploads: Files in upload order

        Returns:
            list[PipelineResult]: Results for each file
        """
        results = []
        for upload in uploads:
            results.append(await self.process(upload))
        return results
