"""
Knowledge base service orchestrator.

Coordinates file ingestion, the knowledge-file listing, keyword search
previews and deletion.

Dependencies: knowledge_assistant.core, knowledge_assistant.boundary.db
System role: Knowledge base management orchestration
"""

import logging

from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.core.document_processing.entrypoint import DocumentPipeline
from knowledge_assistant.core.document_processing.models import PipelineResult, UploadedFile
from knowledge_assistant.core.exceptions import ValidationError
from knowledge_assistant.core.retriever import KeywordRetriever
from knowledge_assistant.models.chunk import ScoredChunk

logger = logging.getLogger(__name__)


class KnowledgeService:
    """Knowledge base lifecycle: upload, list, search, delete."""

    def __init__(
        self,
        store: KnowledgeStore,
        pipeline: DocumentPipeline,
        retriever: KeywordRetriever,
    ) -> None:
        """
        Initialize knowledge service.

        Args:
            store: Knowledge store handle
            pipeline: Ingestion pipeline writing into the same store
            retriever: Keyword retriever for search previews
        """
        self.store = store
        self.pipeline = pipeline
        self.retriever = retriever

    async def upload_files(self, uploads: list[UploadedFile]) -> list[PipelineResult]:
        """
        Ingest uploaded files one after another.

        An unreadable file is stored as a placeholder chunk; only storage
        failures abort the batch. File names must be unique within
        a batch.

        Args:
            uploads: Files in upload order

        Returns:
            list[PipelineResult]: One result per file

        Raises:
            ValidationError: No files were supplied, or a file name repeats
            StorageError: Knowledge store write failed
        """
        if not uploads:
            raise ValidationError("At least one file is required", field="files")

        seen: set[str] = set()
        for upload in uploads:
            if upload.file_name in seen:
                raise ValidationError(
                    f"Duplicate file name in upload: {upload.file_name}", field="files"
                )
            seen.add(upload.file_name)

        results = await self.pipeline.process_batch(uploads)
        logger.info(
            "Upload batch ingested",
            extra={
                "files": len(results),
                "chunks": sum(result.chunk_count for result in results),
            },
        )
        return results

    async def list_files(self) -> list[str]:
        """Distinct knowledge file names."""
        return await self.store.get_file_names()

    async def search(self, query: str) -> list[ScoredChunk]:
        """
        Rank stored chunks against a query.

        Args:
            query: Free-text query

        Returns:
            list[ScoredChunk]: Top hits with their scores (empty when nothing matches)
        """
        chunks = await self.store.get_all_chunks()
        return self.retriever.rank(query, chunks)

    async def delete_file(self, file_name: str) -> int:
        """Remove every chunk of one file. Returns the number removed."""
        return await self.store.delete_chunks_by_file_name(file_name)

    async def clear(self) -> int:
        """Remove every chunk. Returns the number removed."""
        return await self.store.clear_chunks()
