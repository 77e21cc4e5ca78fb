"""
Test suite for KnowledgeService.

Tests upload orchestration, listing, search previews and deletion against
an in-memory knowledge store.

System role: Verification of knowledge base management layer
"""

import pytest

from knowledge_assistant.application.services.knowledge_service import KnowledgeService
from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.core.document_processing import (
    DocumentPipeline,
    DocumentPipelineSettings,
    UploadedFile,
)
from knowledge_assistant.core.exceptions import ValidationError
from knowledge_assistant.core.retriever import KeywordRetriever


@pytest.fixture
def knowledge_service(
    knowledge_store: KnowledgeStore, pipeline_settings: DocumentPipelineSettings
) -> KnowledgeService:
    """Provide KnowledgeService over the in-memory store."""
    return KnowledgeService(
        store=knowledge_store,
        pipeline=DocumentPipeline(knowledge_store, pipeline_settings),
        retriever=KeywordRetriever(top_k=5),
    )


class TestUploadFiles:
    @pytest.mark.asyncio
    async def test_empty_upload_should_be_rejected(
        self, knowledge_service: KnowledgeService
    ) -> None:
        with pytest.raises(ValidationError):
            await knowledge_service.upload_files([])

    @pytest.mark.asyncio
    async def test_upload_should_ingest_every_file(
        self, knowledge_service: KnowledgeService, text_upload: UploadedFile
    ) -> None:
        # Arrange
        uploads = [text_upload, UploadedFile(file_name="pic.png", data=b"\x89PNG", media_type="image/png")]

        # Act
        results = await knowledge_service.upload_files(uploads)

        # Assert
        assert [r.chunk_count for r in results] == [1, 1]
        assert set(await knowledge_service.list_files()) == {"notes.txt", "pic.png"}

    @pytest.mark.asyncio
    async def test_repeated_file_name_should_be_rejected_before_any_write(
        self, knowledge_service: KnowledgeService, text_upload: UploadedFile
    ) -> None:
        # Arrange
        again = UploadedFile(file_name="notes.txt", data=b"Second copy.", media_type="text/plain")

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await knowledge_service.upload_files([text_upload, again])

        # Assert
        assert exc_info.value.status_code == 400
        assert "notes.txt" in exc_info.value.message
        assert await knowledge_service.list_files() == []


class TestSearchAndDelete:
    @pytest.mark.asyncio
    async def test_search_should_return_scored_hits(
        self, knowledge_service: KnowledgeService, text_upload: UploadedFile
    ) -> None:
        # Arrange
        await knowledge_service.upload_files([text_upload])

        # Act
        hits = await knowledge_service.search("light energy")

        # Assert
        assert len(hits) == 1
        assert hits[0].chunk.file_name == "notes.txt"
        assert hits[0].score == 2

    @pytest.mark.asyncio
    async def test_search_on_empty_store_should_return_nothing(
        self, knowledge_service: KnowledgeService
    ) -> None:
        assert await knowledge_service.search("anything") == []

    @pytest.mark.asyncio
    async def test_delete_file_should_remove_its_chunks(
        self, knowledge_service: KnowledgeService, text_upload: UploadedFile
    ) -> None:
        # Arrange
        await knowledge_service.upload_files([text_upload])

        # Act
        deleted = await knowledge_service.delete_file("notes.txt")

        # Assert
        assert deleted == 1
        assert await knowledge_service.list_files() == []

    @pytest.mark.asyncio
    async def test_clear_should_remove_everything(
        self, knowledge_service: KnowledgeService, text_upload: UploadedFile
    ) -> None:
        # Arrange
        await knowledge_service.upload_files([text_upload])

        # Act
        deleted = await knowledge_service.clear()

        # Assert
        assert deleted == 1
        assert await knowledge_service.search("light") == []
