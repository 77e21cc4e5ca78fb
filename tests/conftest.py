"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory knowledge store, gateway settings, sample chunks and uploads
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest

from knowledge_assistant.boundary.db.connection import get_async_engine
from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.configs import DatabaseSettings, GeminiSettings
from knowledge_assistant.core.document_processing import (
    DocumentPipelineSettings,
    UploadedFile,
)
from knowledge_assistant.models.chunk import KnowledgeChunk


@pytest.fixture
def in_memory_db_settings() -> DatabaseSettings:
    """Database settings pointing at a throwaway in-memory SQLite store."""
    return DatabaseSettings(path=":memory:")


@pytest.fixture
async def knowledge_store(in_memory_db_settings: DatabaseSettings):
    """
    Create an initialized in-memory knowledge store.

    Yields:
        KnowledgeStore: Empty store, disposed after the test
    """
    store = KnowledgeStore(get_async_engine(in_memory_db_settings))
    await store.initialize()
    yield store
    await store.dispose()


@pytest.fixture
def gemini_settings() -> GeminiSettings:
    """Gateway settings with a test API key."""
    return GeminiSettings(
        api_key="test-key",
        model="gemini-2.0-flash",
        base_url="https://gemini.test/v1beta",
    )


@pytest.fixture
def pipeline_settings() -> DocumentPipelineSettings:
    """Pipeline settings with the default window and top-k."""
    return DocumentPipelineSettings(
        chunk_size=1000,
        chunk_overlap=200,
        max_preview_chars=5000,
        top_k=5,
    )


@pytest.fixture
def sample_chunks() -> list[KnowledgeChunk]:
    """Provide a small knowledge base across two files."""
    return [
        KnowledgeChunk(
            id="a.txt-1000-0",
            file_name="a.txt",
            content="Paris is the capital of France. Paris hosts the Louvre.",
            timestamp=1000,
        ),
        KnowledgeChunk(
            id="a.txt-1000-1",
            file_name="a.txt",
            content="The Seine flows through the city.",
            timestamp=1000,
        ),
        KnowledgeChunk(
            id="b.md-2000-0",
            file_name="b.md",
            content="Berlin is the capital of Germany.",
            timestamp=2000,
        ),
    ]


@pytest.fixture
def text_upload() -> UploadedFile:
    """Provide a short plain-text upload."""
    return UploadedFile(
        file_name="notes.txt",
        data=b"Photosynthesis converts light into chemical energy.",
        media_type="text/plain",
    )
