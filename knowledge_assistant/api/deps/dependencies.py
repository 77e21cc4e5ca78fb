"""
Dependency injection container.

Factory functions for FastAPI dependencies. A single ServiceContainer is
built in the application lifespan and stored on ``app.state``; request
handlers reach it through these dependencies rather than module globals.

Dependencies: knowledge_assistant.configs, knowledge_assistant.application, knowledge_assistant.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Request

from knowledge_assistant.application.services import ChatService, KnowledgeService
from knowledge_assistant.boundary.db.connection import get_async_engine
from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.configs import Settings, get_settings
from knowledge_assistant.core.document_processing import (
    DocumentPipeline,
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from knowledge_assistant.core.rag_query.gateway import GeminiGateway
from knowledge_assistant.core.retriever import KeywordRetriever

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for the long-lived components shared by every request."""

    def __init__(
        self,
        settings: Settings | None = None,
        pipeline_settings: DocumentPipelineSettings | None = None,
        store: KnowledgeStore | None = None,
        gateway: GeminiGateway | None = None,
    ) -> None:
        """
        Build the components once.

        Args:
            settings: Application settings (loaded from environment if None)
            pipeline_settings: Ingestion/retrieval settings (loaded if None)
            store: Pre-built knowledge store (created from settings if None)
            gateway: Pre-built model gateway (created from settings if None)
        """
        self.settings = settings or get_settings()
        self.pipeline_settings = pipeline_settings or get_pipeline_settings()

        self.store = store or KnowledgeStore(get_async_engine(self.settings.database))
        self.retriever = KeywordRetriever(top_k=self.pipeline_settings.top_k)
        self.gateway = gateway or GeminiGateway(self.settings.gemini)
        self.pipeline = DocumentPipeline(self.store, self.pipeline_settings)

    async def startup(self) -> None:
        """Create the store collections (no-op when they exist)."""
        await self.store.initialize()
        if not self.settings.gemini.api_key:
            logger.warning("GEMINI_API_KEY is not set; chat requests will fail until it is configured")

    async def shutdown(self) -> None:
        """Release store connections."""
        await self.store.dispose()


def get_service_container(request: Request) -> ServiceContainer:
    """Get the container attached to the running application."""
    return request.app.state.services


def get_knowledge_store(
    container: ServiceContainer = Depends(get_service_container),
) -> KnowledgeStore:
    """Get the knowledge store handle."""
    return container.store


def get_chat_service(
    container: ServiceContainer = Depends(get_service_container),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        container: Service container (injected via Depends)

    Returns:
        ChatService: Chat service wired to the shared store, retriever and gateway
    """
    return ChatService(
        store=container.store,
        retriever=container.retriever,
        gateway=container.gateway,
    )


def get_knowledge_service(
    container: ServiceContainer = Depends(get_service_container),
) -> KnowledgeService:
    """
    Get knowledge service instance.

    Args:
        container: Service container (injected via Depends)

    Returns:
        KnowledgeService: Knowledge service wired to the shared store and pipeline
    """
    return KnowledgeService(
        store=container.store,
        pipeline=container.pipeline,
        retriever=container.retriever,
    )
