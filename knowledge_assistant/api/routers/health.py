"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: knowledge_assistant.boundary.db
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from knowledge_assistant.api.deps import get_knowledge_store
from knowledge_assistant.boundary.db.knowledge_store import KnowledgeStore
from knowledge_assistant.models.common import ErrorResponse


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse, responses={503: {"model": ErrorResponse}})
async def health_check_db(
    store: KnowledgeStore = Depends(get_knowledge_store),
) -> HealthResponse:
    """Database health check. A failed ping surfaces as a 503 error payload."""
    await store.ping()
    return HealthResponse(status="healthy", message="Database connection OK")
