"""
Knowledge base API endpoints.

Routes:
- POST /knowledge/upload - Ingest one or more files (multipart)
- GET /knowledge/files - Distinct stored file names
- GET /knowledge/search?q= - Ranked keyword matches for a query
- DELETE /knowledge/files/{file_name} - Remove one file's chunks
- DELETE /knowledge - Remove every chunk

Dependencies: knowledge_assistant.application.services.knowledge_service
System role: Knowledge base HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Query, UploadFile

from knowledge_assistant.api.deps import get_knowledge_service
from knowledge_assistant.application.services.knowledge_service import KnowledgeService
from knowledge_assistant.core.document_processing.models import UploadedFile
from knowledge_assistant.models.common import DeleteResponse, ErrorResponse
from knowledge_assistant.models.knowledge import (
    IngestedFileResponse,
    KnowledgeFilesResponse,
    SearchHit,
    SearchResponse,
    UploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/knowledge", tags=["knowledge"])


async def read_upload(file: UploadFile) -> UploadedFile:
    """Buffer a multipart part into the pipeline's input model."""
    data = await file.read()
    return UploadedFile(
        file_name=file.filename or "unnamed",
        data=data,
        media_type=file.content_type or "",
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def upload_files(
    files: list[UploadFile] = File(..., description="Files to add to the knowledge base"),
    knowledge_service: KnowledgeService = Depends(get_knowledge_service),
) -> UploadResponse:
    """
    Extract, chunk and store uploaded files in upload order.

    Args:
        files: Multipart file parts
        knowledge_service: Injected KnowledgeService

    Returns:
        UploadResponse: Per-file chunk counts and metadata, plus the refreshed file listing
    """
    uploads = [await read_upload(file) for file in files]
    results = await knowledge_service.upload_files(uploads)
    file_names = await knowledge_service.list_files()

    return UploadResponse(
        uploaded=[
            IngestedFileResponse(
                file_name=result.file_name,
                chunk_count=result.chunk_count,
                size=result.metadata.size,
                type=result.metadata.type,
                last_modified=result.metadata.last_modified,
            )
            for result in results
        ],
        files=file_names,
    )


@router.get("/files", response_model=KnowledgeFilesResponse)
async def list_files(
    knowledge_service: KnowledgeService = Depends(get_knowledge_service),
) -> KnowledgeFilesResponse:
    """List distinct knowledge file names."""
    file_names = await knowledge_service.list_files()
    return KnowledgeFilesResponse(files=file_names, total=len(file_names))


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query("", description="Free-text query"),
    knowledge_service: KnowledgeService = Depends(get_knowledge_service),
) -> SearchResponse:
    """Preview which chunks a question would be grounded on."""
    hits = await knowledge_service.search(q)
    return SearchResponse(
        query=q,
        results=[
            SearchHit(
                id=hit.chunk.id,
                file_name=hit.chunk.file_name,
                content=hit.chunk.content,
                score=hit.score,
            )
            for hit in hits
        ],
    )


@router.delete("/files/{file_name}", response_model=DeleteResponse)
async def delete_file(
    file_name: str,
    knowledge_service: KnowledgeService = Depends(get_knowledge_service),
) -> DeleteResponse:
    """Remove every chunk that came from one file."""
    deleted = await knowledge_service.delete_file(file_name)
    logger.info("Knowledge file deleted", extra={"file_name": file_name, "deleted": deleted})
    return DeleteResponse(deleted=deleted)


@router.delete("", response_model=DeleteResponse)
async def clear_knowledge(
    knowledge_service: KnowledgeService = Depends(get_knowledge_service),
) -> DeleteResponse:
    """Remove every chunk from the knowledge base."""
    deleted = await knowledge_service.clear()
    logger.info("Knowledge base cleared", extra={"deleted": deleted})
    return DeleteResponse(deleted=deleted)
