"""
Document parsing task.

Dispatches an uploaded file to the first format extractor that claims it
and converts the result into plain text. Extraction never aborts an
upload: any failure degrades to a bracketed placeholder.

Dependencies: knowledge_assistant.core.document_processing.extractors
System role: First stage of document ingestion pipeline
"""

import logging

from knowledge_assistant.core.document_processing.extractors import (
    FallbackExtractor,
    TextExtractor,
    default_extractors,
)
from knowledge_assistant.core.document_processing.models import UploadedFile

logger = logging.getLogger(__name__)


class ParsingTask:
    """Convert uploaded files of any supported format into text."""

    def __init__(
        self,
        extractors: list[TextExtractor] | None = None,
        max_preview_chars: int = 5000,
    ) -> None:
        """
        Initialize parsing task.

        Args:
            extractors: Extractors in priority order (defaults to every
                built-in format). The fallback extractor is always consulted last.
            max_preview_chars: Preview cap for mostly-binary unknown files
        """
        self._extractors = extractors if extractors is not None else default_extractors()
        self._fallback = FallbackExtractor(max_preview_chars=max_preview_chars)

    def select_extractor(self, upload: UploadedFile) -> TextExtractor:
        """Return the first extractor claiming the upload, else the fallback."""
        for extractor in self._extractors:
            if extractor.handles(upload):
                return extractor
        return self._fallback

    def parse(self, upload: UploadedFile) -> str:
        """
        Extract text from an uploaded file.

        Args:
            upload: Raw uploaded file

        Returns:
            str: Extracted text or a descriptive placeholder
        """
        try:
            extractor = self.select_extractor(upload)
            text = extractor.extract(upload)
        except Exception as e:
            logger.warning(
                "Extraction failed, storing placeholder",
                extra={
                    "file_name": upload.file_name,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            return f"[File: {upload.file_name} - Could not extract content]"

        logger.debug(
            "Extracted text",
            extra={
                "file_name": upload.file_name,
                "extractor": type(extractor).__name__,
                "chars": len(text),
            },
        )
        return text
