"""
Fallback extractor for unrecognized formats.

Dependencies: knowledge_assistant.core.document_processing.extractors.base
System role: Last-resort text decode with printable-ratio check
"""

from knowledge_assistant.core.document_processing.extractors.base import (
    NON_PRINTABLE_PATTERN,
    TextExtractor,
    format_kib,
)
from knowledge_assistant.core.document_processing.models import UploadedFile

READABLE_RATIO = 0.7


class FallbackExtractor(TextExtractor):
    """Keep mostly-printable text; preview or describe everything else."""

    def __init__(self, max_preview_chars: int = 5000) -> None:
        """
        Initialize fallback extractor.

        Args:
            max_preview_chars: Length cap for the printable preview of
                mostly-binary content
        """
        self._max_preview_chars = max_preview_chars

    def handles(self, upload: UploadedFile) -> bool:
        return True

    def extract(self, upload: UploadedFile) -> str:
        try:
            text = upload.data.decode("utf-8")
        except UnicodeDecodeError:
            return (
                f"[Binary file: {upload.file_name}, Size: {format_kib(upload.size)}, "
                f"Type: {upload.media_type or 'unknown'}]"
            )

        readable = NON_PRINTABLE_PATTERN.sub("", text)
        if len(readable) >= len(text) * READABLE_RATIO:
            return text

        return f"[File: {upload.file_name}]\n{readable[:self._max_preview_chars]}"
