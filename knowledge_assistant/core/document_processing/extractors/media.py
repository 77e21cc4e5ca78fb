"""
Placeholders for image, audio and video uploads.

These formats are never decoded; only descriptive metadata is stored.

System role: Media metadata behind the TextExtractor interface
"""

from knowledge_assistant.core.document_processing.extractors.base import (
    TextExtractor,
    format_kib,
    format_mib,
)
from knowledge_assistant.core.document_processing.models import UploadedFile


class ImageExtractor(TextExtractor):
    extensions = frozenset({"png", "jpg", "jpeg", "gif", "bmp", "webp", "svg"})

    def extract(self, upload: UploadedFile) -> str:
        return (
            f"[Image file: {upload.file_name}, Size: {format_kib(upload.size)}, "
            f"Type: {upload.media_type}]"
        )


class AudioVideoExtractor(TextExtractor):
    extensions = frozenset({"mp3", "mp4", "avi", "mov", "wav", "ogg", "webm"})

    def extract(self, upload: UploadedFile) -> str:
        return (
            f"[Media file: {upload.file_name}, Size: {format_mib(upload.size)}, "
            f"Type: {upload.media_type}]"
        )
