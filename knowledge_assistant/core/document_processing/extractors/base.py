"""
Format extractor interface and shared decoding helpers.

Every format heuristic implements ``TextExtractor`` so a stronger parser
can replace one format without touching dispatch.

Dependencies: knowledge_assistant.core.document_processing.models
System role: Uniform capability interface for text recovery
"""

import re
from abc import ABC, abstractmethod

from knowledge_assistant.core.document_processing.models import UploadedFile

NON_PRINTABLE_PATTERN = re.compile(r"[^\x20-\x7E\n\r\t]")
WHITESPACE_PATTERN = re.compile(r"\s+")
TAG_PATTERN = re.compile(r"<[^>]*>")


def decode_permissive(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


def decode_text(data: bytes) -> str:
    """Decode a text file verbatim (BOM dropped, invalid bytes replaced)."""
    return data.decode("utf-8-sig", errors="replace")


def format_kib(size: int) -> str:
    return f"{size / 1024:.2f} KB"


def format_mib(size: int) -> str:
    return f"{size / 1024 / 1024:.2f} MB"


class TextExtractor(ABC):
    """Recover plain text from one family of file formats."""

    #: Lower-cased extensions (without dot) handled by this extractor.
    extensions: frozenset[str] = frozenset()

    def handles(self, upload: UploadedFile) -> bool:
        """Whether this extractor claims the upload (extension match by default)."""
        return upload.extension in self.extensions

    @abstractmethod
    def extract(self, upload: UploadedFile) -> str:
        """
        Convert the upload's bytes into text.

        Args:
            upload: Raw uploaded file

        Returns:
            str: Recovered text, or a bracketed placeholder when nothing
                meaningful could be decoded
        """
