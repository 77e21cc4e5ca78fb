"""
Best-effort PDF text recovery.

Collects PDF literal-string tokens ``( ... )`` from the raw byte stream.
Compressed content streams yield little, in which case the printable
residue of the file is used instead.

Dependencies: re (stdlib)
System role: PDF heuristic behind the TextExtractor interface
"""

import re

from knowledge_assistant.core.document_processing.extractors.base import (
    TextExtractor,
    WHITESPACE_PATTERN,
    decode_permissive,
)
from knowledge_assistant.core.document_processing.models import UploadedFile

LITERAL_STRING_PATTERN = re.compile(r"\((.*?)\)")
ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]")
NON_PRINTABLE_ASCII_PATTERN = re.compile(r"[^\x20-\x7E\n]")

MIN_LITERAL_TEXT_LENGTH = 50


class PdfExtractor(TextExtractor):
    """PDF literal-string harvesting with printable-ASCII fallback."""

    extensions = frozenset({"pdf"})

    def handles(self, upload: UploadedFile) -> bool:
        return upload.media_type == "application/pdf" or super().handles(upload)

    def extract(self, upload: UploadedFile) -> str:
        raw = decode_permissive(upload.data)

        text = " ".join(
            token
            for token in LITERAL_STRING_PATTERN.findall(raw)
            if token and ALPHANUMERIC_PATTERN.search(token)
        )

        if len(text) < MIN_LITERAL_TEXT_LENGTH:
            text = NON_PRINTABLE_ASCII_PATTERN.sub(" ", raw)
            text = WHITESPACE_PATTERN.sub(" ", text).strip()

        return text or (
            f"[PDF file: {upload.file_name} - Text extraction limited. "
            "Consider using a text-based format for better results.]"
        )
