"""
Rich Text Format stripping.

Dependencies: re (stdlib)
System role: RTF heuristic behind the TextExtractor interface
"""

import re

from knowledge_assistant.core.document_processing.extractors.base import (
    TextExtractor,
    decode_text,
)
from knowledge_assistant.core.document_processing.models import UploadedFile

BRACE_GROUP_PATTERN = re.compile(r"\{[^}]*\}")
CONTROL_WORD_PATTERN = re.compile(r"\\[a-z]+\d*")


class RtfExtractor(TextExtractor):
    """Drop brace-delimited groups and backslash control words."""

    extensions = frozenset({"rtf"})

    def extract(self, upload: UploadedFile) -> str:
        text = BRACE_GROUP_PATTERN.sub("", decode_text(upload.data))
        return CONTROL_WORD_PATTERN.sub(" ", text).strip()
