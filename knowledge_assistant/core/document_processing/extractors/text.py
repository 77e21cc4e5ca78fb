"""
Plain-text and JSON extractors.

Dependencies: json (stdlib)
System role: Verbatim decoding for text-like formats
"""

import json
import logging

from knowledge_assistant.core.document_processing.extractors.base import (
    TextExtractor,
    decode_text,
)
from knowledge_assistant.core.document_processing.models import UploadedFile

logger = logging.getLogger(__name__)

DOCUMENT_TEXT_EXTENSIONS = {"txt", "md", "markdown", "rst", "log", "csv", "tsv"}

SOURCE_EXTENSIONS = {
    "js", "ts", "jsx", "tsx", "py", "java", "c", "cpp", "h", "hpp",
    "cs", "go", "rs", "rb", "php", "swift", "kt", "scala", "r",
    "html", "htm", "css", "scss", "sass", "less",
    "xml", "yaml", "yml", "toml", "ini", "cfg", "conf",
    "sh", "bash", "zsh", "ps1", "bat", "cmd",
    "sql", "graphql", "gql",
}


class PlainTextExtractor(TextExtractor):
    """Text media types and known text-like extensions, decoded as-is."""

    extensions = frozenset(DOCUMENT_TEXT_EXTENSIONS | SOURCE_EXTENSIONS)

    def handles(self, upload: UploadedFile) -> bool:
        return upload.media_type.startswith("text/") or super().handles(upload)

    def extract(self, upload: UploadedFile) -> str:
        return decode_text(upload.data)


class JsonExtractor(TextExtractor):
    """JSON documents, re-serialized with two-space indentation."""

    extensions = frozenset({"json"})

    def handles(self, upload: UploadedFile) -> bool:
        return upload.media_type == "application/json" or super().handles(upload)

    def extract(self, upload: UploadedFile) -> str:
        text = decode_text(upload.data)
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except json.JSONDecodeError:
            logger.debug(
                "Invalid JSON, keeping raw text",
                extra={"file_name": upload.file_name},
            )
            return text
