"""
Word-processor and spreadsheet text recovery.

Office Open XML files are zip containers; when the upload is one, the
relevant XML parts are inflated first. Otherwise the raw bytes are
scanned directly, which covers flat XML exports.

Dependencies: zipfile (stdlib)
System role: DOCX/XLSX heuristics behind the TextExtractor interface
"""

import html
import io
import logging
import re
import zipfile

from knowledge_assistant.core.document_processing.extractors.base import (
    TextExtractor,
    decode_permissive,
)
from knowledge_assistant.core.document_processing.models import UploadedFile

logger = logging.getLogger(__name__)

WORD_RUN_PATTERN = re.compile(r"<w:t[^>]*>([^<]*)</w:t>")
CELL_TEXT_PATTERN = re.compile(r"<t[^>]*>([^<]*)</t>")

WORD_MEDIA_MARKERS = ("msword", "wordprocessingml")
SPREADSHEET_MEDIA_MARKERS = ("spreadsheet", "ms-excel")


def read_xml_parts(data: bytes, prefixes: tuple[str, ...]) -> str:
    """
    Return the XML text to scan for an Office upload.

    Args:
        data: Raw upload bytes
        prefixes: Archive member name prefixes holding document text

    Returns:
        str: Concatenated matching archive members, or the permissively
            decoded raw bytes when the upload is not a readable zip archive
    """
    buffer = io.BytesIO(data)
    if not zipfile.is_zipfile(buffer):
        return decode_permissive(data)

    try:
        with zipfile.ZipFile(buffer) as archive:
            names = sorted(
                name for name in archive.namelist()
                if name.endswith(".xml") and name.startswith(prefixes)
            )
            return "\n".join(decode_permissive(archive.read(name)) for name in names)
    except (zipfile.BadZipFile, KeyError, RuntimeError) as e:
        logger.debug("Unreadable Office archive, scanning raw bytes", extra={"error": str(e)})
        return decode_permissive(data)


class WordExtractor(TextExtractor):
    """Text runs of ``<w:t>`` elements joined with spaces."""

    extensions = frozenset({"doc", "docx"})

    def handles(self, upload: UploadedFile) -> bool:
        media_type = upload.media_type.lower()
        return any(marker in media_type for marker in WORD_MEDIA_MARKERS) or super().handles(upload)

    def extract(self, upload: UploadedFile) -> str:
        xml = read_xml_parts(upload.data, ("word/",))
        runs = WORD_RUN_PATTERN.findall(xml)
        if runs:
            return " ".join(html.unescape(run) for run in runs)

        return (
            f"[Word document: {upload.file_name} - Text extraction limited. "
            "Consider saving as .txt for better results.]"
        )


class SpreadsheetExtractor(TextExtractor):
    """Generic ``<t>`` cell text joined with pipes."""

    extensions = frozenset({"xls", "xlsx"})

    def handles(self, upload: UploadedFile) -> bool:
        media_type = upload.media_type.lower()
        return any(marker in media_type for marker in SPREADSHEET_MEDIA_MARKERS) or super().handles(upload)

    def extract(self, upload: UploadedFile) -> str:
        xml = read_xml_parts(upload.data, ("xl/sharedStrings", "xl/worksheets/"))
        cells = CELL_TEXT_PATTERN.findall(xml)
        if cells:
            return " | ".join(html.unescape(cell) for cell in cells)

        return f"[Excel file: {upload.file_name}]"
