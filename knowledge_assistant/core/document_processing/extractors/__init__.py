"""
Format extractors for the ingestion pipeline.

Exports: TextExtractor and one implementation per supported format family,
plus default_extractors() in dispatch priority order.
"""

from .base import TextExtractor
from .fallback import FallbackExtractor
from .media import AudioVideoExtractor, ImageExtractor
from .office import SpreadsheetExtractor, WordExtractor
from .pdf import PdfExtractor
from .rtf import RtfExtractor
from .text import JsonExtractor, PlainTextExtractor


def default_extractors() -> list[TextExtractor]:
    """Format extractors in dispatch priority order (fallback excluded)."""
    return [
        PlainTextExtractor(),
        JsonExtractor(),
        PdfExtractor(),
        WordExtractor(),
        SpreadsheetExtractor(),
        RtfExtractor(),
        ImageExtractor(),
        AudioVideoExtractor(),
    ]


__all__ = [
    "TextExtractor",
    "PlainTextExtractor",
    "JsonExtractor",
    "PdfExtractor",
    "WordExtractor",
    "SpreadsheetExtractor",
    "RtfExtractor",
    "ImageExtractor",
    "AudioVideoExtractor",
    "FallbackExtractor",
    "default_extractors",
]
