"""
Text chunking task.

Splits extracted text into overlapping chunks, preferring to end each
window on a sentence or line boundary.

Dependencies: math (stdlib)
System role: Second stage of document ingestion pipeline
"""

import math

MIN_SNAP_WINDOW = 100


def chunk_text(text: str, chunk_size: int = 1000, chunk_overlap: int = 200) -> list[str]:
    """
    Split text into overlapping, trimmed, non-empty chunks.

    A non-final window longer than MIN_SNAP_WINDOW is cut after its last
    period or newline when that boundary lies past the window midpoint.
    The window always advances by at least one character, and the loop is
    additionally capped at ``ceil(len / max(size - overlap, 1)) + 10``
    iterations, so an overlap at or above the size still yields chunks.

    Args:
        text: Normalized document text
        chunk_size: Window length in characters
        chunk_overlap: Characters shared between consecutive windows

    Returns:
        list[str]: Chunks in document order

    Raises:
        ValueError: When chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    if not text:
        return []

    text_length = len(text)
    if text_length <= chunk_size:
        trimmed = text.strip()
        return [trimmed] if trimmed else []

    chunks: list[str] = []
    max_iterations = math.ceil(text_length / max(chunk_size - chunk_overlap, 1)) + 10
    start = 0
    iterations = 0

    while start < text_length and iterations < max_iterations:
        iterations += 1
        end = min(start + chunk_size, text_length)
        window = text[start:end]

        if end < text_length and len(window) > MIN_SNAP_WINDOW:
            last_break = max(window.rfind("."), window.rfind("\n"))
            if last_break > len(window) * 0.5:
                window = window[: last_break + 1]

        trimmed = window.strip()
        if trimmed:
            chunks.append(trimmed)

        # Forward progress even when overlap >= window length
        start += max(len(window) - chunk_overlap, 1)

    return chunks


class ChunkingTask:
    """Split extracted text into chunks with a fixed window configuration."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Extracted document text

        Returns:
            list[str]: Trimmed, non-empty chunks (empty for blank text)
        """
        return chunk_text(text, self.chunk_size, self.chunk_overlap)
