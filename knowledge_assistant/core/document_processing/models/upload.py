"""
Uploaded file model for the ingestion pipeline.

Wraps a raw file blob together with its declared name and media type.

Dependencies: pydantic
System role: Input contract for format extraction
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class FileMetadata(BaseModel):
    """Descriptive metadata for an uploaded file."""

    name: str
    size: int
    type: str
    last_modified: str = Field(description="ISO-8601 last-modified time")


class UploadedFile(BaseModel):
    """Raw uploaded file: name, bytes and declared media type."""

    model_config = ConfigDict(frozen=True)

    file_name: str = Field(description="Original file name as uploaded")
    data: bytes = Field(default=b"", description="Raw file content")
    media_type: str = Field(default="", description="Declared MIME type (may be empty)")
    last_modified: int | None = Field(
        default=None,
        description="Last-modified time in epoch milliseconds, if known",
    )

    @property
    def size(self) -> int:
        """File size in bytes."""
        return len(self.data)

    @property
    def extension(self) -> str:
        """Lower-cased extension without the dot ('' when absent)."""
        parts = self.file_name.lower().split(".")
        return parts[-1] if len(parts) > 1 else ""

    def metadata(self) -> FileMetadata:
        """Describe the file without touching its content."""
        if self.last_modified is None:
            modified = datetime.now(timezone.utc)
        else:
            modified = datetime.fromtimestamp(self.last_modified / 1000, tz=timezone.utc)
        return FileMetadata(
            name=self.file_name,
            size=self.size,
            type=self.media_type,
            last_modified=modified.isoformat(),
        )
