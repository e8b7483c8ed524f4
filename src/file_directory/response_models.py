"""Request and response models for the file directory API."""

from pydantic import BaseModel, Field

from file_directory.domain.models import DirectoryEntry


class FileEntryResponse(BaseModel):
    """Response returned after a successful upload, delete or copy."""

    message: str
    entry_id: str
    entry: DirectoryEntry


class CopyRequest(BaseModel):
    """Body of a cross-bucket copy request."""

    source_object_key: str = Field(..., min_length=1)
    source_bucket: str = Field(..., min_length=1)
    destination_bucket: str = Field(..., min_length=1)
    destination_object_key: str | None = None
