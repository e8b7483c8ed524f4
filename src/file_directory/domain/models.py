"""Domain models for the file directory."""

from datetime import datetime

from pydantic import BaseModel, Field

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Column widths of the file_entries table.
MAX_ID_LENGTH = 36
MAX_KEY_LENGTH = 1024
MAX_LABEL_LENGTH = 255


class DirectoryEntry(BaseModel, frozen=True):
    """
    Metadata record for one stored object.

    The pair (bucket_name, object_key) addresses the payload in object
    storage. Entries are never updated in place; a copy produces a new entry.
    """

    id: str = Field(max_length=MAX_ID_LENGTH)
    file_name: str = Field(max_length=MAX_KEY_LENGTH)
    object_key: str = Field(max_length=MAX_KEY_LENGTH)
    bucket_name: str = Field(max_length=MAX_LABEL_LENGTH)
    content_type: str | None = Field(default=None, max_length=MAX_LABEL_LENGTH)
    file_size: int = Field(ge=0)
    upload_date: datetime
    uploaded_by: str = Field(max_length=MAX_LABEL_LENGTH)
    metadata: dict[str, str] = Field(default_factory=dict)


class StoredObject(BaseModel, frozen=True):
    """Payload fetched from object storage."""

    data: bytes
    content_type: str | None = None


class StorageResponse(BaseModel, frozen=True):
    """Status reported by object storage for a completed call."""

    status_code: int = 200
    message: str = ""

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300


class FileDownload(BaseModel, frozen=True):
    """Downloaded payload with the headers needed to serve it."""

    data: bytes
    content_type: str
    file_name: str
