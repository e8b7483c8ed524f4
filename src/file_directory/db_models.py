from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from file_directory.domain.models import (
    MAX_ID_LENGTH,
    MAX_KEY_LENGTH,
    MAX_LABEL_LENGTH,
)


class FileEntryRecord(SQLModel, table=True):
    __tablename__ = "file_entries"

    id: str = Field(primary_key=True, max_length=MAX_ID_LENGTH)
    file_name: str = Field(max_length=MAX_KEY_LENGTH)
    object_key: str = Field(index=True, max_length=MAX_KEY_LENGTH)
    bucket_name: str = Field(index=True, max_length=MAX_LABEL_LENGTH)
    content_type: Optional[str] = Field(default=None, max_length=MAX_LABEL_LENGTH)
    file_size: int
    upload_date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    uploaded_by: str = Field(max_length=MAX_LABEL_LENGTH)
    # Attribute name differs from the column because SQLModel reserves `metadata`.
    tags: Dict[str, str] = Field(
        default_factory=dict, sa_column=Column("metadata", JSON, nullable=False)
    )
