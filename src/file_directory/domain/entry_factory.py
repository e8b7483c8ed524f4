"""Construction of entry identifiers, object keys and directory records."""

import os
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import ValidationError

from file_directory.domain.models import DEFAULT_CONTENT_TYPE, DirectoryEntry
from file_directory.exceptions import InvalidInputError

ORIGINAL_FILE_NAME = "OriginalFileName"
EXTENSION = "Extension"
COPIED_FROM = "CopiedFrom"


def _new_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EntryFactory:
    """
    Derives ids, object keys and metadata records. Performs no I/O.

    Object keys have the form ``{entry_id}/{object_id}{extension}``. The
    object id is minted separately from the entry id so the key only uses
    the entry id as a namespace.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._new_id = id_factory
        self._now = clock

    def new_upload_entry(
        self,
        file_name: str,
        content_type: str | None,
        size: int,
        uploaded_by: str,
        bucket_name: str,
    ) -> tuple[str, DirectoryEntry]:
        """
        Mints the object key and directory entry for a new upload.

        Raises:
            InvalidInputError: If the file name or uploader is empty, the size
                is negative, or a field is longer than its column allows.
        """
        if not file_name or not file_name.strip():
            raise InvalidInputError("file_name", "must not be empty")
        if size < 0:
            raise InvalidInputError("size", "must not be negative")
        if not uploaded_by or not uploaded_by.strip():
            raise InvalidInputError("uploaded_by", "must not be empty")

        entry_id = self._new_id()
        object_id = self._new_id()
        extension = extension_of(file_name)
        object_key = f"{entry_id}/{object_id}{extension}"

        entry = _build_entry(
            id=entry_id,
            file_name=file_name,
            object_key=object_key,
            bucket_name=bucket_name,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            file_size=size,
            upload_date=self._now(),
            uploaded_by=uploaded_by,
            metadata={
                ORIGINAL_FILE_NAME: file_name,
                EXTENSION: extension,
            },
        )
        return object_key, entry

    def new_copy_entry(
        self,
        source: DirectoryEntry,
        destination_bucket: str,
        new_object_key: str,
    ) -> DirectoryEntry:
        """
        Builds the entry for a copy of ``source`` placed in ``destination_bucket``.

        Raises:
            InvalidInputError: If the bucket or key is longer than its column allows.
        """
        return _build_entry(
            id=self._new_id(),
            file_name=source.file_name,
            object_key=new_object_key,
            bucket_name=destination_bucket,
            content_type=source.content_type,
            file_size=source.file_size,
            upload_date=self._now(),
            uploaded_by=source.uploaded_by,
            metadata={
                ORIGINAL_FILE_NAME: source.file_name,
                EXTENSION: extension_of(source.file_name),
                COPIED_FROM: f"{source.bucket_name}/{source.object_key}",
            },
        )


def _build_entry(**fields) -> DirectoryEntry:
    try:
        return DirectoryEntry(**fields)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "entry"
        raise InvalidInputError(field, error["msg"]) from e


def extension_of(file_name: str) -> str:
    return os.path.splitext(file_name)[1]
