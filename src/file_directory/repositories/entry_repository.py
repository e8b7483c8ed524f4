"""Repository for directory entry persistence."""

from datetime import timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from file_directory.db_models import FileEntryRecord
from file_directory.domain.models import DirectoryEntry
from file_directory.exceptions import MetadataStoreError
from file_directory.infrastructure.interfaces import EntryRepository
from file_directory.logging import setup_logging

logger = setup_logging()


class SqlEntryRepository(EntryRepository):
    """
    Handles database operations for directory entries.

    Each call opens its own session so single-entry inserts and deletes
    commit atomically and independently of any object storage call.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def insert(self, entry: DirectoryEntry) -> DirectoryEntry:
        try:
            with self._session_factory() as db_session:
                db_session.add(_to_record(entry))
                db_session.commit()
        except SQLAlchemyError as e:
            logger.exception("Failed to insert entry", extra={"entry_id": entry.id})
            raise MetadataStoreError("insert", entry.id, cause=e) from e

        logger.info(
            "Entry recorded",
            extra={"entry_id": entry.id, "object_key": entry.object_key},
        )
        return entry

    def find_by_id(self, entry_id: str) -> DirectoryEntry | None:
        try:
            with self._session_factory() as db_session:
                record = db_session.get(FileEntryRecord, entry_id)
                return _to_entry(record) if record else None
        except SQLAlchemyError as e:
            logger.exception("Failed to read entry", extra={"entry_id": entry_id})
            raise MetadataStoreError("find_by_id", entry_id, cause=e) from e

    def find_by_object_key(
        self, object_key: str, bucket_name: str | None = None
    ) -> DirectoryEntry | None:
        statement = select(FileEntryRecord).where(
            FileEntryRecord.object_key == object_key
        )
        if bucket_name is not None:
            statement = statement.where(FileEntryRecord.bucket_name == bucket_name)
        try:
            with self._session_factory() as db_session:
                record = db_session.exec(statement).first()
                return _to_entry(record) if record else None
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to read entry by object key",
                extra={"object_key": object_key, "bucket_name": bucket_name},
            )
            raise MetadataStoreError("find_by_object_key", object_key, cause=e) from e

    def find_all(self) -> list[DirectoryEntry]:
        try:
            with self._session_factory() as db_session:
                records = db_session.exec(select(FileEntryRecord)).all()
                return [_to_entry(r) for r in records]
        except SQLAlchemyError as e:
            logger.exception("Failed to list entries")
            raise MetadataStoreError("find_all", "*", cause=e) from e

    def delete_by_id(self, entry_id: str) -> bool:
        try:
            with self._session_factory() as db_session:
                record = db_session.get(FileEntryRecord, entry_id)
                if record is None:
                    return False
                db_session.delete(record)
                db_session.commit()
        except SQLAlchemyError as e:
            logger.exception("Failed to delete entry", extra={"entry_id": entry_id})
            raise MetadataStoreError("delete", entry_id, cause=e) from e

        logger.info("Entry removed", extra={"entry_id": entry_id})
        return True


def _to_record(entry: DirectoryEntry) -> FileEntryRecord:
    return FileEntryRecord(
        id=entry.id,
        file_name=entry.file_name,
        object_key=entry.object_key,
        bucket_name=entry.bucket_name,
        content_type=entry.content_type,
        file_size=entry.file_size,
        upload_date=entry.upload_date,
        uploaded_by=entry.uploaded_by,
        tags=dict(entry.metadata),
    )


def _to_entry(record: FileEntryRecord) -> DirectoryEntry:
    upload_date = record.upload_date
    # SQLite drops tzinfo; stored values are always UTC.
    if upload_date.tzinfo is None:
        upload_date = upload_date.replace(tzinfo=timezone.utc)
    return DirectoryEntry(
        id=record.id,
        file_name=record.file_name,
        object_key=record.object_key,
        bucket_name=record.bucket_name,
        content_type=record.content_type,
        file_size=record.file_size,
        upload_date=upload_date,
        uploaded_by=record.uploaded_by,
        metadata=dict(record.tags or {}),
    )
