"""Sequences object storage and metadata store calls for file operations."""

from file_directory.domain.entry_factory import EntryFactory
from file_directory.domain.models import (
    DEFAULT_CONTENT_TYPE,
    MAX_KEY_LENGTH,
    MAX_LABEL_LENGTH,
    DirectoryEntry,
    FileDownload,
    StorageResponse,
)
from file_directory.domain.results import (
    BackendError,
    NotFound,
    NotFoundReason,
    OperationResult,
    PartialFailure,
    StoreName,
    Success,
)
from file_directory.exceptions import (
    InvalidInputError,
    MetadataStoreError,
    ObjectNotFoundError,
    StorageError,
)
from file_directory.infrastructure.interfaces import EntryRepository, ObjectStorage
from file_directory.logging import setup_logging

logger = setup_logging()


class FileOrchestrator:
    """
    Runs upload, download, delete and copy across two independent stores.

    There is no cross-store transaction. Each operation commits one store
    and then the other; when the second step fails the outcome is a
    PartialFailure naming what is left behind. Nothing is rolled back or
    retried here. Holds no per-request state.
    """

    def __init__(
        self,
        storage: ObjectStorage,
        repository: EntryRepository,
        default_bucket: str,
        factory: EntryFactory | None = None,
    ):
        self._storage = storage
        self._repository = repository
        self._default_bucket = default_bucket
        self._factory = factory or EntryFactory()

    def upload(
        self,
        data: bytes,
        file_name: str,
        content_type: str | None,
        uploaded_by: str,
        bucket_name: str | None = None,
        declared_size: int | None = None,
    ) -> OperationResult:
        """
        Stores a payload and records its directory entry.

        The object is written first. If the entry insert then fails the
        object is orphaned and reported through PartialFailure.

        Raises:
            InvalidInputError: If the payload or file name is empty, or the
                declared size disagrees with the payload length.
        """
        if not data:
            raise InvalidInputError("data", "payload must not be empty")
        if declared_size is not None and declared_size != len(data):
            raise InvalidInputError(
                "declared_size",
                f"declared {declared_size} bytes but received {len(data)}",
            )

        bucket = bucket_name or self._default_bucket
        object_key, entry = self._factory.new_upload_entry(
            file_name=file_name,
            content_type=content_type,
            size=len(data),
            uploaded_by=uploaded_by,
            bucket_name=bucket,
        )

        logger.info(
            "Upload started",
            extra={
                "entry_id": entry.id,
                "bucket_name": bucket,
                "object_key": object_key,
                "size": entry.file_size,
            },
        )

        try:
            response = self._storage.put(
                bucket, object_key, data, entry.content_type or DEFAULT_CONTENT_TYPE
            )
        except StorageError as e:
            return self._storage_failure(e)
        if not response.success:
            return self._unsuccessful_response(response)

        try:
            self._repository.insert(entry)
        except MetadataStoreError as e:
            return self._partial_failure(
                "Object stored but directory entry was not recorded",
                committed_step="object_store.put",
                failed_step="metadata.insert",
                entry=entry,
                cause=e,
            )

        logger.info(
            "Upload completed",
            extra={"entry_id": entry.id, "object_key": object_key},
        )
        return Success(entry=entry)

    def download(self, entry_id: str) -> OperationResult:
        """
        Fetches the payload of an entry.

        Content type prefers the value recorded in metadata, then the value
        reported by storage, then a generic binary type.
        """
        lookup = self._find_by_id(entry_id)
        if not isinstance(lookup, DirectoryEntry):
            return lookup
        entry = lookup

        try:
            stored = self._storage.get(entry.bucket_name, entry.object_key)
        except ObjectNotFoundError:
            logger.warning(
                "Directory entry references a missing object",
                extra={
                    "entry_id": entry.id,
                    "bucket_name": entry.bucket_name,
                    "object_key": entry.object_key,
                },
            )
            return NotFound(
                reason=NotFoundReason.OBJECT_MISSING,
                detail=f"Object '{entry.bucket_name}/{entry.object_key}' "
                f"for entry '{entry.id}' is missing from storage",
            )
        except StorageError as e:
            return self._storage_failure(e)

        content_type = entry.content_type or stored.content_type or DEFAULT_CONTENT_TYPE
        return Success(
            entry=entry,
            download=FileDownload(
                data=stored.data,
                content_type=content_type,
                file_name=entry.file_name,
            ),
        )

    def delete(self, entry_id: str) -> OperationResult:
        """
        Removes the object and then its directory entry.

        The entry is only removed after storage confirms the delete, so a
        storage failure leaves the entry in place for a retry.
        """
        lookup = self._find_by_id(entry_id)
        if not isinstance(lookup, DirectoryEntry):
            return lookup
        entry = lookup

        try:
            response = self._storage.delete(entry.bucket_name, entry.object_key)
        except StorageError as e:
            return self._storage_failure(e)
        if not response.success:
            return self._unsuccessful_response(response)

        try:
            removed = self._repository.delete_by_id(entry.id)
        except MetadataStoreError as e:
            return self._partial_failure(
                "Object deleted but directory entry could not be removed",
                committed_step="object_store.delete",
                failed_step="metadata.delete",
                entry=entry,
                cause=e,
            )
        if not removed:
            return self._partial_failure(
                "Object deleted but no directory entry was removed",
                committed_step="object_store.delete",
                failed_step="metadata.delete",
                entry=entry,
            )

        logger.info(
            "Delete completed",
            extra={"entry_id": entry.id, "object_key": entry.object_key},
        )
        return Success(entry=entry)

    def copy(
        self,
        source_object_key: str,
        source_bucket: str,
        destination_bucket: str,
        destination_object_key: str | None = None,
    ) -> OperationResult:
        """
        Copies an object to another bucket and records a new entry for it.

        The destination key defaults to the source key, so copies of the
        same key from different buckets into one destination collide.
        The source entry is never modified.

        Raises:
            InvalidInputError: If any of the source key or buckets is empty,
                or a key or bucket is longer than the directory can record.
        """
        destination_key = destination_object_key or source_object_key
        for field, value, max_length in (
            ("source_object_key", source_object_key, MAX_KEY_LENGTH),
            ("source_bucket", source_bucket, MAX_LABEL_LENGTH),
            ("destination_bucket", destination_bucket, MAX_LABEL_LENGTH),
            ("destination_object_key", destination_key, MAX_KEY_LENGTH),
        ):
            if not value or not value.strip():
                raise InvalidInputError(field, "must not be empty")
            if len(value) > max_length:
                raise InvalidInputError(
                    field, f"must be at most {max_length} characters"
                )

        try:
            source = self._repository.find_by_object_key(
                source_object_key, bucket_name=source_bucket
            )
        except MetadataStoreError as e:
            return self._metadata_failure(e)
        if source is None:
            return NotFound(
                detail=f"No entry for '{source_bucket}/{source_object_key}'",
            )

        new_entry = self._factory.new_copy_entry(
            source, destination_bucket, destination_key
        )
        try:
            response = self._storage.copy(
                source_bucket, source_object_key, destination_bucket, destination_key
            )
        except StorageError as e:
            return self._storage_failure(e)
        if not response.success:
            return self._unsuccessful_response(response)

        try:
            self._repository.insert(new_entry)
        except MetadataStoreError as e:
            return self._partial_failure(
                "Object copied but directory entry was not recorded",
                committed_step="object_store.copy",
                failed_step="metadata.insert",
                entry=new_entry,
                cause=e,
            )

        logger.info(
            "Copy completed",
            extra={
                "source_entry_id": source.id,
                "entry_id": new_entry.id,
                "destination": f"{destination_bucket}/{destination_key}",
            },
        )
        return Success(entry=new_entry)

    def list_entries(self) -> list[DirectoryEntry]:
        """
        Raises:
            MetadataStoreError: If the metadata store fails.
        """
        return self._repository.find_all()

    def get_entry(self, entry_id: str) -> OperationResult:
        lookup = self._find_by_id(entry_id)
        if not isinstance(lookup, DirectoryEntry):
            return lookup
        return Success(entry=lookup)

    def _find_by_id(self, entry_id: str) -> DirectoryEntry | NotFound | BackendError:
        if not entry_id or not entry_id.strip():
            raise InvalidInputError("entry_id", "must not be empty")
        try:
            entry = self._repository.find_by_id(entry_id)
        except MetadataStoreError as e:
            return self._metadata_failure(e)
        if entry is None:
            return NotFound(detail=f"No entry with id '{entry_id}'")
        return entry

    def _storage_failure(self, error: StorageError) -> BackendError:
        logger.error(
            "Object storage call failed",
            extra={
                "operation": error.operation,
                "bucket_name": error.bucket_name,
                "object_key": error.object_name,
                "code": error.code,
            },
        )
        return BackendError(
            store=StoreName.OBJECT_STORE,
            code=error.code,
            message=str(error),
            status_code=error.status_code,
        )

    def _unsuccessful_response(self, response: StorageResponse) -> BackendError:
        logger.error(
            "Object storage reported failure",
            extra={
                "status_code": response.status_code,
                "storage_message": response.message,
            },
        )
        return BackendError(
            store=StoreName.OBJECT_STORE,
            code=str(response.status_code),
            message=response.message,
            status_code=response.status_code,
        )

    def _metadata_failure(self, error: MetadataStoreError) -> BackendError:
        logger.error(
            "Metadata store call failed",
            extra={"operation": error.operation, "key": error.key, "code": error.code},
        )
        return BackendError(
            store=StoreName.METADATA_STORE,
            code=error.code,
            message=str(error),
        )

    def _partial_failure(
        self,
        detail: str,
        committed_step: str,
        failed_step: str,
        entry: DirectoryEntry,
        cause: Exception | None = None,
    ) -> PartialFailure:
        logger.error(
            "Stores diverged",
            extra={
                "detail": detail,
                "committed_step": committed_step,
                "failed_step": failed_step,
                "entry_id": entry.id,
                "bucket_name": entry.bucket_name,
                "object_key": entry.object_key,
                "cause": str(cause) if cause else None,
            },
        )
        return PartialFailure(
            detail=detail,
            committed_step=committed_step,
            failed_step=failed_step,
            bucket_name=entry.bucket_name,
            object_key=entry.object_key,
            entry_id=entry.id,
        )
