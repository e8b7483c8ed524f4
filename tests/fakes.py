"""In-memory stores with failure injection for orchestrator tests."""

import itertools
from datetime import datetime, timezone

from file_directory.domain import (
    DirectoryEntry,
    StorageResponse,
    StoredObject,
)
from file_directory.exceptions import (
    MetadataStoreError,
    ObjectNotFoundError,
    StorageCopyError,
    StorageDeleteError,
    StorageDownloadError,
    StorageUploadError,
)
from file_directory.infrastructure.interfaces import EntryRepository, ObjectStorage

DEFAULT_BUCKET = "files"
FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


class FakeObjectStorage(ObjectStorage):
    """In-memory object storage with per-operation failure injection."""

    def __init__(self):
        self.objects: dict[tuple[str, str], tuple[bytes, str | None]] = {}
        self.calls: list[tuple] = []
        self.fail_on: dict[str, str] = {}
        self.status_on: dict[str, int] = {}

    def _check(self, operation, error_cls, bucket_name, object_name):
        code = self.fail_on.get(operation)
        if code is not None:
            raise error_cls(bucket_name, object_name, code=code, status_code=403)

    def _response(self, operation, default_status):
        return StorageResponse(
            status_code=self.status_on.get(operation, default_status),
            message=f"{operation} done",
        )

    def put(self, bucket_name, object_name, data, content_type):
        self.calls.append(("put", bucket_name, object_name))
        self._check("put", StorageUploadError, bucket_name, object_name)
        response = self._response("put", 200)
        if response.success:
            self.objects[(bucket_name, object_name)] = (data, content_type)
        return response

    def get(self, bucket_name, object_name):
        self.calls.append(("get", bucket_name, object_name))
        self._check("get", StorageDownloadError, bucket_name, object_name)
        if (bucket_name, object_name) not in self.objects:
            raise ObjectNotFoundError(bucket_name, object_name)
        data, content_type = self.objects[(bucket_name, object_name)]
        return StoredObject(data=data, content_type=content_type)

    def delete(self, bucket_name, object_name):
        self.calls.append(("delete", bucket_name, object_name))
        self._check("delete", StorageDeleteError, bucket_name, object_name)
        response = self._response("delete", 204)
        if response.success:
            self.objects.pop((bucket_name, object_name), None)
        return response

    def copy(
        self,
        source_bucket,
        source_object_name,
        destination_bucket,
        destination_object_name,
    ):
        self.calls.append(
            (
                "copy",
                source_bucket,
                source_object_name,
                destination_bucket,
                destination_object_name,
            )
        )
        self._check(
            "copy", StorageCopyError, destination_bucket, destination_object_name
        )
        response = self._response("copy", 200)
        if response.success:
            self.objects[(destination_bucket, destination_object_name)] = self.objects[
                (source_bucket, source_object_name)
            ]
        return response

    def ensure_bucket_exists(self, bucket_name):
        self.calls.append(("ensure_bucket_exists", bucket_name))


class FakeEntryRepository(EntryRepository):
    """In-memory entry repository with per-operation failure injection."""

    def __init__(self):
        self.entries: dict[str, DirectoryEntry] = {}
        self.calls: list[tuple] = []
        self.fail_on: set[str] = set()
        self.delete_returns_false = False

    def _check(self, operation, key):
        if operation in self.fail_on:
            raise MetadataStoreError(operation, key, cause=ConnectionError("down"))

    def insert(self, entry):
        self.calls.append(("insert", entry.id))
        self._check("insert", entry.id)
        self.entries[entry.id] = entry
        return entry

    def find_by_id(self, entry_id):
        self.calls.append(("find_by_id", entry_id))
        self._check("find_by_id", entry_id)
        return self.entries.get(entry_id)

    def find_by_object_key(self, object_key, bucket_name=None):
        self.calls.append(("find_by_object_key", object_key, bucket_name))
        self._check("find_by_object_key", object_key)
        for entry in self.entries.values():
            if entry.object_key == object_key and (
                bucket_name is None or entry.bucket_name == bucket_name
            ):
                return entry
        return None

    def find_all(self):
        self.calls.append(("find_all",))
        self._check("find_all", "*")
        return list(self.entries.values())

    def delete_by_id(self, entry_id):
        self.calls.append(("delete_by_id", entry_id))
        self._check("delete", entry_id)
        if self.delete_returns_false:
            return False
        return self.entries.pop(entry_id, None) is not None


def sequential_ids(prefix: str = "id"):
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"
