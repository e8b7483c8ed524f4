"""Custom exceptions for the file directory service."""


class InvalidInputError(Exception):
    """Raised when caller-supplied data fails a precondition."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid '{field}': {reason}")


class StorageError(Exception):
    """Raised when an object storage call fails."""

    operation = "storage"

    def __init__(
        self,
        bucket_name: str,
        object_name: str,
        code: str,
        message: str = "",
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.bucket_name = bucket_name
        self.object_name = object_name
        self.code = code
        self.status_code = status_code
        self.cause = cause
        super().__init__(
            message
            or f"Storage {self.operation} failed for '{bucket_name}/{object_name}'"
        )


class StorageUploadError(StorageError):
    """Raised when file upload to storage fails."""

    operation = "upload"


class StorageDownloadError(StorageError):
    """Raised when downloading a file from storage fails."""

    operation = "download"


class ObjectNotFoundError(StorageDownloadError):
    """Raised when storage reports that the requested object does not exist."""

    def __init__(self, bucket_name: str, object_name: str, code: str = "NoSuchKey"):
        super().__init__(
            bucket_name,
            object_name,
            code=code,
            message=f"Object '{bucket_name}/{object_name}' not found in storage",
            status_code=404,
        )


class StorageDeleteError(StorageError):
    """Raised when deleting a file from storage fails."""

    operation = "delete"


class StorageCopyError(StorageError):
    """Raised when copying a file between buckets fails."""

    operation = "copy"


class MetadataStoreError(Exception):
    """Raised when a metadata store operation fails."""

    def __init__(self, operation: str, key: str, cause: Exception | None = None):
        self.operation = operation
        self.key = key
        self.cause = cause
        self.code = type(cause).__name__ if cause is not None else "MetadataStoreError"
        super().__init__(f"Metadata {operation} failed for '{key}'")
