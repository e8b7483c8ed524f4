"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod

from file_directory.domain.models import StorageResponse, StoredObject


class ObjectStorage(ABC):
    """Abstract base class for bucket/key object storage backends."""

    @abstractmethod
    def put(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes,
        content_type: str,
    ) -> StorageResponse:
        """
        Uploads a payload to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination key in storage.
            data: The payload bytes.
            content_type: MIME type of the payload.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def get(self, bucket_name: str, object_name: str) -> StoredObject:
        """
        Downloads a payload from storage.

        Raises:
            ObjectNotFoundError: If the object does not exist.
            StorageDownloadError: If the download fails.
        """

    @abstractmethod
    def delete(self, bucket_name: str, object_name: str) -> StorageResponse:
        """
        Deletes a payload. Deleting an absent object succeeds.

        Raises:
            StorageDeleteError: If the delete fails.
        """

    @abstractmethod
    def copy(
        self,
        source_bucket: str,
        source_object_name: str,
        destination_bucket: str,
        destination_object_name: str,
    ) -> StorageResponse:
        """
        Copies a payload server-side, possibly across buckets.

        Raises:
            StorageCopyError: If the copy fails.
        """

    @abstractmethod
    def ensure_bucket_exists(self, bucket_name: str) -> None:
        """
        Ensures a bucket exists, creating it if necessary.

        Args:
            bucket_name: The bucket name to ensure exists.
        """
