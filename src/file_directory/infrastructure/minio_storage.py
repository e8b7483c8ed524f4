"""MinIO implementation of the ObjectStorage interface."""

import io

import urllib3
from minio import Minio
from minio.commonconfig import CopySource
from minio.error import S3Error

from file_directory.config import MinioConfig
from file_directory.domain.models import StorageResponse, StoredObject
from file_directory.exceptions import (
    ObjectNotFoundError,
    StorageCopyError,
    StorageDeleteError,
    StorageDownloadError,
    StorageUploadError,
)
from file_directory.infrastructure.interfaces import ObjectStorage
from file_directory.logging import setup_logging

logger = setup_logging()

_MISSING_OBJECT_CODES = ("NoSuchKey", "NoSuchObject")


def get_minio_client(config: MinioConfig) -> Minio:
    """
    Builds a MinIO client that never retries on its own.

    Timeouts abort the in-flight call; retries are left to the caller so a
    step whose effect already committed is not silently re-run.
    """
    http_client = urllib3.PoolManager(
        timeout=urllib3.Timeout(
            connect=config.connect_timeout_seconds,
            read=config.read_timeout_seconds,
        ),
        retries=urllib3.Retry(total=0, redirect=False),
    )
    try:
        return Minio(
            endpoint=config.endpoint,
            access_key=config.user,
            secret_key=config.password,
            secure=config.secure,
            http_client=http_client,
        )
    except Exception as e:
        logger.exception(
            "MinIO Client Initialization Failed",
            extra={"endpoint": config.endpoint, "user": config.user},
        )
        raise e


def _error_code(error: Exception) -> str:
    if isinstance(error, S3Error):
        return error.code
    return type(error).__name__


def _status_code(error: Exception) -> int | None:
    if isinstance(error, S3Error):
        return getattr(error.response, "status", None)
    return None


class MinioObjectStorage(ObjectStorage):
    """Handles object storage operations using MinIO."""

    def __init__(self, client: Minio):
        self._client = client

    def put(
        self,
        bucket_name: str,
        object_name: str,
        data: bytes,
        content_type: str,
    ) -> StorageResponse:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "size": len(data),
                },
            )
            return StorageResponse(
                status_code=200, message=f"{object_name} uploaded successfully."
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(
                bucket_name,
                object_name,
                code=_error_code(e),
                status_code=_status_code(e),
                cause=e,
            ) from e

    def get(self, bucket_name: str, object_name: str) -> StoredObject:
        try:
            response = self._client.get_object(
                bucket_name=bucket_name, object_name=object_name
            )
            try:
                data = response.data
                content_type = response.headers.get("Content-Type")
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "File downloaded from MinIO",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            return StoredObject(data=data, content_type=content_type)
        except S3Error as e:
            if e.code in _MISSING_OBJECT_CODES:
                logger.warning(
                    "Object not found in MinIO",
                    extra={"bucket_name": bucket_name, "object_name": object_name},
                )
                raise ObjectNotFoundError(bucket_name, object_name, code=e.code) from e
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(
                bucket_name,
                object_name,
                code=e.code,
                status_code=_status_code(e),
                cause=e,
            ) from e
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(
                bucket_name, object_name, code=_error_code(e), cause=e
            ) from e

    def delete(self, bucket_name: str, object_name: str) -> StorageResponse:
        try:
            self._client.remove_object(bucket_name=bucket_name, object_name=object_name)
        except S3Error as e:
            if e.code in _MISSING_OBJECT_CODES:
                logger.info(
                    "Object already absent from MinIO",
                    extra={"bucket_name": bucket_name, "object_name": object_name},
                )
                return StorageResponse(
                    status_code=204, message=f"{object_name} already absent."
                )
            logger.exception(
                "MinIO delete failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDeleteError(
                bucket_name,
                object_name,
                code=e.code,
                status_code=_status_code(e),
                cause=e,
            ) from e
        except Exception as e:
            logger.exception(
                "MinIO delete failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDeleteError(
                bucket_name, object_name, code=_error_code(e), cause=e
            ) from e

        logger.info(
            "File deleted from MinIO",
            extra={"bucket_name": bucket_name, "object_name": object_name},
        )
        return StorageResponse(status_code=204, message=f"{object_name} deleted.")

    def copy(
        self,
        source_bucket: str,
        source_object_name: str,
        destination_bucket: str,
        destination_object_name: str,
    ) -> StorageResponse:
        try:
            self._client.copy_object(
                bucket_name=destination_bucket,
                object_name=destination_object_name,
                source=CopySource(
                    bucket_name=source_bucket, object_name=source_object_name
                ),
            )
        except Exception as e:
            logger.exception(
                "MinIO copy failed",
                extra={
                    "source": f"{source_bucket}/{source_object_name}",
                    "destination": f"{destination_bucket}/{destination_object_name}",
                },
            )
            raise StorageCopyError(
                destination_bucket,
                destination_object_name,
                code=_error_code(e),
                status_code=_status_code(e),
                cause=e,
            ) from e

        logger.info(
            "File copied in MinIO",
            extra={
                "source": f"{source_bucket}/{source_object_name}",
                "destination": f"{destination_bucket}/{destination_object_name}",
            },
        )
        return StorageResponse(
            status_code=200,
            message=(
                f"{source_object_name} copied to "
                f"{destination_bucket}/{destination_object_name}."
            ),
        )

    def ensure_bucket_exists(self, bucket_name: str) -> None:
        if not self._client.bucket_exists(bucket_name=bucket_name):
            self._client.make_bucket(bucket_name=bucket_name)
            logger.info("Bucket created", extra={"bucket_name": bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": bucket_name})
