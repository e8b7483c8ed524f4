"""Concrete implementations of infrastructure interfaces."""

from .minio_storage import MinioObjectStorage, get_minio_client

__all__ = ["MinioObjectStorage", "get_minio_client"]
