from file_directory.config import AppConfig, DatabaseConfig, MinioConfig
from file_directory.exceptions import (
    InvalidInputError,
    MetadataStoreError,
    ObjectNotFoundError,
    StorageCopyError,
    StorageDeleteError,
    StorageDownloadError,
    StorageError,
    StorageUploadError,
)
from file_directory.logging import setup_logging

__all__ = [
    "setup_logging",
    "InvalidInputError",
    "MetadataStoreError",
    "ObjectNotFoundError",
    "StorageError",
    "StorageUploadError",
    "StorageDownloadError",
    "StorageDeleteError",
    "StorageCopyError",
    "AppConfig",
    "DatabaseConfig",
    "MinioConfig",
]
