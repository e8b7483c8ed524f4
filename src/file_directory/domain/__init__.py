from .entry_factory import EntryFactory
from .file_orchestrator import FileOrchestrator
from .models import DirectoryEntry, FileDownload, StorageResponse, StoredObject
from .results import (
    BackendError,
    NotFound,
    NotFoundReason,
    OperationResult,
    PartialFailure,
    StoreName,
    Success,
)

__all__ = [
    "EntryFactory",
    "FileOrchestrator",
    "DirectoryEntry",
    "FileDownload",
    "StorageResponse",
    "StoredObject",
    "BackendError",
    "NotFound",
    "NotFoundReason",
    "OperationResult",
    "PartialFailure",
    "StoreName",
    "Success",
]
