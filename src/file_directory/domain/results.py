"""Tagged outcomes returned by every orchestrator operation."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from file_directory.domain.models import DirectoryEntry, FileDownload


class NotFoundReason(str, Enum):
    """Distinguishes an unknown id/key from an object missing behind a known entry."""

    ENTRY_MISSING = "entry_missing"
    OBJECT_MISSING = "object_missing"


class StoreName(str, Enum):
    OBJECT_STORE = "object_store"
    METADATA_STORE = "metadata_store"


class Success(BaseModel, frozen=True):
    """The operation committed on both stores."""

    kind: Literal["success"] = "success"
    entry: DirectoryEntry
    download: FileDownload | None = None


class NotFound(BaseModel, frozen=True):
    """No entry for the id/key, or the object is missing from storage."""

    kind: Literal["not_found"] = "not_found"
    reason: NotFoundReason = NotFoundReason.ENTRY_MISSING
    detail: str = ""


class BackendError(BaseModel, frozen=True):
    """
    A store call failed before anything of this operation committed.

    ``code`` is the backend's own error code, passed through unchanged.
    Retrying the whole operation is safe.
    """

    kind: Literal["backend_error"] = "backend_error"
    store: StoreName
    code: str
    message: str
    status_code: int | None = None


class PartialFailure(BaseModel, frozen=True):
    """
    One store committed its step and the other did not.

    Carries the address of the orphaned object or dangling entry so it can
    be reconciled. Must not be retried as if nothing had happened.
    """

    kind: Literal["partial_failure"] = "partial_failure"
    detail: str
    committed_step: str
    failed_step: str
    bucket_name: str
    object_key: str
    entry_id: str


OperationResult = Annotated[
    Union[Success, NotFound, BackendError, PartialFailure],
    Field(discriminator="kind"),
]
