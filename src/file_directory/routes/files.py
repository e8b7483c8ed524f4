"""File directory endpoints."""

from typing import Annotated, List
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, HTTPException, Response, UploadFile

from file_directory.dependencies import get_orchestrator
from file_directory.domain import (
    BackendError,
    DirectoryEntry,
    FileOrchestrator,
    NotFound,
    OperationResult,
    PartialFailure,
    Success,
)
from file_directory.exceptions import InvalidInputError, MetadataStoreError
from file_directory.logging import setup_logging
from file_directory.response_models import CopyRequest, FileEntryResponse

logger = setup_logging()

router = APIRouter(prefix="/files", tags=["files"])

OrchestratorDep = Annotated[FileOrchestrator, Depends(get_orchestrator)]


def _raise_for_result(result: OperationResult) -> Success:
    """Maps every non-success variant onto an HTTP error."""
    if isinstance(result, Success):
        return result
    if isinstance(result, NotFound):
        raise HTTPException(
            status_code=404,
            detail={"reason": result.reason.value, "message": result.detail},
        )
    if isinstance(result, BackendError):
        raise HTTPException(
            status_code=502,
            detail={
                "store": result.store.value,
                "code": result.code,
                "message": result.message,
            },
        )
    if isinstance(result, PartialFailure):
        raise HTTPException(
            status_code=500,
            detail={
                "message": result.detail,
                "committed_step": result.committed_step,
                "failed_step": result.failed_step,
                "bucket_name": result.bucket_name,
                "object_key": result.object_key,
                "entry_id": result.entry_id,
            },
        )
    raise TypeError(f"Unhandled operation result: {result!r}")


def _invalid_input(error: InvalidInputError) -> HTTPException:
    return HTTPException(
        status_code=422, detail={"field": error.field, "message": error.reason}
    )


@router.post("/upload", response_model=FileEntryResponse)
def upload_file(
    file: UploadFile,
    orchestrator: OrchestratorDep,
    uploaded_by: str = Form(..., min_length=1),
    bucket_name: str | None = Form(None),
) -> FileEntryResponse:
    """
    Uploads a file.

    Stores the bytes in object storage and records a directory entry.
    """
    data = file.file.read()

    logger.info(
        "Received upload request",
        extra={
            "file_name": file.filename,
            "content_type": file.content_type,
            "size": len(data),
            "bucket_name": bucket_name,
        },
    )

    try:
        result = orchestrator.upload(
            data=data,
            file_name=file.filename or "",
            content_type=file.content_type,
            uploaded_by=uploaded_by,
            bucket_name=bucket_name,
        )
    except InvalidInputError as e:
        raise _invalid_input(e)

    success = _raise_for_result(result)
    return FileEntryResponse(
        message=f"{success.entry.object_key} uploaded successfully.",
        entry_id=success.entry.id,
        entry=success.entry,
    )


@router.get("/download/{entry_id}")
def download_file(entry_id: str, orchestrator: OrchestratorDep) -> Response:
    """Streams back the bytes of an entry under its original file name."""
    try:
        result = orchestrator.download(entry_id)
    except InvalidInputError as e:
        raise _invalid_input(e)

    success = _raise_for_result(result)
    download = success.download
    return Response(
        content=download.data,
        media_type=download.content_type,
        headers={
            "Content-Disposition": (
                f"attachment; filename*=UTF-8''{quote(download.file_name)}"
            )
        },
    )


@router.delete("/delete/{entry_id}", response_model=FileEntryResponse)
def delete_file(entry_id: str, orchestrator: OrchestratorDep) -> FileEntryResponse:
    try:
        result = orchestrator.delete(entry_id)
    except InvalidInputError as e:
        raise _invalid_input(e)

    success = _raise_for_result(result)
    return FileEntryResponse(
        message="File deleted successfully.",
        entry_id=success.entry.id,
        entry=success.entry,
    )


@router.post("/copy", response_model=FileEntryResponse)
def copy_between_buckets(
    request: CopyRequest, orchestrator: OrchestratorDep
) -> FileEntryResponse:
    """Copies an object into another bucket and records the copy as a new entry."""
    try:
        result = orchestrator.copy(
            source_object_key=request.source_object_key,
            source_bucket=request.source_bucket,
            destination_bucket=request.destination_bucket,
            destination_object_key=request.destination_object_key,
        )
    except InvalidInputError as e:
        raise _invalid_input(e)

    success = _raise_for_result(result)
    return FileEntryResponse(
        message=(
            f"{request.source_object_key} copied to "
            f"{success.entry.bucket_name}/{success.entry.object_key}."
        ),
        entry_id=success.entry.id,
        entry=success.entry,
    )


@router.get("", response_model=List[DirectoryEntry])
def list_entries(orchestrator: OrchestratorDep):
    """Returns every directory entry."""
    try:
        return orchestrator.list_entries()
    except MetadataStoreError as e:
        logger.error(f"Error listing entries: {e}")
        raise HTTPException(status_code=502, detail="Metadata store unavailable")


@router.get("/{entry_id}", response_model=DirectoryEntry)
def get_entry(entry_id: str, orchestrator: OrchestratorDep):
    """Returns the directory entry for a single file."""
    try:
        result = orchestrator.get_entry(entry_id)
    except InvalidInputError as e:
        raise _invalid_input(e)
    return _raise_for_result(result).entry
