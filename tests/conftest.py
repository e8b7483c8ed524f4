"""Pytest fixtures for testing."""

import pytest

from file_directory.domain import DirectoryEntry, EntryFactory, FileOrchestrator
from tests.fakes import (
    DEFAULT_BUCKET,
    FIXED_NOW,
    FakeEntryRepository,
    FakeObjectStorage,
    sequential_ids,
)


@pytest.fixture
def storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture
def repository() -> FakeEntryRepository:
    return FakeEntryRepository()


@pytest.fixture
def orchestrator(storage, repository) -> FileOrchestrator:
    return FileOrchestrator(
        storage=storage,
        repository=repository,
        default_bucket=DEFAULT_BUCKET,
    )


@pytest.fixture
def fixed_factory() -> EntryFactory:
    """Entry factory with predictable ids and a frozen clock."""
    return EntryFactory(id_factory=sequential_ids(), clock=lambda: FIXED_NOW)


@pytest.fixture
def source_entry() -> DirectoryEntry:
    """An existing entry for object key 'k1' in bucket 'A'."""
    return DirectoryEntry(
        id="entry-source",
        file_name="report.pdf",
        object_key="k1",
        bucket_name="A",
        content_type="application/pdf",
        file_size=3,
        upload_date=FIXED_NOW,
        uploaded_by="alice",
        metadata={"OriginalFileName": "report.pdf", "Extension": ".pdf"},
    )
