"""Unit tests for the SQLModel entry repository."""

from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from file_directory.exceptions import MetadataStoreError
from file_directory.repositories import SqlEntryRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_repository(engine) -> SqlEntryRepository:
    @contextmanager
    def session_factory():
        with Session(engine) as session:
            yield session

    return SqlEntryRepository(session_factory)


@pytest.fixture
def broken_repository() -> SqlEntryRepository:
    @contextmanager
    def session_factory():
        session = MagicMock()
        session.get.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        session.exec.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("gone"))
        yield session

    return SqlEntryRepository(session_factory)


class TestInsertAndFind:
    """Tests for insert, find_by_id and find_all."""

    def test_round_trip_preserves_fields(self, sql_repository, source_entry):
        """Test an inserted entry reads back with identical fields."""
        sql_repository.insert(source_entry)

        assert sql_repository.find_by_id(source_entry.id) == source_entry

    def test_upload_date_is_utc(self, sql_repository, source_entry):
        """Test the upload date comes back timezone-aware."""
        sql_repository.insert(source_entry)

        found = sql_repository.find_by_id(source_entry.id)

        assert found.upload_date.tzinfo is not None
        assert found.upload_date == source_entry.upload_date

    def test_find_missing_id(self, sql_repository):
        """Test an unknown id returns None."""
        assert sql_repository.find_by_id("missing-1") is None

    def test_find_all(self, sql_repository, source_entry):
        """Test find_all returns every entry."""
        other = source_entry.model_copy(update={"id": "entry-2", "object_key": "k2"})
        sql_repository.insert(source_entry)
        sql_repository.insert(other)

        ids = {entry.id for entry in sql_repository.find_all()}

        assert ids == {"entry-source", "entry-2"}

    def test_duplicate_id_raises(self, sql_repository, source_entry):
        """Test a second insert with the same id is a store error."""
        sql_repository.insert(source_entry)

        with pytest.raises(MetadataStoreError) as exc_info:
            sql_repository.insert(source_entry)

        assert exc_info.value.operation == "insert"
        assert exc_info.value.code == "IntegrityError"


class TestFindByObjectKey:
    """Tests for find_by_object_key."""

    def test_by_key(self, sql_repository, source_entry):
        """Test lookup by key without a bucket filter."""
        sql_repository.insert(source_entry)

        assert sql_repository.find_by_object_key("k1") == source_entry

    def test_bucket_filter(self, sql_repository, source_entry):
        """Test the same key in two buckets resolves per bucket."""
        copy = source_entry.model_copy(update={"id": "entry-copy", "bucket_name": "B"})
        sql_repository.insert(source_entry)
        sql_repository.insert(copy)

        assert sql_repository.find_by_object_key("k1", bucket_name="A").id == (
            "entry-source"
        )
        assert sql_repository.find_by_object_key("k1", bucket_name="B").id == (
            "entry-copy"
        )
        assert sql_repository.find_by_object_key("k1", bucket_name="C") is None

    def test_unknown_key(self, sql_repository):
        """Test an unknown key returns None."""
        assert sql_repository.find_by_object_key("nope") is None


class TestDeleteById:
    """Tests for delete_by_id."""

    def test_delete_existing(self, sql_repository, source_entry):
        """Test deleting an entry removes it and reports True."""
        sql_repository.insert(source_entry)

        assert sql_repository.delete_by_id(source_entry.id) is True
        assert sql_repository.find_by_id(source_entry.id) is None

    def test_delete_missing(self, sql_repository):
        """Test deleting an unknown id reports False."""
        assert sql_repository.delete_by_id("missing-1") is False


class TestStoreFailures:
    """Backend errors surface as MetadataStoreError."""

    def test_find_by_id(self, broken_repository):
        with pytest.raises(MetadataStoreError) as exc_info:
            broken_repository.find_by_id("x")

        assert exc_info.value.code == "OperationalError"

    def test_find_by_object_key(self, broken_repository):
        with pytest.raises(MetadataStoreError):
            broken_repository.find_by_object_key("k1")

    def test_find_all(self, broken_repository):
        with pytest.raises(MetadataStoreError):
            broken_repository.find_all()

    def test_insert(self, broken_repository, source_entry):
        with pytest.raises(MetadataStoreError):
            broken_repository.insert(source_entry)

    def test_delete(self, broken_repository):
        with pytest.raises(MetadataStoreError):
            broken_repository.delete_by_id("x")
