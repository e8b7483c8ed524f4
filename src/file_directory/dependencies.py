"""FastAPI dependency injection configuration."""

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from file_directory.config import AppConfig, load_config
from file_directory.domain import EntryFactory, FileOrchestrator
from file_directory.infrastructure import MinioObjectStorage, get_minio_client
from file_directory.infrastructure.interfaces import EntryRepository, ObjectStorage
from file_directory.logging import setup_logging
from file_directory.repositories import SqlEntryRepository

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the application configuration, loaded once."""
    return load_config()


@lru_cache
def _get_engine() -> Engine:
    config = get_config()
    engine = create_engine(config.database.url)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized", extra={"host": config.database.host})
    return engine


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(_get_engine()) as session:
        yield session


@lru_cache
def get_storage() -> ObjectStorage:
    """Returns the configured object storage client."""
    config = get_config()
    storage = MinioObjectStorage(get_minio_client(config.minio))
    storage.ensure_bucket_exists(config.minio.bucket_name)
    return storage


@lru_cache
def get_repository() -> EntryRepository:
    """Returns the configured directory entry repository."""
    return SqlEntryRepository(_session_factory)


def get_orchestrator() -> FileOrchestrator:
    """Returns an orchestrator bound to the configured stores."""
    return FileOrchestrator(
        storage=get_storage(),
        repository=get_repository(),
        default_bucket=get_config().minio.bucket_name,
        factory=EntryFactory(),
    )
