from .entry_repository import SqlEntryRepository

__all__ = ["SqlEntryRepository"]
