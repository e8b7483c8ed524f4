from file_directory.infrastructure.interfaces.entry_repository import EntryRepository
from file_directory.infrastructure.interfaces.storage import ObjectStorage

__all__ = [
    "ObjectStorage",
    "EntryRepository",
]
