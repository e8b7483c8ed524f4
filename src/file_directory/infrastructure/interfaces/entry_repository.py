"""Abstract interface for directory entry persistence."""

from abc import ABC, abstractmethod

from file_directory.domain.models import DirectoryEntry


class EntryRepository(ABC):
    """
    Stores directory entries keyed by id and object key.

    Every method raises MetadataStoreError when the backing store fails.
    Single-entry inserts and deletes are atomic; nothing else is.
    """

    @abstractmethod
    def insert(self, entry: DirectoryEntry) -> DirectoryEntry:
        """Persists a new entry and returns it."""

    @abstractmethod
    def find_by_id(self, entry_id: str) -> DirectoryEntry | None:
        """Returns the entry with the given id, or None."""

    @abstractmethod
    def find_by_object_key(
        self, object_key: str, bucket_name: str | None = None
    ) -> DirectoryEntry | None:
        """
        Returns the first entry whose object key matches.

        Args:
            object_key: The storage key to look up.
            bucket_name: Restricts the match to one bucket when given. The
                same key can live in several buckets after copies.
        """

    @abstractmethod
    def find_all(self) -> list[DirectoryEntry]:
        """Returns every entry."""

    @abstractmethod
    def delete_by_id(self, entry_id: str) -> bool:
        """Removes an entry. Returns True if a record was removed."""
