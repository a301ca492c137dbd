"""Storage port interfaces for repository state.

These protocols define the three pieces of persisted state: the
content-addressed object store, the staging index and the head pointer.
Implementations live in the adapters/ layer.
"""

from contextlib import AbstractContextManager
from typing import Protocol

from tweak.domain.entities import ContentHash, StagingEntry


class ObjectStore(Protocol):
    """Append-only, content-addressed blob storage."""

    def put(self, data: bytes) -> ContentHash:
        """Store bytes under their content hash.

        Writing identical content twice is safe and yields the same hash.

        Args:
            data: Object content.

        Returns:
            Hash the content is stored under.
        """
        ...

    def get(self, object_hash: ContentHash) -> bytes:
        """Retrieve stored bytes.

        Args:
            object_hash: Hash of the object.

        Returns:
            The exact bytes passed to put().

        Raises:
            ObjectNotFoundError: If no object has that hash.
        """
        ...

    def contains(self, object_hash: ContentHash) -> bool:
        """Check whether an object is stored."""
        ...

    def find(self, prefix: str) -> list[ContentHash]:
        """Find stored hashes starting with a hex prefix.

        Args:
            prefix: Lowercase hex prefix.

        Returns:
            Sorted matching hashes.
        """
        ...


class StagingIndex(Protocol):
    """Ordered list of pending (path, hash) entries."""

    def load(self) -> list[StagingEntry]:
        """Read staged entries in insertion order.

        Raises:
            CorruptIndexError: If the persisted form cannot be parsed.
        """
        ...

    def append(self, entry: StagingEntry) -> None:
        """Add one entry to the end of the index."""
        ...

    def clear(self) -> None:
        """Reset the index to empty."""
        ...


class HeadRef(Protocol):
    """Pointer to the most recent commit."""

    def read(self) -> ContentHash | None:
        """Return the head hash, or None if unset or unreadable."""
        ...

    def update(self, commit_hash: ContentHash) -> None:
        """Point head at a new commit."""
        ...


class RepositoryLock(Protocol):
    """Exclusive lock guarding index/head read-modify-write sequences."""

    def hold(self) -> AbstractContextManager[None]:
        """Return a context manager holding the lock for its duration."""
        ...
