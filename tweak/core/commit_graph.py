"""Commit graph construction and traversal.

Commits form a singly-linked list through their parent hash, with HEAD
naming the newest one. The graph only grows: no operation removes or
rewrites a stored commit.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import UTC, datetime

from tweak.domain.entities import Commit, CommitRecord, ContentHash
from tweak.domain.exceptions import CommitNotFoundError, ObjectNotFoundError
from tweak.ports.storage import HeadRef, ObjectStore, RepositoryLock, StagingIndex
from tweak.shared.record_io import decode_commit, encode_commit

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CommitGraph:
    """Builds commits from the staging index and walks history from HEAD.

    Args:
        object_store: Store holding blobs and commit records.
        index: Staging index consumed by create_commit().
        head: Head pointer.
        lock: Lock held across the whole commit sequence.
        clock: Source of commit timestamps.
    """

    def __init__(
        self,
        object_store: ObjectStore,
        index: StagingIndex,
        head: HeadRef,
        lock: RepositoryLock,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._store = object_store
        self._index = index
        self._head = head
        self._lock = lock
        self._clock = clock

    def current_head(self) -> ContentHash | None:
        """Return the head commit hash, or None before the first commit."""
        return self._head.read()

    def create_commit(self, message: str) -> ContentHash:
        """Snapshot the staging index into a new commit and advance HEAD.

        Steps run in a fixed order: snapshot index, build record, store
        object, update head, clear index. A failure before the store step
        leaves the repository untouched; a failure between store and head
        update leaves only an unreferenced commit object.

        Args:
            message: Commit message.

        Returns:
            Hash of the new commit.

        Raises:
            CorruptIndexError: If the staging index cannot be parsed.
        """
        with self._lock.hold():
            files = tuple(self._index.load())
            parent = self.current_head()
            commit = Commit(
                timestamp=self._clock(),
                message=message,
                files=files,
                parent=parent,
            )

            commit_hash = self._store.put(encode_commit(commit))
            self._head.update(commit_hash)
            self._index.clear()

        logger.info(
            "Created commit %s with %d file(s), parent %s",
            commit_hash.short(),
            len(files),
            parent.short() if parent else "none",
        )
        return commit_hash

    def get_commit(self, commit_hash: ContentHash) -> Commit:
        """Load and parse a commit.

        Args:
            commit_hash: Hash of the commit.

        Returns:
            Parsed commit.

        Raises:
            CommitNotFoundError: If the object is missing or is not a
                parseable commit record.
        """
        try:
            raw = self._store.get(commit_hash)
        except ObjectNotFoundError as e:
            raise CommitNotFoundError(commit_hash.value, "object missing") from e

        try:
            return decode_commit(raw)
        except ValueError as e:
            logger.debug("Object %s is not a commit: %s", commit_hash.short(), e)
            raise CommitNotFoundError(commit_hash.value, "not a valid commit record") from e

    def walk_history(self) -> Iterator[CommitRecord]:
        """Yield commits from HEAD back to the root, newest first.

        Each call starts a fresh walk from the current head. A broken link
        anywhere in the chain raises instead of truncating history.

        Yields:
            CommitRecord for each commit in the chain.

        Raises:
            CommitNotFoundError: If any commit in the chain is missing or corrupt.
        """
        commit_hash = self.current_head()
        while commit_hash is not None:
            commit = self.get_commit(commit_hash)
            yield CommitRecord(hash=commit_hash, commit=commit)
            commit_hash = commit.parent
