"""Repository facade.

Owns the handle to one .tweak directory and routes every state transition
(add, commit) and query (log, show) through the object store, staging
index, commit graph and diff reconstructor.
"""

import logging
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

from tweak.core.commit_graph import CommitGraph
from tweak.core.diff_reconstructor import DiffReconstructor
from tweak.core.repo_utils import TWEAK_DIR_NAME
from tweak.domain.entities import CommitDiff, CommitRecord, ContentHash, StagingEntry
from tweak.domain.exceptions import (
    CommitNotFoundError,
    PathNotFoundError,
    PathNotInRepositoryError,
)
from tweak.ports.fs import FileSystem
from tweak.ports.storage import ObjectStore, RepositoryLock, StagingIndex

logger = logging.getLogger(__name__)

MIN_ABBREV_LENGTH = 4


class Repository:
    """A tweak repository rooted at a working directory.

    Args:
        root: Repository root (the directory containing .tweak/).
        object_store: Content-addressed store for blobs and commits.
        index: Staging index.
        graph: Commit graph over the same store and index.
        diffs: Diff reconstructor over the same graph and store.
        lock: Lock guarding index updates.
        fs: File system adapter used to read working files.
    """

    def __init__(
        self,
        root: Path,
        *,
        object_store: ObjectStore,
        index: StagingIndex,
        graph: CommitGraph,
        diffs: DiffReconstructor,
        lock: RepositoryLock,
        fs: FileSystem,
    ) -> None:
        self.root = root
        self._store = object_store
        self._index = index
        self._graph = graph
        self._diffs = diffs
        self._lock = lock
        self._fs = fs

    @property
    def tweak_dir(self) -> Path:
        return self.root / TWEAK_DIR_NAME

    def _locate(self, path: Path) -> tuple[Path, str]:
        """Resolve a working-tree path to its location and repository-relative form.

        Directory components are resolved, the final component is not: a
        symlinked file inside the working tree is staged under its own path
        with the content of its target, wherever the target lives.

        Returns:
            Tuple of (absolute location, repository-relative POSIX path).

        Raises:
            PathNotInRepositoryError: If path is outside the repository.
            PathNotFoundError: If path is not an existing regular file.
        """
        absolute = path.absolute()
        location = absolute.parent.resolve() / absolute.name
        try:
            relative = location.relative_to(self.root)
        except ValueError:
            raise PathNotInRepositoryError(
                f"Path '{path}' is not within repository {self.root}",
                hint="Specify a path relative to or within the repository root",
            ) from None

        if relative.parts and relative.parts[0] == TWEAK_DIR_NAME:
            raise PathNotInRepositoryError(
                f"Path '{path}' is inside the .tweak directory",
                hint="Only working-tree files can be staged",
            )
        if not location.is_file():
            raise PathNotFoundError(
                f"Path '{path}' did not match any file",
                hint="Directories are not staged; add the files inside them",
            )
        return location, relative.as_posix()

    def add(self, path: Path) -> StagingEntry:
        """Stage one file.

        The blob is written before the index entry that references it.

        Args:
            path: File to stage (absolute or relative to the CWD).

        Returns:
            The entry appended to the index.
        """
        location, relative = self._locate(path)
        content = self._fs.read(location)
        blob_hash = self._store.put(content)
        entry = StagingEntry(path=relative, hash=blob_hash)
        with self._lock.hold():
            self._index.append(entry)
        logger.info("Added %s (%s)", relative, blob_hash.short())
        return entry

    def staged(self) -> list[StagingEntry]:
        """Return the pending entries in staging order."""
        return self._index.load()

    def head(self) -> ContentHash | None:
        """Return the newest commit hash, or None before the first commit."""
        return self._graph.current_head()

    def commit(self, message: str) -> ContentHash:
        """Create a commit from the staging index.

        Args:
            message: Commit message.

        Returns:
            Hash of the new commit (now HEAD).
        """
        return self._graph.create_commit(message)

    def log(self, max_count: int | None = None) -> Iterator[CommitRecord]:
        """Iterate history newest first.

        Args:
            max_count: Stop after this many commits (None for all).

        Raises:
            CommitNotFoundError: If a commit in the chain is missing or corrupt.
        """
        history = self._graph.walk_history()
        if max_count is None:
            return history
        return islice(history, max_count)

    def resolve_commit(self, ref: str) -> ContentHash:
        """Turn a full or abbreviated hash into a stored object hash.

        A digest-shaped ref that is not stored is retried as a prefix, so a
        40-char abbreviation works in a repository of 64-char hashes.

        Args:
            ref: Full hash, or a unique hex prefix of at least 4 chars.

        Returns:
            Matching hash. Whether it names a commit is checked on load.

        Raises:
            CommitNotFoundError: If ref is malformed, unknown or ambiguous.
        """
        ref = ref.strip().lower()
        if ContentHash.is_valid(ref) and self._store.contains(ContentHash(ref)):
            return ContentHash(ref)
        if len(ref) < MIN_ABBREV_LENGTH:
            raise CommitNotFoundError(ref, f"abbreviations need at least {MIN_ABBREV_LENGTH} chars")

        matches = self._store.find(ref)
        if not matches:
            raise CommitNotFoundError(ref)
        if len(matches) > 1:
            raise CommitNotFoundError(ref, f"ambiguous, matches {len(matches)} objects")
        return matches[0]

    def show(self, ref: str) -> CommitDiff:
        """Compare every file of a commit with its parent version.

        Args:
            ref: Full or abbreviated commit hash.

        Raises:
            CommitNotFoundError: If the commit or its parent cannot be loaded.
            ObjectNotFoundError: If a referenced blob is missing.
        """
        return self._diffs.diff_against_parent(self.resolve_commit(ref))
