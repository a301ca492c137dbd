"""Parent-relative diff reconstruction.

For each file recorded in a commit, finds the same path in the parent
commit and compares the two blob contents line by line.
"""

import logging

from tweak.core.commit_graph import CommitGraph
from tweak.domain.entities import (
    Commit,
    CommitDiff,
    ContentHash,
    FileDiff,
    FileStatus,
    StagingEntry,
)
from tweak.ports.differ import LineDiffer
from tweak.ports.storage import ObjectStore

logger = logging.getLogger(__name__)


def _is_binary(content: bytes) -> bool:
    return b"\0" in content


def _decode(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


class DiffReconstructor:
    """Compares each file of a commit with its version in the parent.

    Args:
        graph: Commit graph used to load the commit and its parent.
        object_store: Store holding blob contents.
        differ: Line diff capability.
    """

    def __init__(
        self,
        graph: CommitGraph,
        object_store: ObjectStore,
        differ: LineDiffer,
    ) -> None:
        self._graph = graph
        self._store = object_store
        self._differ = differ

    def diff_against_parent(self, commit_hash: ContentHash) -> CommitDiff:
        """Build per-file comparisons for a commit.

        Every file's current blob is read first, so missing blobs surface
        even when no diff is computed. Without a parent, every file is
        FIRST_COMMIT. With a parent, the first parent entry with the same
        path is used; if there is none, the file is NEW.

        Args:
            commit_hash: Commit to show.

        Returns:
            CommitDiff with one FileDiff per entry, in commit order.

        Raises:
            CommitNotFoundError: If the commit or its parent cannot be loaded.
            ObjectNotFoundError: If a referenced blob is missing.
        """
        commit = self._graph.get_commit(commit_hash)
        parent = self._graph.get_commit(commit.parent) if commit.parent else None

        files = [self._diff_entry(entry, parent) for entry in commit.files]
        logger.debug("Reconstructed %d file diff(s) for %s", len(files), commit_hash.short())
        return CommitDiff(commit_hash=commit_hash, commit=commit, files=files)

    def _diff_entry(self, entry: StagingEntry, parent: Commit | None) -> FileDiff:
        content = self._store.get(entry.hash)

        if parent is None:
            return FileDiff(path=entry.path, hash=entry.hash, status=FileStatus.FIRST_COMMIT)

        previous = parent.find_file(entry.path)
        if previous is None:
            return FileDiff(path=entry.path, hash=entry.hash, status=FileStatus.NEW)

        if previous.hash == entry.hash:
            return FileDiff(
                path=entry.path,
                hash=entry.hash,
                parent_hash=previous.hash,
                status=FileStatus.UNCHANGED,
            )

        previous_content = self._store.get(previous.hash)
        if _is_binary(content) or _is_binary(previous_content):
            return FileDiff(
                path=entry.path,
                hash=entry.hash,
                parent_hash=previous.hash,
                status=FileStatus.BINARY,
            )

        hunks = self._differ.diff_lines(_decode(previous_content), _decode(content))
        return FileDiff(
            path=entry.path,
            hash=entry.hash,
            parent_hash=previous.hash,
            status=FileStatus.MODIFIED,
            hunks=tuple(hunks),
        )
