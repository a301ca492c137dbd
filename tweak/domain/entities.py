"""Domain entities and value objects.

Core domain models representing the business concepts of Tweak: content
hashes, staged entries, commits and the per-file diffs reconstructed from
them. These are pure Python dataclasses with no dependencies on storage.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

import blake3

HASH_ALGORITHMS: frozenset[str] = frozenset({"blake3", "sha1"})


@dataclass(frozen=True)
class ContentHash:
    """Validated hex digest identifying a stored object.

    Attributes:
        value: Lowercase hex digest (40 chars for sha1, 64 for blake3).

    Raises:
        ValueError: If value is not a well-formed digest.
    """

    value: str

    _HEX_PATTERN = re.compile(r"^(?:[a-f0-9]{40}|[a-f0-9]{64})$")

    def __post_init__(self) -> None:
        """Validate digest format."""
        if not isinstance(self.value, str) or not self._HEX_PATTERN.match(self.value):
            raise ValueError(
                f"Invalid content hash {self.value!r}: "
                "must be 40 or 64 lowercase hex chars"
            )

    @classmethod
    def compute(cls, data: bytes, algorithm: str = "blake3") -> ContentHash:
        """Compute the content hash of a byte sequence.

        Args:
            data: Bytes to hash.
            algorithm: "blake3" or "sha1".

        Returns:
            ContentHash of data.

        Raises:
            ValueError: If algorithm is not supported.
        """
        if algorithm == "blake3":
            return cls(blake3.blake3(data).hexdigest())
        if algorithm == "sha1":
            return cls(hashlib.sha1(data).hexdigest())
        supported = ", ".join(sorted(HASH_ALGORITHMS))
        raise ValueError(f"Unknown hash algorithm '{algorithm}'. Supported: {supported}")

    @staticmethod
    def is_valid(value: str) -> bool:
        """Check whether a string is a complete, well-formed digest."""
        return bool(ContentHash._HEX_PATTERN.match(value))

    def short(self) -> str:
        """Return the abbreviated form used in one-line output."""
        return self.value[:7]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StagingEntry:
    """A pending (path, content hash) pair in the staging index.

    Attributes:
        path: Repository-relative path in POSIX form.
        hash: Hash of the blob holding the file's content.
    """

    path: str
    hash: ContentHash

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("StagingEntry path cannot be empty")


@dataclass(frozen=True)
class Commit:
    """Immutable snapshot record.

    Attributes:
        timestamp: Creation time (timezone-aware, UTC).
        message: Commit message.
        files: Staged entries captured at commit time, in staging order.
        parent: Hash of the previous head, or None for the first commit.
    """

    timestamp: datetime
    message: str
    files: tuple[StagingEntry, ...] = ()
    parent: ContentHash | None = None

    def find_file(self, path: str) -> StagingEntry | None:
        """Return the first entry recorded for path, or None."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    @property
    def timestamp_str(self) -> str:
        """ISO-8601 representation of the timestamp."""
        return self.timestamp.isoformat()


@dataclass(frozen=True)
class CommitRecord:
    """A commit together with the hash it is stored under."""

    hash: ContentHash
    commit: Commit


class DiffTag(str, Enum):
    """Tag for one run of lines in an edit script."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffHunk:
    """A run of consecutive lines sharing one tag.

    Attributes:
        tag: Whether the lines were added, removed or kept.
        text: The literal text of the run, newlines included.
    """

    tag: DiffTag
    text: str


class FileStatus(str, Enum):
    """How a file in a commit relates to the parent commit."""

    FIRST_COMMIT = "first_commit"  # Commit has no parent
    NEW = "new"  # Path absent from the parent's file list
    MODIFIED = "modified"  # Content changed, hunks computed
    UNCHANGED = "unchanged"  # Same blob as the parent's entry
    BINARY = "binary"  # Content changed, but not line-diffable


@dataclass(frozen=True)
class FileDiff:
    """Comparison of one committed file against its parent version.

    Attributes:
        path: Repository-relative path.
        hash: Blob hash in the commit being shown.
        parent_hash: Blob hash of the parent's entry, if there is one.
        status: Classification of the change.
        hunks: Edit script (empty unless status is MODIFIED).
    """

    path: str
    hash: ContentHash
    status: FileStatus
    parent_hash: ContentHash | None = None
    hunks: tuple[DiffHunk, ...] = ()

    @property
    def has_changes(self) -> bool:
        """True if any hunk adds or removes lines."""
        return any(h.tag != DiffTag.UNCHANGED for h in self.hunks)


@dataclass(frozen=True)
class CommitDiff:
    """All per-file comparisons for one commit against its parent."""

    commit_hash: ContentHash
    commit: Commit
    files: list[FileDiff] = field(default_factory=list)

    @property
    def parent_hash(self) -> ContentHash | None:
        return self.commit.parent
