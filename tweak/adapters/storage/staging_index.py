"""JSON-file staging index adapter.

The index is a JSON array of {"path", "hash"} objects stored at
.tweak/index. Every mutation rewrites the whole file atomically.
"""

import logging
from pathlib import Path

from tweak.adapters.fs.local import LocalFileSystem
from tweak.domain.entities import StagingEntry
from tweak.domain.exceptions import CorruptIndexError
from tweak.ports.fs import FileSystem
from tweak.shared.record_io import decode_index, encode_index

logger = logging.getLogger(__name__)


class JsonStagingIndex:
    """Staging index persisted as a JSON array.

    Args:
        index_path: Path to the index file.
        dedupe_paths: If True, append() drops earlier entries for the same
            path before adding the new one (last write wins).
        fs: File system adapter (defaults to the local file system).
    """

    def __init__(
        self,
        index_path: Path,
        dedupe_paths: bool = False,
        fs: FileSystem | None = None,
    ) -> None:
        self.index_path = index_path
        self.dedupe_paths = dedupe_paths
        self._fs = fs or LocalFileSystem()

    def load(self) -> list[StagingEntry]:
        """Read staged entries in insertion order.

        A missing index file reads as empty.

        Raises:
            CorruptIndexError: If the file cannot be parsed.
        """
        try:
            raw = self._fs.read(self.index_path)
        except FileNotFoundError:
            return []
        try:
            return decode_index(raw)
        except ValueError as e:
            raise CorruptIndexError(str(e)) from e

    def append(self, entry: StagingEntry) -> None:
        """Add one entry to the end of the index.

        Args:
            entry: Entry to stage.

        Raises:
            CorruptIndexError: If the existing index cannot be parsed.
        """
        entries = self.load()
        if self.dedupe_paths:
            entries = [e for e in entries if e.path != entry.path]
        entries.append(entry)
        self._fs.write(self.index_path, encode_index(entries))
        logger.debug("Staged %s as %s (%d entries)", entry.path, entry.hash.short(), len(entries))

    def clear(self) -> None:
        """Reset the index to empty."""
        self._fs.write(self.index_path, encode_index([]))
        logger.debug("Cleared staging index")
