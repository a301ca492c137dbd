"""HEAD file adapter.

HEAD holds the hash of the most recent commit as plain text. An empty file
means no commits have been made yet.
"""

import logging
from pathlib import Path

from tweak.adapters.fs.local import LocalFileSystem
from tweak.domain.entities import ContentHash
from tweak.ports.fs import FileSystem

logger = logging.getLogger(__name__)


class FileHeadRef:
    """Head pointer stored in a single text file.

    Args:
        head_path: Path to the HEAD file.
        fs: File system adapter (defaults to the local file system).
    """

    def __init__(self, head_path: Path, fs: FileSystem | None = None) -> None:
        self.head_path = head_path
        self._fs = fs or LocalFileSystem()

    def read(self) -> ContentHash | None:
        """Return the head hash, or None if unset or unreadable.

        Read and parse failures deliberately degrade to None: a repository
        with no commits is the normal state for the first command.
        """
        try:
            text = self._fs.read(self.head_path).decode("utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("HEAD unreadable, treating as empty: %s", e)
            return None
        if not text:
            return None
        try:
            return ContentHash(text)
        except ValueError:
            logger.warning("HEAD contains an invalid hash %r, treating as empty", text)
            return None

    def update(self, commit_hash: ContentHash) -> None:
        """Point head at a new commit."""
        self._fs.write(self.head_path, commit_hash.value.encode("utf-8"))
        logger.debug("HEAD -> %s", commit_hash.short())
