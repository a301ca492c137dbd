"""Filesystem-backed content-addressed object store.

Objects live flat under .tweak/objects/, one file per object, named by the
hex content hash. The store is append-only: there is no update or delete.
"""

import logging
import re
from pathlib import Path

from tweak.adapters.fs.local import LocalFileSystem
from tweak.domain.entities import ContentHash
from tweak.domain.exceptions import ObjectNotFoundError
from tweak.ports.fs import FileSystem

logger = logging.getLogger(__name__)

_HEX_PREFIX = re.compile(r"^[a-f0-9]+$")


class FileObjectStore:
    """Object store writing each object to objects/<hash>.

    Args:
        objects_dir: Directory holding object files.
        hash_algorithm: Digest used for new objects ("blake3" or "sha1").
        fs: File system adapter (defaults to the local file system).
    """

    def __init__(
        self,
        objects_dir: Path,
        hash_algorithm: str = "blake3",
        fs: FileSystem | None = None,
    ) -> None:
        self.objects_dir = objects_dir
        self.hash_algorithm = hash_algorithm
        self._fs = fs or LocalFileSystem()

    def _object_path(self, object_hash: ContentHash) -> Path:
        return self.objects_dir / object_hash.value

    def put(self, data: bytes) -> ContentHash:
        """Store bytes under their content hash.

        Existing objects are never rewritten; identical content always maps
        to the same file, so a duplicate put is a no-op.

        Args:
            data: Object content.

        Returns:
            Hash the content is stored under.
        """
        object_hash = ContentHash.compute(data, self.hash_algorithm)
        path = self._object_path(object_hash)
        if self._fs.exists(path):
            logger.debug("Object %s already stored", object_hash.short())
            return object_hash

        self._fs.write(path, data)
        logger.debug("Stored object %s (%d bytes)", object_hash.short(), len(data))
        return object_hash

    def get(self, object_hash: ContentHash) -> bytes:
        """Retrieve stored bytes.

        Args:
            object_hash: Hash of the object.

        Returns:
            The stored bytes.

        Raises:
            ObjectNotFoundError: If no object has that hash.
        """
        try:
            return self._fs.read(self._object_path(object_hash))
        except (FileNotFoundError, IsADirectoryError) as e:
            raise ObjectNotFoundError(object_hash.value) from e

    def contains(self, object_hash: ContentHash) -> bool:
        """Check whether an object is stored."""
        return self._fs.exists(self._object_path(object_hash))

    def find(self, prefix: str) -> list[ContentHash]:
        """Find stored hashes starting with a hex prefix.

        Args:
            prefix: Lowercase hex prefix.

        Returns:
            Sorted matching hashes (temporary files are skipped).
        """
        if not prefix or not _HEX_PREFIX.match(prefix):
            return []
        return [
            ContentHash(name)
            for name in self._fs.list_dir(self.objects_dir)
            if name.startswith(prefix) and ContentHash.is_valid(name)
        ]
