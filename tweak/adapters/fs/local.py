"""Local file system adapter.

Implements the FileSystem port using the standard library pathlib.
This is the default adapter for file system operations.
"""

import os
import tempfile
from pathlib import Path


class LocalFileSystem:
    """Local file system implementation using pathlib.

    This adapter implements the FileSystem port protocol for standard
    local file system operations. All paths should be absolute.
    """

    def read(self, path: Path) -> bytes:
        """Read file contents.

        Args:
            path: Absolute path to file.

        Returns:
            File contents as bytes.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        return path.read_bytes()

    def write(self, path: Path, content: bytes) -> None:
        """Write content to file atomically.

        Content goes to a temporary file in the same directory which then
        replaces the destination, so a crash never leaves a partial file.

        Args:
            path: Absolute path to file.
            content: Content to write.

        Raises:
            OSError: If write fails.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def create(self, path: Path, content: bytes) -> bool:
        """Create a file only if it does not exist yet.

        Args:
            path: Absolute path to file.
            content: Initial content.

        Returns:
            True if the file was created, False if it already existed.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with path.open("xb") as f:
                f.write(content)
        except FileExistsError:
            return False
        return True

    def exists(self, path: Path) -> bool:
        """Check if path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        return path.exists()

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory.

        Args:
            path: Directory path to create.
            parents: Create parent directories if needed.
        """
        path.mkdir(parents=parents, exist_ok=True)

    def list_dir(self, path: Path) -> list[str]:
        """List entry names in a directory, sorted for determinism.

        Args:
            path: Directory to list.

        Returns:
            Sorted entry names, or an empty list if the directory is missing.
        """
        if not path.is_dir():
            return []
        return sorted(p.name for p in path.iterdir())
