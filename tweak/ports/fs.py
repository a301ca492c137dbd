"""File System port interface.

Defines abstract interface for file system operations.
Enables testing and potential alternative storage backends.
"""

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Protocol for file system operations."""

    def read(self, path: Path) -> bytes:
        """Read file contents.

        Args:
            path: Absolute path to file.

        Returns:
            File contents as bytes.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        ...

    def write(self, path: Path, content: bytes) -> None:
        """Write content to file, replacing it atomically.

        Readers see either the old or the new content, never a partial write.

        Args:
            path: Absolute path to file.
            content: Content to write.

        Raises:
            OSError: If write fails.
        """
        ...

    def create(self, path: Path, content: bytes) -> bool:
        """Create a file only if it does not exist yet.

        Args:
            path: Absolute path to file.
            content: Initial content.

        Returns:
            True if the file was created, False if it already existed.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory.

        Args:
            path: Directory path to create.
            parents: Create parent directories if needed.
        """
        ...

    def list_dir(self, path: Path) -> list[str]:
        """List entry names in a directory, sorted.

        Args:
            path: Directory to list.

        Returns:
            Sorted entry names, or an empty list if the directory is missing.
        """
        ...
