"""Repository discovery utilities.

Functions for finding the tweak repository root from any subdirectory.
"""

from pathlib import Path

TWEAK_DIR_NAME = ".tweak"


def find_tweak_root(start_path: Path | None = None) -> Path | None:
    """Find the tweak repository root by walking up directories.

    Searches for .tweak/ directory starting from start_path and walking
    up to filesystem root, similar to how git finds .git/.

    Args:
        start_path: Directory to start searching from. Defaults to CWD.

    Returns:
        Absolute path to repository root (directory containing .tweak/),
        or None if not found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while True:
        if (current / TWEAK_DIR_NAME).is_dir():
            return current

        parent = current.parent
        if parent == current:
            return None

        current = parent


def find_repo_root(start_path: Path | None = None) -> tuple[Path, Path]:
    """Find tweak repository root and .tweak directory.

    Args:
        start_path: Directory to start searching from. Defaults to CWD.

    Returns:
        Tuple of (repo_root, tweak_dir) where:
        - repo_root: Absolute path to repository root
        - tweak_dir: Absolute path to .tweak/ directory

    Raises:
        RuntimeError: If not in a tweak repository
    """
    repo_root = find_tweak_root(start_path)
    if repo_root:
        return repo_root, repo_root / TWEAK_DIR_NAME

    raise RuntimeError(
        "Not in a tweak repository (or any parent directory)\n"
        "Run 'tweak init' from your project root first"
    )
