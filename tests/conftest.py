"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from tweak.adapters.factory import RepositoryFactory
from tweak.core.init_usecase import InitRequest, InitUseCase
from tweak.core.repository import Repository

# ============================================================================
# Global Config Isolation
# ============================================================================
# The config provider reads $XDG_CONFIG_HOME/tweak/config.toml. Point it at a
# per-test directory so a developer's own global config never leaks in.


@pytest.fixture(autouse=True)
def isolate_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the global config location into the test's tmp_path."""
    xdg_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_home))
    return xdg_home


# ============================================================================
# Repository Helpers
# ============================================================================


def create_test_files(path: Path, files: dict[str, str | bytes]) -> None:
    """Create multiple files in a directory.

    Args:
        path: Base directory for file creation.
        files: Mapping of relative file paths to file contents.
               Parent directories are created automatically.
    """
    for rel_path, content in files.items():
        file_path = path / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            file_path.write_bytes(content)
        else:
            file_path.write_text(content)


def init_tweak_repo(path: Path, hash_algorithm: str = "blake3") -> Path:
    """Initialize a tweak repository at path.

    Returns:
        Path to the created .tweak directory.

    Raises:
        AssertionError: If initialization fails.
    """
    path.mkdir(parents=True, exist_ok=True)
    response = InitUseCase().execute(InitRequest(repo_root=path, hash_algorithm=hash_algorithm))
    assert response.success, response.error
    return response.tweak_dir


def stepping_clock(
    start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
) -> Callable[[], datetime]:
    """Build a clock that advances one second per call."""
    state = {"now": start - timedelta(seconds=1)}

    def clock() -> datetime:
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return clock


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Provide an initialized, empty tweak repository directory."""
    root = tmp_path / "project"
    init_tweak_repo(root)
    return root.resolve()


@pytest.fixture
def repo(repo_root: Path) -> Repository:
    """Provide a Repository opened on repo_root with a deterministic clock."""
    return RepositoryFactory(clock=stepping_clock()).open(repo_root)


@pytest.fixture
def in_repo(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Change the working directory into repo_root for CLI tests."""
    monkeypatch.chdir(repo_root)
    yield repo_root
