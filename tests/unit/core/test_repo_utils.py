"""Tests for repository discovery."""

from pathlib import Path

import pytest

from tweak.core.repo_utils import TWEAK_DIR_NAME, find_repo_root, find_tweak_root


def test_finds_root_from_root(repo_root: Path) -> None:
    assert find_tweak_root(repo_root) == repo_root


def test_finds_root_from_subdirectory(repo_root: Path) -> None:
    nested = repo_root / "a" / "b"
    nested.mkdir(parents=True)
    assert find_tweak_root(nested) == repo_root


def test_defaults_to_cwd(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(repo_root)
    assert find_tweak_root() == repo_root


def test_tweak_file_is_not_a_repository(tmp_path: Path) -> None:
    (tmp_path / TWEAK_DIR_NAME).write_text("not a directory")
    assert find_tweak_root(tmp_path) is None


def test_find_repo_root_returns_tweak_dir(repo_root: Path) -> None:
    assert find_repo_root(repo_root) == (repo_root, repo_root / TWEAK_DIR_NAME)


def test_find_repo_root_outside_repository(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="Not in a tweak repository"):
        find_repo_root(tmp_path)
