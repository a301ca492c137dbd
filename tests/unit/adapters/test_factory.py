"""Unit tests for adapter factories."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from tests.conftest import init_tweak_repo
from tweak.adapters.config.toml_config_provider import TomlConfigProvider
from tweak.adapters.factory import ConfigFactory, RepositoryFactory
from tweak.domain.config import CoreConfig, ObjectsConfig, TweakConfig


def test_config_factory_creates_toml_provider() -> None:
    assert isinstance(ConfigFactory().create_config_provider(), TomlConfigProvider)


def test_open_reads_project_config(tmp_path: Path) -> None:
    init_tweak_repo(tmp_path, hash_algorithm="sha1")
    repo = RepositoryFactory().open(tmp_path)
    assert len(repo.commit("m").value) == 40


def test_open_with_explicit_config(repo_root: Path) -> None:
    config = TweakConfig(
        objects=ObjectsConfig(hash_algorithm="sha1"),
        core=CoreConfig(locking=False),
    )
    repo = RepositoryFactory().open(repo_root, config)
    repo.commit("m")
    assert not (repo.tweak_dir / "lock").exists()


def test_clock_is_used_for_commits(repo_root: Path) -> None:
    fixed = datetime(2020, 2, 2, tzinfo=UTC)
    repo = RepositoryFactory(clock=lambda: fixed).open(repo_root)
    repo.commit("m")
    (record,) = repo.log()
    assert record.commit.timestamp == fixed


def test_relative_root_is_resolved(repo_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(repo_root.parent)
    repo = RepositoryFactory().open(Path(repo_root.name))
    assert repo.root == repo_root
