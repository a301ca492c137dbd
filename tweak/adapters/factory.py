"""Factory classes for repository and adapter instantiation.

This module centralizes the wiring of the filesystem adapters into the
core components, keeping the CLI layer free from direct adapter imports.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tweak.core.repository import Repository
    from tweak.domain.config import TweakConfig
    from tweak.ports.config import ConfigProvider


class ConfigFactory:
    """Factory for configuration-related components."""

    def create_config_provider(self) -> ConfigProvider:
        """Create the config provider.

        Returns:
            TomlConfigProvider instance.
        """
        from tweak.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class RepositoryFactory:
    """Factory for opening a repository with all of its adapters.

    Args:
        clock: Optional timestamp source for new commits.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock

    def open(self, repo_root: Path, config: TweakConfig | None = None) -> Repository:
        """Build a Repository for an initialized .tweak directory.

        Args:
            repo_root: Directory containing .tweak/.
            config: Loaded configuration. Loaded from repo_root if omitted.

        Returns:
            Repository wired to filesystem-backed storage.
        """
        from tweak.adapters.diff.difflib_differ import DifflibLineDiffer
        from tweak.adapters.fs.local import LocalFileSystem
        from tweak.adapters.storage.head import FileHeadRef
        from tweak.adapters.storage.lock import FileLock
        from tweak.adapters.storage.object_store import FileObjectStore
        from tweak.adapters.storage.staging_index import JsonStagingIndex
        from tweak.core.commit_graph import CommitGraph
        from tweak.core.diff_reconstructor import DiffReconstructor
        from tweak.core.repo_utils import TWEAK_DIR_NAME
        from tweak.core.repository import Repository

        repo_root = repo_root.resolve()
        tweak_dir = repo_root / TWEAK_DIR_NAME
        if config is None:
            config = ConfigFactory().create_config_provider().load(tweak_dir)

        fs = LocalFileSystem()
        store = FileObjectStore(
            tweak_dir / "objects",
            hash_algorithm=config.objects.hash_algorithm,
            fs=fs,
        )
        index = JsonStagingIndex(
            tweak_dir / "index",
            dedupe_paths=config.index.dedupe_paths,
            fs=fs,
        )
        head = FileHeadRef(tweak_dir / "HEAD", fs=fs)
        lock = FileLock(tweak_dir / "lock", enabled=config.core.locking)

        if self._clock is not None:
            graph = CommitGraph(store, index, head, lock, clock=self._clock)
        else:
            graph = CommitGraph(store, index, head, lock)
        diffs = DiffReconstructor(graph, store, DifflibLineDiffer())

        return Repository(
            repo_root,
            object_store=store,
            index=index,
            graph=graph,
            diffs=diffs,
            lock=lock,
            fs=fs,
        )
