"""Unit tests for the repository lock."""

import fcntl
import threading
from contextlib import AbstractContextManager
from pathlib import Path

import pytest

from tweak.adapters.storage.lock import FileLock


def test_hold_creates_lock_file(tmp_path: Path) -> None:
    lock = FileLock(tmp_path / ".tweak" / "lock")
    with lock.hold():
        assert lock.lock_path.exists()


def test_lock_is_exclusive_while_held(tmp_path: Path) -> None:
    lock = FileLock(tmp_path / "lock")
    with lock.hold():
        with open(lock.lock_path, "a+") as other:
            try:
                fcntl.flock(other.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                acquired = True
            except BlockingIOError:
                acquired = False
    assert not acquired


def test_lock_released_after_block(tmp_path: Path) -> None:
    lock = FileLock(tmp_path / "lock")
    with lock.hold():
        pass
    with open(lock.lock_path, "a+") as other:
        fcntl.flock(other.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        fcntl.flock(other.fileno(), fcntl.LOCK_UN)


def test_lock_released_on_exception(tmp_path: Path) -> None:
    lock = FileLock(tmp_path / "lock")
    with pytest.raises(RuntimeError), lock.hold():
        raise RuntimeError("boom")
    with lock.hold():
        pass


def test_disabled_lock_is_noop(tmp_path: Path) -> None:
    lock = FileLock(tmp_path / "lock", enabled=False)
    with lock.hold():
        pass
    assert not lock.lock_path.exists()


def test_serializes_threads(tmp_path: Path) -> None:
    """Critical sections guarded by separate lock handles never overlap."""
    lock_path = tmp_path / "lock"
    active = []
    overlaps = []

    def worker() -> None:
        for _ in range(20):
            with FileLock(lock_path).hold():
                active.append(1)
                if len(active) > 1:
                    overlaps.append(1)
                active.pop()

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert overlaps == []


@pytest.mark.parametrize("enabled", [True, False])
def test_hold_returns_context_manager(tmp_path: Path, enabled: bool) -> None:
    assert isinstance(FileLock(tmp_path / "lock", enabled=enabled).hold(), AbstractContextManager)
