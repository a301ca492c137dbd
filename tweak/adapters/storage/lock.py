"""Exclusive repository lock.

Serializes the read-modify-write sequences on the index and HEAD across
processes with an advisory flock on .tweak/lock.
"""

import fcntl
import logging
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext
from pathlib import Path

logger = logging.getLogger(__name__)


class FileLock:
    """Advisory exclusive lock on a file.

    Args:
        lock_path: File to lock (created if missing).
        enabled: If False, hold() is a no-op.
    """

    def __init__(self, lock_path: Path, enabled: bool = True) -> None:
        self.lock_path = lock_path
        self.enabled = enabled

    def hold(self) -> AbstractContextManager[None]:
        """Return a context manager holding the lock for its duration."""
        if not self.enabled:
            return nullcontext()
        return self._locked()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.lock_path, "a+") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            logger.debug("Acquired lock %s", self.lock_path)
            try:
                yield
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
                logger.debug("Released lock %s", self.lock_path)
