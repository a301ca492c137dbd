"""Init use case for creating a tweak repository.

This use case handles the creation of the .tweak/ directory with its
object store, HEAD, staging index and project config.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tweak.adapters.fs.local import LocalFileSystem
from tweak.core.repo_utils import TWEAK_DIR_NAME
from tweak.core.use_case_errors import format_error_message, log_use_case_error
from tweak.ports.fs import FileSystem
from tweak.shared.config_io import create_project_config
from tweak.shared.record_io import encode_index

logger = logging.getLogger(__name__)


@dataclass
class InitRequest:
    """Request to initialize a tweak repository.

    Attributes:
        repo_root: Absolute path to the directory where .tweak/ is created
        hash_algorithm: Digest pinned in the project config
    """

    repo_root: Path
    hash_algorithm: str = "blake3"


@dataclass
class InitResponse:
    """Response from init operation.

    Attributes:
        tweak_dir: Path to the .tweak/ directory (or None on failure).
        created: Names of files created by this run.
        already_initialized: True if HEAD or index existed before this run.
            Existing files are never overwritten.
        success: Whether initialization succeeded.
        error: Error message if initialization failed.
    """

    tweak_dir: Path | None
    created: list[str] = field(default_factory=list)
    already_initialized: bool = False
    success: bool = True
    error: str | None = None

    @classmethod
    def create_error(cls, message: str) -> "InitResponse":
        """Create an error response.

        Args:
            message: Error message describing what went wrong.

        Returns:
            InitResponse with success=False.
        """
        return cls(tweak_dir=None, success=False, error=message)


class InitUseCase:
    """Use case for initializing a tweak repository.

    Initialization is idempotent: missing pieces are created, existing
    HEAD, index and config files are left untouched.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs or LocalFileSystem()

    def execute(self, request: InitRequest) -> InitResponse:
        """Execute the init operation.

        Creates .tweak/ with:
        - objects/ (empty object store)
        - HEAD (empty: no commits yet)
        - index (empty JSON array)
        - config.toml (pins the hash algorithm)

        Error handling contract:
            - KeyboardInterrupt/SystemExit are re-raised (user wants to exit)
            - All other exceptions are caught and converted to error responses

        Args:
            request: Init request with repo root and options

        Returns:
            InitResponse describing what was created.
        """
        tweak_dir = request.repo_root / TWEAK_DIR_NAME

        try:
            self._fs.mkdir(tweak_dir / "objects")

            created: list[str] = []
            head_created = self._fs.create(tweak_dir / "HEAD", b"")
            index_created = self._fs.create(tweak_dir / "index", encode_index([]))
            if head_created:
                created.append("HEAD")
            if index_created:
                created.append("index")
            if create_project_config(tweak_dir / "config.toml", request.hash_algorithm):
                created.append("config.toml")

            already_initialized = not (head_created and index_created)
            if already_initialized:
                logger.info("Tweak already initialized at %s", tweak_dir)
            else:
                logger.info("Initialized empty tweak repository at %s", tweak_dir)

            return InitResponse(
                tweak_dir=tweak_dir,
                created=created,
                already_initialized=already_initialized,
            )
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception as e:
            log_use_case_error(e, "initialization")
            return InitResponse.create_error(format_error_message(e, "initialization"))
