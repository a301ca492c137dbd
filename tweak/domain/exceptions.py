"""Domain exceptions for Tweak repository logic.

These exceptions represent repository rule violations and corruption.
They should be caught at the application boundary (CLI) and converted
to appropriate user-facing error messages.
"""


class TweakDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ObjectNotFoundError(TweakDomainError):
    """Raised when a hash has no corresponding stored object."""

    def __init__(self, object_hash: str) -> None:
        super().__init__(
            f"Object not found: {object_hash}",
            hint="The object store is missing data referenced by history",
        )
        self.object_hash = object_hash


class CommitNotFoundError(TweakDomainError):
    """Raised when a hash does not resolve to a readable, parseable commit."""

    def __init__(self, commit_ref: str, reason: str | None = None) -> None:
        message = f"Commit not found: {commit_ref}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, hint="Run 'tweak log' to list valid commit hashes")
        self.commit_ref = commit_ref


class CorruptIndexError(TweakDomainError):
    """Raised when the staging index file cannot be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"Staging index is corrupt: {detail}",
            hint="Inspect or reset .tweak/index (an empty index is '[]')",
        )


class PathNotInRepositoryError(TweakDomainError):
    """Raised when a path is outside the repository boundaries."""

    pass


class PathNotFoundError(TweakDomainError):
    """Raised when a path to stage does not name an existing regular file."""

    pass
