"""CLI error handling with actionable hints.

Provides consistent error formatting and common error factory functions
for all tweak CLI commands.
"""

from typing import NoReturn

import click


class TweakCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Provides consistent error formatting across all tweak commands with
    optional hints that guide users toward resolving the issue.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise TweakCliError(
            "Not in a tweak repository",
            hint="Run 'tweak init' in your project root to initialize one"
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present.

        Returns:
            Formatted error message, with hint on a new line if provided.
        """
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def repo_not_found_error() -> NoReturn:
    """Raise error when not in a tweak repository.

    Raises:
        TweakCliError: Always raises with repo initialization hint.
    """
    raise TweakCliError(
        "Not in a tweak repository",
        hint="Run 'tweak init' in your project root to initialize one",
    )
