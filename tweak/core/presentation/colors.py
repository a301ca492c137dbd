"""Centralized color definitions for all Tweak output.

Provides a consistent color scheme across CLI commands using click styles.
"""

from typing import Literal

import click

# Type aliases for color values
ClickColor = Literal[
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white", "bright_black"
]


class TweakColors:
    """Centralized color palette for consistent output across Tweak."""

    # === Diff Colors ===
    ADDED_FG: ClickColor = "green"
    REMOVED_FG: ClickColor = "red"
    UNCHANGED_FG: ClickColor = "bright_black"

    # === Metadata Colors ===
    HASH_FG: ClickColor = "yellow"
    PATH_FG: ClickColor = "magenta"

    # === Status Message Colors ===
    SUCCESS_FG: ClickColor = "green"
    WARNING_FG: ClickColor = "yellow"

    @staticmethod
    def click_added(text: str) -> str:
        """Style added diff text."""
        return click.style(text, fg=TweakColors.ADDED_FG)

    @staticmethod
    def click_removed(text: str) -> str:
        """Style removed diff text."""
        return click.style(text, fg=TweakColors.REMOVED_FG)

    @staticmethod
    def click_unchanged(text: str) -> str:
        """Style unchanged diff text (dimmed)."""
        return click.style(text, fg=TweakColors.UNCHANGED_FG)

    @staticmethod
    def click_hash(text: str) -> str:
        """Style a commit or object hash."""
        return click.style(text, fg=TweakColors.HASH_FG)

    @staticmethod
    def click_path(text: str, bold: bool = True) -> str:
        """Style a file path."""
        return click.style(text, fg=TweakColors.PATH_FG, bold=bold)


def resolve_color_mode(color_scheme: str) -> bool | None:
    """Map a display.color_scheme value to click.echo's color argument.

    Args:
        color_scheme: "auto", "always" or "never".

    Returns:
        True to force color, False to strip it, None to let click detect a TTY.
    """
    if color_scheme == "always":
        return True
    if color_scheme == "never":
        return False
    return None
