"""Text rendering of commit history for 'tweak log'."""

from tweak.core.presentation.colors import TweakColors
from tweak.domain.entities import CommitRecord

SEPARATOR = "-" * 37


def render_log_entry(record: CommitRecord) -> str:
    """Render one commit as a separator plus hash, date and message lines."""
    commit = record.commit
    return (
        f"{SEPARATOR}\n"
        f"Commit: {TweakColors.click_hash(record.hash.value)}\n"
        f"Date: {commit.timestamp_str}\n"
        f"Message: {commit.message}\n"
    )


def render_oneline(record: CommitRecord) -> str:
    """Render one commit as '<short hash> <first message line>'."""
    lines = record.commit.message.splitlines()
    summary = lines[0] if lines else ""
    return f"{TweakColors.click_hash(record.hash.short())} {summary}\n"
