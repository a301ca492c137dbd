"""Text rendering of commit diffs for 'tweak show'."""

from tweak.core.presentation.colors import TweakColors
from tweak.domain.entities import CommitDiff, DiffHunk, DiffTag, FileDiff, FileStatus

ADDED_PREFIX = "++"
REMOVED_PREFIX = "--"

_STATUS_MESSAGES = {
    FileStatus.FIRST_COMMIT: "This is the first commit",
    FileStatus.NEW: "This is a new file in this commit",
    FileStatus.UNCHANGED: "No changes",
    FileStatus.BINARY: "Binary file changed",
}


def _terminated(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def render_hunk(hunk: DiffHunk) -> str:
    """Render one hunk, prefixing every added or removed line."""
    if hunk.tag == DiffTag.UNCHANGED:
        return TweakColors.click_unchanged(_terminated(hunk.text))

    prefix = ADDED_PREFIX if hunk.tag == DiffTag.ADDED else REMOVED_PREFIX
    style = TweakColors.click_added if hunk.tag == DiffTag.ADDED else TweakColors.click_removed
    lines = _terminated(hunk.text).splitlines(keepends=True)
    return "".join(style(prefix + line) for line in lines)


def render_file_diff(file_diff: FileDiff) -> str:
    """Render the header and body for one file.

    Args:
        file_diff: Comparison to render.

    Returns:
        Text ending with a newline.
    """
    header = f"File : {TweakColors.click_path(file_diff.path)}\n"
    message = _STATUS_MESSAGES.get(file_diff.status)
    if message is not None:
        return header + message + "\n"

    body = "".join(render_hunk(h) for h in file_diff.hunks)
    return header + "\nDiff:\n" + body


def render_commit_diff(commit_diff: CommitDiff) -> str:
    """Render every file of a commit, in commit order."""
    if not commit_diff.files:
        return "No files in this commit\n"
    return "".join(render_file_diff(f) for f in commit_diff.files)
