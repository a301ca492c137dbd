"""Line differ backed by difflib.

Implements the LineDiffer port with difflib.SequenceMatcher over lines that
keep their line endings, so hunk text concatenates back to the original.
"""

import difflib

from tweak.domain.entities import DiffHunk, DiffTag


class DifflibLineDiffer:
    """Compute line-level edit scripts with difflib.SequenceMatcher."""

    def diff_lines(self, old: str, new: str) -> list[DiffHunk]:
        """Compute the edit script transforming old into new.

        Args:
            old: Previous text.
            new: Current text.

        Returns:
            Hunks in document order. A replaced block yields its removed
            run before its added run.
        """
        old_lines = old.splitlines(keepends=True)
        new_lines = new.splitlines(keepends=True)
        matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

        hunks: list[DiffHunk] = []
        for op, i1, i2, j1, j2 in matcher.get_opcodes():
            if op == "equal":
                hunks.append(DiffHunk(DiffTag.UNCHANGED, "".join(old_lines[i1:i2])))
                continue
            if op in ("delete", "replace"):
                hunks.append(DiffHunk(DiffTag.REMOVED, "".join(old_lines[i1:i2])))
            if op in ("insert", "replace"):
                hunks.append(DiffHunk(DiffTag.ADDED, "".join(new_lines[j1:j2])))
        return hunks
