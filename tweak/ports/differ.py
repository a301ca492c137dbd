"""Line diff port.

The line-level diff algorithm is an external capability: given two texts,
produce an edit script of tagged runs.
"""

from typing import Protocol

from tweak.domain.entities import DiffHunk


class LineDiffer(Protocol):
    """Protocol for computing an edit script between two texts."""

    def diff_lines(self, old: str, new: str) -> list[DiffHunk]:
        """Compute the edit script transforming old into new.

        Args:
            old: Previous text.
            new: Current text.

        Returns:
            Hunks in document order. Concatenating the text of all
            unchanged and removed hunks yields old; unchanged and added
            hunks yield new.
        """
        ...
