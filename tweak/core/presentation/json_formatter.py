"""JSON serialization for log and show output.

Emits the data contract behind the rendered text: commit metadata and
tagged diff hunks, without any color codes.
"""

import json
from typing import Any

from tweak.domain.entities import CommitDiff, CommitRecord, FileDiff


class JsonFormatter:
    """Serializes commits and diffs to JSON for scripting."""

    @staticmethod
    def serialize_commit(record: CommitRecord) -> dict[str, Any]:
        """Serialize a commit with its hash."""
        commit = record.commit
        return {
            "hash": record.hash.value,
            "timestamp": commit.timestamp_str,
            "message": commit.message,
            "parent": commit.parent.value if commit.parent else None,
            "files": [{"path": e.path, "hash": e.hash.value} for e in commit.files],
        }

    @staticmethod
    def serialize_file_diff(file_diff: FileDiff) -> dict[str, Any]:
        """Serialize one file comparison with its tagged hunks."""
        return {
            "path": file_diff.path,
            "status": file_diff.status.value,
            "hash": file_diff.hash.value,
            "parent_hash": file_diff.parent_hash.value if file_diff.parent_hash else None,
            "has_changes": file_diff.has_changes,
            "hunks": [{"tag": h.tag.value, "text": h.text} for h in file_diff.hunks],
        }

    def format_log(self, records: list[CommitRecord]) -> str:
        """Format history as a JSON array, newest first."""
        return json.dumps([self.serialize_commit(r) for r in records], indent=2, ensure_ascii=False)

    def format_commit_diff(self, commit_diff: CommitDiff) -> str:
        """Format a commit diff as a JSON object."""
        data = {
            "commit": commit_diff.commit_hash.value,
            "parent": commit_diff.parent_hash.value if commit_diff.parent_hash else None,
            "message": commit_diff.commit.message,
            "timestamp": commit_diff.commit.timestamp_str,
            "files": [self.serialize_file_diff(f) for f in commit_diff.files],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
