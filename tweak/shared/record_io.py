"""Record I/O utilities for the JSON forms of commits and the staging index.

This module handles serialization/deserialization of Commit records and
staging entries. Commit bytes are hashed to produce the commit's identity,
so encoding must be deterministic.
"""

import json
from datetime import UTC, datetime
from typing import Any

from tweak.domain.entities import Commit, ContentHash, StagingEntry


def _entry_to_dict(entry: StagingEntry) -> dict[str, str]:
    return {"path": entry.path, "hash": entry.hash.value}


def _entry_from_dict(data: Any) -> StagingEntry:
    """Parse one {"path", "hash"} object.

    Raises:
        ValueError: If the object is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"entry must be an object, got {type(data).__name__}")
    path = data.get("path")
    raw_hash = data.get("hash")
    if not isinstance(path, str) or not isinstance(raw_hash, str):
        raise ValueError(f"entry needs string 'path' and 'hash': {data!r}")
    return StagingEntry(path=path, hash=ContentHash(raw_hash))


def encode_commit(commit: Commit) -> bytes:
    """Serialize a commit to the bytes that are stored and hashed.

    Args:
        commit: Commit to serialize.

    Returns:
        Compact UTF-8 JSON with keys timestamp, message, files, parent.
    """
    data = {
        "timestamp": commit.timestamp_str,
        "message": commit.message,
        "files": [_entry_to_dict(e) for e in commit.files],
        "parent": commit.parent.value if commit.parent else None,
    }
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_commit(raw: bytes) -> Commit:
    """Parse stored bytes into a Commit.

    Args:
        raw: Bytes previously produced by encode_commit().

    Returns:
        Parsed Commit.

    Raises:
        ValueError: If the bytes are not a well-formed commit record.
    """
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid JSON in commit record: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Commit record must be a JSON object")

    try:
        timestamp = datetime.fromisoformat(data["timestamp"])
        message = data["message"]
        files = data["files"]
        parent = data["parent"]
    except KeyError as e:
        raise ValueError(f"Commit record missing field {e}") from e
    except TypeError as e:
        raise ValueError(f"Invalid commit timestamp: {e}") from e

    if not isinstance(message, str):
        raise ValueError("Commit message must be a string")
    if not isinstance(files, list):
        raise ValueError("Commit files must be a list")
    if parent is not None and not isinstance(parent, str):
        raise ValueError("Commit parent must be a hash string or null")
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)

    return Commit(
        timestamp=timestamp,
        message=message,
        files=tuple(_entry_from_dict(f) for f in files),
        parent=ContentHash(parent) if parent else None,
    )


def encode_index(entries: list[StagingEntry]) -> bytes:
    """Serialize staged entries.

    Args:
        entries: Entries in insertion order.

    Returns:
        UTF-8 JSON array with a trailing newline.
    """
    text = json.dumps([_entry_to_dict(e) for e in entries], indent=2, ensure_ascii=False)
    return (text + "\n").encode("utf-8")


def decode_index(raw: bytes) -> list[StagingEntry]:
    """Parse the staging index file.

    Args:
        raw: File contents. Empty content is read as an empty index.

    Returns:
        Entries in insertion order.

    Raises:
        ValueError: If the content is not a JSON array of entries.
    """
    if not raw.strip():
        return []
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid JSON in index: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"index must be a JSON array, got {type(data).__name__}")
    return [_entry_from_dict(item) for item in data]
