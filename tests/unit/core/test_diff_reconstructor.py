"""Unit tests for DiffReconstructor."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from tests.conftest import stepping_clock
from tweak.adapters.diff.difflib_differ import DifflibLineDiffer
from tweak.adapters.storage.head import FileHeadRef
from tweak.adapters.storage.lock import FileLock
from tweak.adapters.storage.object_store import FileObjectStore
from tweak.adapters.storage.staging_index import JsonStagingIndex
from tweak.core.commit_graph import CommitGraph
from tweak.core.diff_reconstructor import DiffReconstructor
from tweak.domain.entities import ContentHash, DiffHunk, DiffTag, FileStatus, StagingEntry
from tweak.domain.exceptions import CommitNotFoundError, ObjectNotFoundError


class Workspace:
    """Store, index and graph over one temporary directory."""

    def __init__(self, root: Path) -> None:
        self.store = FileObjectStore(root / "objects")
        self.index = JsonStagingIndex(root / "index")
        self.graph = CommitGraph(
            self.store,
            self.index,
            FileHeadRef(root / "HEAD"),
            FileLock(root / "lock"),
            clock=stepping_clock(),
        )

    def stage(self, path: str, content: bytes) -> ContentHash:
        blob_hash = self.store.put(content)
        self.index.append(StagingEntry(path, blob_hash))
        return blob_hash

    def commit(self, files: dict[str, bytes], message: str = "m") -> ContentHash:
        for path, content in files.items():
            self.stage(path, content)
        return self.graph.create_commit(message)


@pytest.fixture
def ws(tmp_path: Path) -> Workspace:
    return Workspace(tmp_path)


@pytest.fixture
def reconstructor(ws: Workspace) -> DiffReconstructor:
    return DiffReconstructor(ws.graph, ws.store, DifflibLineDiffer())


def test_first_commit_files_never_diffed(ws: Workspace) -> None:
    differ = Mock(spec=DifflibLineDiffer)
    commit_hash = ws.commit({"a.txt": b"hello\n", "b.txt": b"x\n"})

    result = DiffReconstructor(ws.graph, ws.store, differ).diff_against_parent(commit_hash)

    assert [f.status for f in result.files] == [FileStatus.FIRST_COMMIT] * 2
    assert result.parent_hash is None
    differ.diff_lines.assert_not_called()


def test_modified_file_yields_hunks(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    c1 = ws.commit({"a.txt": b"hello\n"})
    c2 = ws.commit({"a.txt": b"hello\nworld\n"})

    result = reconstructor.diff_against_parent(c2)

    assert result.parent_hash == c1
    (file_diff,) = result.files
    assert file_diff.status == FileStatus.MODIFIED
    assert file_diff.parent_hash == ContentHash.compute(b"hello\n")
    assert file_diff.hunks == (
        DiffHunk(DiffTag.UNCHANGED, "hello\n"),
        DiffHunk(DiffTag.ADDED, "world\n"),
    )


def test_path_absent_from_parent_is_new(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    ws.commit({"a.txt": b"a\n"})
    c2 = ws.commit({"b.txt": b"b\n"})
    (file_diff,) = reconstructor.diff_against_parent(c2).files
    assert file_diff.status == FileStatus.NEW
    assert file_diff.hunks == ()


def test_same_blob_is_unchanged_without_diffing(ws: Workspace) -> None:
    differ = Mock(spec=DifflibLineDiffer)
    ws.commit({"a.txt": b"same\n"})
    c2 = ws.commit({"a.txt": b"same\n"})

    (file_diff,) = DiffReconstructor(ws.graph, ws.store, differ).diff_against_parent(c2).files

    assert file_diff.status == FileStatus.UNCHANGED
    differ.diff_lines.assert_not_called()


def test_only_files_in_commit_are_reported(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    """Files present only in the parent are not reported as deleted."""
    ws.commit({"a.txt": b"a\n", "b.txt": b"b\n"})
    c2 = ws.commit({"a.txt": b"a2\n"})
    assert [f.path for f in reconstructor.diff_against_parent(c2).files] == ["a.txt"]


def test_parent_lookup_uses_first_matching_entry(
    ws: Workspace, reconstructor: DiffReconstructor
) -> None:
    ws.commit({})
    ws.stage("a.txt", b"first\n")
    ws.stage("a.txt", b"second\n")
    ws.graph.create_commit("dup")
    c3 = ws.commit({"a.txt": b"first\nmore\n"})

    (file_diff,) = reconstructor.diff_against_parent(c3).files
    assert file_diff.parent_hash == ContentHash.compute(b"first\n")


def test_duplicate_entries_each_reported(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    ws.stage("a.txt", b"1\n")
    ws.stage("a.txt", b"2\n")
    commit_hash = ws.graph.create_commit("dup")
    files = reconstructor.diff_against_parent(commit_hash).files
    assert [f.path for f in files] == ["a.txt", "a.txt"]


def test_binary_content_not_line_diffed(ws: Workspace) -> None:
    differ = Mock(spec=DifflibLineDiffer)
    ws.commit({"img.bin": b"\x00\x01"})
    c2 = ws.commit({"img.bin": b"\x00\x02"})

    (file_diff,) = DiffReconstructor(ws.graph, ws.store, differ).diff_against_parent(c2).files

    assert file_diff.status == FileStatus.BINARY
    differ.diff_lines.assert_not_called()


def test_empty_commit_has_no_files(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    assert reconstructor.diff_against_parent(ws.commit({})).files == []


def test_missing_current_blob_raises_even_for_first_commit(
    ws: Workspace, reconstructor: DiffReconstructor
) -> None:
    blob_hash = ws.stage("a.txt", b"hello\n")
    commit_hash = ws.graph.create_commit("m")
    (ws.store.objects_dir / blob_hash.value).unlink()

    with pytest.raises(ObjectNotFoundError):
        reconstructor.diff_against_parent(commit_hash)


def test_missing_parent_blob_raises(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    old_blob = ws.stage("a.txt", b"old\n")
    ws.graph.create_commit("c1")
    c2 = ws.commit({"a.txt": b"new\n"})
    (ws.store.objects_dir / old_blob.value).unlink()

    with pytest.raises(ObjectNotFoundError):
        reconstructor.diff_against_parent(c2)


def test_missing_parent_commit_raises(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    c1 = ws.commit({"a.txt": b"a\n"})
    c2 = ws.commit({"a.txt": b"b\n"})
    (ws.store.objects_dir / c1.value).unlink()

    with pytest.raises(CommitNotFoundError):
        reconstructor.diff_against_parent(c2)


def test_non_commit_hash_raises(ws: Workspace, reconstructor: DiffReconstructor) -> None:
    with pytest.raises(CommitNotFoundError):
        reconstructor.diff_against_parent(ws.store.put(b"just a blob"))
