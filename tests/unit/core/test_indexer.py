"""Unit tests for DirectoryIndexer.

Uses an in-memory listing primitive so concurrent fan-in and failure
classification can be exercised without touching the filesystem.
"""

import asyncio

import pytest
from rmup.core.indexer import DirectoryIndexer
from rmup.core.models import DirStatus, Index
from rmup.core.options import RunOptions
from rmup.utils.fs import DirEntryInfo

ROOT = "/r"


def _dirs(*names: str) -> list[DirEntryInfo]:
    return [DirEntryInfo(name=n, is_dir=True) for n in names]


def _files(*names: str) -> list[DirEntryInfo]:
    return [DirEntryInfo(name=n, is_dir=False) for n in names]


def _sample_tree() -> dict[str, list[DirEntryInfo] | OSError]:
    return {
        "/r/a": _dirs("b") + _files("x.txt", ".DS_Store"),
        "/r/a/b": [],
        "/r/f": _files("file.txt"),
        "/r/f/file.txt": NotADirectoryError(20, "Not a directory", "/r/f/file.txt"),
    }


def _indexer(make_lister, tree=None, **options) -> tuple[DirectoryIndexer, Index, object]:
    lister = make_lister(tree if tree is not None else _sample_tree())
    index: Index = {}
    indexer = DirectoryIndexer(RunOptions(cwd=ROOT, **options), index, lister=lister)
    return indexer, index, lister


class TestPopulate:
    """Tests for successful population."""

    @pytest.mark.asyncio
    async def test_indexes_path_and_ancestors(self, make_lister) -> None:
        """The path and every ancestor below stop are READY."""
        indexer, index, _ = _indexer(make_lister)

        await indexer.populate("/r/a/b")

        assert index["/r/a/b"].status == DirStatus.READY
        assert index["/r/a"].status == DirStatus.READY
        assert ROOT not in index

    @pytest.mark.asyncio
    async def test_children_registered(self, make_lister) -> None:
        """Subdirectories become child nodes, junk files are skipped."""
        indexer, index, _ = _indexer(make_lister)

        await indexer.populate("/r/a/b")

        parent = index["/r/a"]
        assert set(parent.dirs) == {"b"}
        assert parent.dirs["b"] is index["/r/a/b"]
        assert parent.files == {"x.txt"}

    @pytest.mark.asyncio
    async def test_placeholder_upgraded_in_place(self, make_lister) -> None:
        """A placeholder created by a parent listing is reused when read."""
        indexer, index, _ = _indexer(make_lister)

        await indexer.populate("/r/a")
        placeholder = index["/r/a/b"]
        assert placeholder.status == DirStatus.UNPROCESSED

        await indexer.populate("/r/a/b")

        assert index["/r/a/b"] is placeholder
        assert placeholder.status == DirStatus.READY

    @pytest.mark.asyncio
    async def test_each_path_listed_once_under_fan_in(self, make_lister) -> None:
        """Concurrent duplicate requests list every path at most once."""
        indexer, _, lister = _indexer(make_lister)

        await asyncio.gather(*(indexer.populate(p) for p in ["/r/a/b", "/r/a"] * 50))

        assert sorted(lister.calls) == ["/r/a", "/r/a/b"]

    @pytest.mark.asyncio
    async def test_stop_and_outside_paths_ignored(self, make_lister) -> None:
        """The stop path and paths outside it are never listed."""
        indexer, index, lister = _indexer(make_lister)

        await indexer.populate(ROOT)
        await indexer.populate("/elsewhere/x")

        assert index == {}
        assert lister.calls == []

    @pytest.mark.asyncio
    async def test_extra_junk_patterns(self, make_lister) -> None:
        """Extra junk patterns from the options are ignored too."""
        tree = {"/r/a": _files("keep.txt", "skip.bak")}
        indexer, index, _ = _indexer(make_lister, tree, extra_junk=("*.bak",))

        await indexer.populate("/r/a")

        assert index["/r/a"].files == {"keep.txt"}


class TestPopulateFailures:
    """Tests for listing failure classification."""

    @pytest.mark.asyncio
    async def test_missing_target_is_fatal(self, make_lister) -> None:
        """A missing bottom-most path raises without force."""
        indexer, _, _ = _indexer(make_lister)

        with pytest.raises(FileNotFoundError):
            await indexer.populate("/r/a/missing")

    @pytest.mark.asyncio
    async def test_missing_target_tolerated_with_force(self, make_lister) -> None:
        """With force, a missing target is dropped and its parent indexed."""
        indexer, index, _ = _indexer(make_lister, force=True)

        await indexer.populate("/r/a/missing")

        assert "/r/a/missing" not in index
        assert index["/r/a"].status == DirStatus.READY

    @pytest.mark.asyncio
    async def test_file_target_is_fatal(self, make_lister) -> None:
        """A file target raises NotADirectoryError by default."""
        indexer, _, _ = _indexer(make_lister)

        with pytest.raises(NotADirectoryError):
            await indexer.populate("/r/f/file.txt")

    @pytest.mark.asyncio
    async def test_file_target_tolerated_with_delete_initial(self, make_lister) -> None:
        """delete_initial makes a file target acceptable."""
        indexer, index, _ = _indexer(make_lister, delete_initial=True)

        await indexer.populate("/r/f/file.txt")

        assert "/r/f/file.txt" not in index
        assert index["/r/f"].files == {"file.txt"}

    @pytest.mark.asyncio
    async def test_file_target_tolerated_with_force(self, make_lister) -> None:
        """force makes a file target acceptable."""
        indexer, index, _ = _indexer(make_lister, force=True)

        await indexer.populate("/r/f/file.txt")

        assert "/r/f/file.txt" not in index

    @pytest.mark.asyncio
    async def test_missing_not_tolerated_by_delete_initial(self, make_lister) -> None:
        """delete_initial alone does not excuse a missing target."""
        indexer, _, _ = _indexer(make_lister, delete_initial=True)

        with pytest.raises(FileNotFoundError):
            await indexer.populate("/r/a/missing")

    @pytest.mark.asyncio
    async def test_missing_ancestor_left_unresolved(self, make_lister) -> None:
        """Missing ancestors of a missing target never become READY."""
        indexer, index, _ = _indexer(make_lister, force=True)

        await indexer.populate("/r/a/b/x/y")

        assert "/r/a/b/x/y" not in index
        assert index["/r/a/b/x"].status == DirStatus.PROCESSING
        assert index["/r/a/b"].status == DirStatus.READY
        assert index["/r/a"].status == DirStatus.READY

    @pytest.mark.asyncio
    async def test_ancestor_permission_error_is_fatal(self, make_lister) -> None:
        """Other ancestor failures abort the run even with force."""
        tree = _sample_tree()
        tree["/r/a"] = PermissionError(13, "Permission denied", "/r/a")
        indexer, _, _ = _indexer(make_lister, tree, force=True)

        with pytest.raises(PermissionError):
            await indexer.populate("/r/a/b")

    @pytest.mark.asyncio
    async def test_target_permission_error_is_fatal(self, make_lister) -> None:
        """force does not excuse a permission failure on the target."""
        tree = _sample_tree()
        tree["/r/a/b"] = PermissionError(13, "Permission denied", "/r/a/b")
        indexer, _, _ = _indexer(make_lister, tree, force=True, delete_initial=True)

        with pytest.raises(PermissionError):
            await indexer.populate("/r/a/b")
