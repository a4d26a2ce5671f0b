"""Bottom-up scanner that decides what to delete for a batch of paths.

Owns the index for one run and sequences the two phases: every input is
indexed concurrently first, then decisions are made one input at a time
against the finished index.
"""

import asyncio
import logging
import os
from collections.abc import Sequence

from rmup.core.indexer import DirectoryIndexer, Lister
from rmup.core.junk import is_junk
from rmup.core.models import DeletionRecord, Index
from rmup.core.options import RunOptions
from rmup.core.resolver import DeletionResolver, filter_sub_paths
from rmup.utils.fs import list_directory, walk_tree

logger = logging.getLogger(__name__)

PathInput = str | os.PathLike[str] | Sequence[str | os.PathLike[str]]


class Scanner:
    """Scans directories bottom-up to find empty directories to delete.

    A Scanner is single-use: its index describes the filesystem as seen
    by one call and is not valid afterwards.

    Args:
        options: Run options.
        lister: Awaitable directory listing primitive.
    """

    def __init__(self, options: RunOptions, *, lister: Lister = list_directory) -> None:
        self._options = options
        self._index: Index = {}
        self._indexer = DirectoryIndexer(options, self._index, lister=lister)
        self._resolver = DeletionResolver(options, self._index)

    @property
    def index(self) -> Index:
        """The path to node index of this run."""
        return self._index

    @property
    def deleted_dirs(self) -> set[str]:
        """Every directory consumed by a decision, including intermediate ones."""
        return self._resolver.deleted_dirs

    @property
    def deleted_files(self) -> set[str]:
        """Every file consumed by a decision."""
        return self._resolver.deleted_files

    async def get_paths_to_delete(self, paths: PathInput) -> list[DeletionRecord]:
        """Calculate the top entries to delete for the given paths.

        Args:
            paths: A single path or a sequence of paths, relative to ``cwd``
                or absolute.

        Returns:
            Deletion records with sub-paths of other records removed.

        Raises:
            OSError: The first fatal listing failure of the batch.
        """
        absolute_paths = [self._options.resolve_path(p) for p in _as_list(paths)]
        logger.debug("Indexing %d path(s) below %s", len(absolute_paths), self._options.stop)

        await asyncio.gather(*(self._indexer.populate(p) for p in absolute_paths))

        decisions = [self._resolver.decide(p) for p in absolute_paths]
        return filter_sub_paths([d for d in decisions if d is not None])

    async def collect_contents(self, records: list[DeletionRecord]) -> dict[str, bool]:
        """List what deleting the given directory records removes beneath them.

        Must run before the records are deleted. Junk files are skipped,
        matching what the index tracks.

        Args:
            records: Deletion records; file records are ignored.

        Returns:
            Absolute descendant path to ``is_dir`` for every directory record.
        """
        extra_junk = list(self._options.extra_junk)
        directories = [r.path for r in records if r.is_directory]
        listings = await asyncio.gather(*(walk_tree(p) for p in directories))

        contents: dict[str, bool] = {}
        for listing in listings:
            for path, is_dir in listing:
                if is_dir or not is_junk(os.path.basename(path), extra_junk):
                    contents[path] = is_dir

        logger.debug("Found %d entries beneath %d directories", len(contents), len(directories))
        return contents


def _as_list(paths: PathInput) -> list[str | os.PathLike[str]]:
    if isinstance(paths, (str, os.PathLike)):
        return [paths]
    return list(paths)
