"""Directory indexer for upward removal.

Reads each requested path and all of its ancestors up to the stop
boundary, caching one DirNode per absolute path. Listing a path and
indexing its parent run concurrently, so sibling inputs in a batch share
ancestor reads instead of serializing on depth.
"""

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable

from rmup.core.junk import is_junk
from rmup.core.models import DirNode, DirStatus, Index
from rmup.core.options import RunOptions
from rmup.utils.fs import DirEntryInfo, list_directory

logger = logging.getLogger(__name__)

Lister = Callable[[str], Awaitable[list[DirEntryInfo]]]

# Listing failures that mean "this path is not a readable directory".
_MISSING_ERRORS: tuple[type[OSError], ...] = (FileNotFoundError, NotADirectoryError)


class DirectoryIndexer:
    """Populates the shared index for a run.

    A path is listed at most once per run: the node is reserved with
    PROCESSING status before the first await, so concurrent requests for
    the same path return immediately.

    Args:
        options: Run options (stop boundary, force, delete_initial).
        index: Shared index to populate.
        lister: Awaitable directory listing primitive.
    """

    def __init__(
        self,
        options: RunOptions,
        index: Index,
        *,
        lister: Lister = list_directory,
    ) -> None:
        self._options = options
        self._index = index
        self._lister = lister
        self._extra_junk = list(options.extra_junk)

    async def populate(self, path: str, is_initial: bool = True) -> None:
        """Index a path and its ancestors up to the stop boundary.

        Args:
            path: Absolute path to index.
            is_initial: True for the bottom-most path of an input.

        Raises:
            OSError: If a listing fails and the failure is not tolerated.
        """
        existing = self._index.get(path)
        if (existing is not None and existing.is_pending) or not self._options.is_below_stop(path):
            return

        # Reserve before awaiting; an UNPROCESSED placeholder is upgraded in place.
        node = existing if existing is not None else DirNode()
        node.status = DirStatus.PROCESSING
        self._index[path] = node

        listing, parent_outcome = await asyncio.gather(
            self._lister(path),
            self.populate(os.path.dirname(path), is_initial=False),
            return_exceptions=True,
        )

        if isinstance(listing, BaseException):
            self._handle_failure(path, listing, is_initial)
        else:
            self._register_entries(path, node, listing)
            node.status = DirStatus.READY

        if isinstance(parent_outcome, BaseException):
            raise parent_outcome

    def _register_entries(self, path: str, node: DirNode, entries: list[DirEntryInfo]) -> None:
        """Record the children of a successfully listed directory."""
        for entry in entries:
            if entry.is_dir:
                child_path = os.path.join(path, entry.name)
                child = self._index.get(child_path)
                if child is None:
                    child = DirNode()
                    self._index[child_path] = child
                node.dirs[entry.name] = child
            elif not is_junk(entry.name, self._extra_junk):
                node.files.add(entry.name)

        logger.debug(
            "Indexed %s (%d dirs, %d files)",
            path,
            len(node.dirs),
            len(node.files),
        )

    def _handle_failure(self, path: str, error: BaseException, is_initial: bool) -> None:
        """Classify a listing failure as tolerated or fatal.

        Args:
            path: Path whose listing failed.
            error: The raised exception.
            is_initial: True for the bottom-most path of an input.

        Raises:
            BaseException: The listing error itself when it is fatal.
        """
        if is_initial:
            is_file = isinstance(error, NotADirectoryError) and self._options.delete_initial
            is_absent = isinstance(error, _MISSING_ERRORS) and self._options.force
            if not (is_file or is_absent):
                raise error
            logger.debug("Ignoring unreadable target %s: %s", path, error)
            self._index.pop(path, None)
            return

        if not isinstance(error, _MISSING_ERRORS):
            raise error

        # Ancestor of a missing target; stays PROCESSING so it is never deleted.
        logger.debug("Ancestor %s is not a directory: %s", path, error)
