"""Deletion resolver for upward removal.

Walks each requested path upward through the populated index and picks
the topmost ancestor that can be removed. Everything it decides to delete
is pruned from the index, so later inputs sharing ancestors see the
directory already emptied and converge on the same decision.
"""

import logging
import os

from rmup.core.models import DeletionRecord, Index
from rmup.core.options import RunOptions

logger = logging.getLogger(__name__)


class DeletionResolver:
    """Computes one deletion decision per input path.

    Decisions must run sequentially, after indexing finished for the
    whole batch.

    Args:
        options: Run options (stop boundary, delete_initial).
        index: Shared index populated by the indexer.

    Attributes:
        deleted_dirs: Every directory consumed by a decision.
        deleted_files: Every file consumed by a decision.
    """

    def __init__(self, options: RunOptions, index: Index) -> None:
        self._options = options
        self._index = index
        self.deleted_dirs: set[str] = set()
        self.deleted_files: set[str] = set()

    def decide(self, path: str) -> DeletionRecord | None:
        """Find the topmost path to delete for one input.

        Intermediate empty directories are recorded in ``deleted_dirs``
        but only the highest one is returned, since deleting it covers
        the rest.

        Args:
            path: Absolute bottom-most path of the input.

        Returns:
            The topmost record to delete, or None if nothing can be deleted.
        """
        best: DeletionRecord | None = None
        is_initial = True

        while self._options.is_below_stop(path):
            node = self._index.get(path)
            base_name = os.path.basename(path)
            parent_path = os.path.dirname(path)
            parent = self._index.get(parent_path)
            delete_initial = is_initial and self._options.delete_initial

            if node is None and parent is not None and delete_initial and (
                os.path.basename(base_name) in parent.files
            ):
                parent.files.discard(base_name)
                self.deleted_files.add(path)
                best = DeletionRecord(path=path, is_directory=False)
            elif node is not None and node.is_ready and (delete_initial or node.is_empty):
                del self._index[path]
                if parent is not None:
                    parent.dirs.pop(base_name, None)
                    parent.files.discard(base_name)
                self.deleted_dirs.add(path)
                best = DeletionRecord(path=path, is_directory=True)

            path = parent_path
            is_initial = False

        if best is not None:
            logger.debug("Top path to delete: %s (directory=%s)", best.path, best.is_directory)
        return best


def filter_sub_paths(records: list[DeletionRecord]) -> list[DeletionRecord]:
    """Drop records nested beneath another record of the same batch.

    Deleting an ancestor already removes its descendants.

    Args:
        records: Deletion decisions of a batch.

    Returns:
        Surviving records, shortest path first.

    Example:
        ``["/x/a/b/c", "/x/a/b"]`` keeps only ``"/x/a/b"``.
    """
    remaining = sorted(records, key=lambda r: len(r.path))
    kept: list[DeletionRecord] = []

    while remaining:
        head = remaining.pop(0)
        kept.append(head)
        prefix = head.path.rstrip(os.sep) + os.sep
        remaining = [r for r in remaining if r.path != head.path and not r.path.startswith(prefix)]

    return kept
