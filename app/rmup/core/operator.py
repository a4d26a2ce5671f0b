"""Filesystem deletion operator.

Performs the deletions the scanner decided on, with dry-run support.
Directories are removed recursively, files are unlinked.
"""

import asyncio
import logging
from dataclasses import dataclass

from rmup.core.models import DeletionRecord
from rmup.utils.fs import remove_file, remove_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of a single deletion.

    Attributes:
        path: Absolute path that was operated on.
        is_directory: Whether the path was deleted as a directory tree.
        success: Whether the deletion completed successfully.
        error: Error message if the deletion failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    is_directory: bool
    success: bool
    error: str | None = None
    dry_run: bool = False


class FilesystemOperator:
    """Deletes resolved paths from the filesystem.

    Records are expected to be disjoint (no record nested beneath another),
    so they are deleted concurrently.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the FilesystemOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    async def delete(self, records: list[DeletionRecord]) -> list[DeletionResult]:
        """Delete multiple records and return results.

        Failures are isolated per record; one failing deletion does not
        stop the others.

        Args:
            records: Deletion records to execute.

        Returns:
            List of DeletionResult, one per input record, in input order.
        """
        return list(await asyncio.gather(*(self._delete_single(r) for r in records)))

    async def _delete_single(self, record: DeletionRecord) -> DeletionResult:
        """Delete a single record.

        Args:
            record: Path and kind to delete.

        Returns:
            DeletionResult indicating success or failure.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", record.path)
            return DeletionResult(
                path=record.path,
                is_directory=record.is_directory,
                success=True,
                dry_run=True,
            )

        try:
            if record.is_directory:
                await remove_tree(record.path)
            else:
                await remove_file(record.path)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", record.path, e)
            return DeletionResult(
                path=record.path,
                is_directory=record.is_directory,
                success=False,
                error=str(e),
            )

        logger.info("Deleted %s", record.path)
        return DeletionResult(path=record.path, is_directory=record.is_directory, success=True)
