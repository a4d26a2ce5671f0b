"""Public entry points for upward removal.

Delete files or empty directories together with their empty parents, up
to (and excluding) a stop directory.
"""

import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import Any

from rmup.core.operator import FilesystemOperator
from rmup.core.options import RunOptions
from rmup.core.scanner import PathInput, Scanner
from rmup.errors import DeletionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletedPath:
    """A path reported as deleted.

    Attributes:
        path: Reported path (relative to cwd or absolute, per options).
        is_directory: Whether the path was a directory.
    """

    path: str
    is_directory: bool


@dataclass(frozen=True, slots=True)
class RemovalReport:
    """Outcome of an upward removal run.

    Attributes:
        deleted: Reported entries sorted by path.
        dry_run: True if nothing was actually deleted.
    """

    deleted: list[DeletedPath] = field(default_factory=list)
    dry_run: bool = False

    @property
    def paths(self) -> list[str]:
        """Reported paths, sorted."""
        return [entry.path for entry in self.deleted]


async def remove_upward_report(
    paths: PathInput,
    options: RunOptions | None = None,
    **overrides: Any,
) -> RemovalReport:
    """Delete paths and their empty parents and describe what was deleted.

    Same as :func:`remove_upward` but keeps the kind of every reported entry.
    """
    run_options = _merge_options(options, overrides)
    scanner = Scanner(run_options)
    to_delete = await scanner.get_paths_to_delete(paths)

    contents: dict[str, bool] = {}
    if run_options.verbose and to_delete:
        contents = await scanner.collect_contents(to_delete)

    if to_delete:
        results = await FilesystemOperator(dry_run=run_options.dry).delete(to_delete)
        failures = [r for r in results if not r.success]
        if failures:
            raise DeletionError(failures)

    if run_options.verbose:
        contents.update(dict.fromkeys(scanner.deleted_dirs, True))
        contents.update(dict.fromkeys(scanner.deleted_files, False))
        entries = [DeletedPath(p, is_dir) for p, is_dir in contents.items()]
    else:
        entries = [DeletedPath(r.path, r.is_directory) for r in to_delete]

    if run_options.relative:
        entries = [DeletedPath(os.path.relpath(e.path, run_options.cwd), e.is_directory) for e in entries]

    logger.debug("Reporting %d path(s)%s", len(entries), " (dry-run)" if run_options.dry else "")
    return RemovalReport(deleted=sorted(entries, key=lambda e: e.path), dry_run=run_options.dry)


async def remove_upward(
    paths: PathInput,
    options: RunOptions | None = None,
    **overrides: Any,
) -> list[str]:
    """Delete paths and their empty parent directories.

    Args:
        paths: A path or a sequence of paths to delete together with their
            empty parents.
        options: Run options. Defaults to ``RunOptions()``.
        **overrides: Individual RunOptions fields overriding ``options``.

    Returns:
        Sorted deleted paths: the topmost path deleted per input, or every
        deleted file and directory when ``verbose`` is set.

    Raises:
        FileNotFoundError: If an input does not exist and ``force`` is not set.
        NotADirectoryError: If an input is a file and neither ``force`` nor
            ``delete_initial`` is set.
        OSError: On any other listing failure.
        DeletionError: If one or more resolved paths could not be deleted.
    """
    report = await remove_upward_report(paths, options, **overrides)
    return report.paths


def remove_upward_sync(
    paths: PathInput,
    options: RunOptions | None = None,
    **overrides: Any,
) -> list[str]:
    """Blocking variant of :func:`remove_upward`."""
    return asyncio.run(remove_upward(paths, options, **overrides))


def _merge_options(options: RunOptions | None, overrides: dict[str, Any]) -> RunOptions:
    """Build validated run options from a base and keyword overrides."""
    if options is None:
        return RunOptions(**overrides)
    return options.with_overrides(**overrides)
