"""Async filesystem primitives.

Thin awaitable wrappers around the blocking OS calls rmup needs:
directory listing and walking, recursive directory removal and single
file removal.
Errors are raised unchanged (``FileNotFoundError``, ``NotADirectoryError``,
``PermissionError`` ...) so callers can classify them.
"""

import asyncio
import os
import shutil
from dataclasses import dataclass

import aiofiles.os


@dataclass(frozen=True, slots=True)
class DirEntryInfo:
    """A single entry of a directory listing.

    Attributes:
        name: Entry name without directory part.
        is_dir: True if the entry is a directory (symlinks are not followed).
    """

    name: str
    is_dir: bool


def _scandir(path: str) -> list[DirEntryInfo]:
    with os.scandir(path) as entries:
        return [DirEntryInfo(name=e.name, is_dir=e.is_dir(follow_symlinks=False)) for e in entries]


async def list_directory(path: str) -> list[DirEntryInfo]:
    """List the entries of a directory without blocking the event loop.

    Args:
        path: Absolute directory path.

    Returns:
        Entries of the directory, in OS order.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path (or one of its parents) is a file.
        OSError: On any other listing failure.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _scandir, path)


def _walk(path: str) -> list[tuple[str, bool]]:
    found: list[tuple[str, bool]] = []
    pending = [path]
    while pending:
        current = pending.pop()
        for entry in _scandir(current):
            child = os.path.join(current, entry.name)
            found.append((child, entry.is_dir))
            if entry.is_dir:
                pending.append(child)
    return found


async def walk_tree(path: str) -> list[tuple[str, bool]]:
    """List everything below a directory without blocking the event loop.

    Symlinks are reported but never followed.

    Args:
        path: Absolute directory path.

    Returns:
        ``(absolute_path, is_dir)`` pairs for every descendant, unordered.

    Raises:
        OSError: If the directory or one of its subdirectories cannot be listed.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _walk, path)


async def remove_tree(path: str) -> None:
    """Recursively delete a directory and everything below it."""
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, shutil.rmtree, path)


async def remove_file(path: str) -> None:
    """Delete a single file or symbolic link."""
    await aiofiles.os.remove(path)
