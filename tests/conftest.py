"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import asyncio
from collections.abc import Iterator
from pathlib import Path

import pytest
from rmup.utils.fs import DirEntryInfo

# Directories and files of the sample tree used by scanner and API tests.
TREE_DIRS: tuple[str, ...] = (
    "a1/a2/a3/a4",
    "b1/b2/b3/b4",
    "c1/c2/c3x/c4x",
    "c1/c2/c3y/c4y",
)

TREE_FILES: tuple[str, ...] = (
    "a1/a2/a2.txt",
    "b1/b2/b2.txt",
    "a1/.DS_Store",
    "a1/a2/.DS_Store",
    "a1/a2/a3/.DS_Store",
    "a1/a2/a3/a4/.DS_Store",
    "d1/d11.txt",
    "d1/d12.txt",
    "root.txt",
)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create the sample directory tree and return its root."""
    for rel in TREE_DIRS:
        (tmp_path / rel).mkdir(parents=True, exist_ok=True)
    for rel in TREE_FILES:
        target = tmp_path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("")
    return tmp_path


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home / "rmup" / "config.toml"


class FakeLister:
    """In-memory directory listing primitive.

    Maps absolute paths to either a list of entries or an exception to
    raise. Unknown paths raise FileNotFoundError. Every call is recorded.
    """

    def __init__(self, tree: dict[str, list[DirEntryInfo] | OSError]) -> None:
        self.tree = tree
        self.calls: list[str] = []

    async def __call__(self, path: str) -> list[DirEntryInfo]:
        self.calls.append(path)
        # Yield so concurrent populations interleave.
        await asyncio.sleep(0)
        outcome = self.tree.get(path)
        if outcome is None:
            raise FileNotFoundError(2, "No such file or directory", path)
        if isinstance(outcome, OSError):
            raise outcome
        return outcome


@pytest.fixture
def make_lister() -> type[FakeLister]:
    """Provide the FakeLister class to tests."""
    return FakeLister
