"""Exceptions raised by rmup.

Filesystem failures found while indexing (``FileNotFoundError``,
``NotADirectoryError`` and other ``OSError`` subclasses) propagate
unchanged; the classes below cover the failures rmup itself reports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rmup.core.operator import DeletionResult


class RmupError(Exception):
    """Base exception for rmup errors."""


class DeletionError(RmupError):
    """Raised when one or more resolved paths could not be deleted.

    Attributes:
        failures: Results of the deletions that failed.
    """

    def __init__(self, failures: list[DeletionResult]) -> None:
        self.failures = failures
        details = "; ".join(f"{r.path}: {r.error}" for r in failures)
        super().__init__(f"Failed to delete {len(failures)} path(s): {details}")


class ConfigError(RmupError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""
