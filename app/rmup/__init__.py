"""rmup - delete paths together with their emptied parent directories."""

from rmup.api import DeletedPath, RemovalReport, remove_upward, remove_upward_report, remove_upward_sync
from rmup.core.models import DeletionRecord
from rmup.core.options import RunOptions
from rmup.errors import ConfigError, DeletionError, RmupError

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DeletedPath",
    "DeletionError",
    "DeletionRecord",
    "RemovalReport",
    "RmupError",
    "RunOptions",
    "__version__",
    "remove_upward",
    "remove_upward_report",
    "remove_upward_sync",
]
