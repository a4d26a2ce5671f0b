"""Core data models for upward removal scanning.

This module defines the in-memory directory index used during a single
run, and the deletion records the resolver hands to the operator.
"""

from dataclasses import dataclass, field
from enum import Enum


class DirStatus(str, Enum):
    """Read state of a directory node in the index.

    Attributes:
        UNPROCESSED: Placeholder created from a parent's listing, not read yet.
        PROCESSING: A listing has been requested and is in flight.
        READY: The listing finished and the node contents are final.
    """

    UNPROCESSED = "unprocessed"
    PROCESSING = "processing"
    READY = "ready"


@dataclass(slots=True)
class DirNode:
    """Contents of one absolute directory path known to the run.

    Nodes are mutable: the resolver prunes children from them as it
    decides deletions, so sibling inputs converge on the same answer.
    The parent of a node is always derived from its path string and
    never stored on the node.

    Attributes:
        status: Read state of the node.
        dirs: Child directory name to child node.
        files: Names of non-junk files directly inside the directory.
    """

    status: DirStatus = DirStatus.UNPROCESSED
    dirs: dict[str, "DirNode"] = field(default_factory=dict)
    files: set[str] = field(default_factory=set)

    @property
    def is_ready(self) -> bool:
        """Check if the listing of this node has completed."""
        return self.status == DirStatus.READY

    @property
    def is_pending(self) -> bool:
        """Check if a listing was already requested for this node."""
        return self.status in (DirStatus.PROCESSING, DirStatus.READY)

    @property
    def is_empty(self) -> bool:
        """Check if the directory holds no files and no subdirectories."""
        return not self.files and not self.dirs


# Absolute path to directory node, shared by indexer and resolver for one run.
Index = dict[str, DirNode]


@dataclass(frozen=True, slots=True)
class DeletionRecord:
    """A single path the deletion collaborator has to remove.

    Attributes:
        path: Absolute path to delete.
        is_directory: True for a recursive directory delete, False for a file.
    """

    path: str
    is_directory: bool

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
