"""Junk file names that never block an empty-directory check.

OS-generated incidental files (Finder metadata, thumbnail caches, editor
swap files) are ignored entirely while indexing: they neither keep a
directory alive nor get reported as deleted.
"""

import fnmatch

# Junk file name patterns (glob-style, matched against the base name only).
JUNK_PATTERNS: list[str] = [
    # macOS
    ".DS_Store",
    ".AppleDouble",
    ".LSOverride",
    "Icon\r",
    "._*",
    ".Spotlight-V100",
    ".Trashes",
    "__MACOSX",
    # Windows
    "Thumbs.db",
    "ehthumbs.db",
    "Desktop.ini",
    # Synology
    "@eaDir",
    # Editors and tools
    "*~",
    ".*.swp",
    "npm-debug.log",
]


def is_junk(name: str, extra_patterns: list[str] | None = None) -> bool:
    """Check if a file name is an incidental OS or tool artifact.

    Matching is case-sensitive and applies to the base name only.

    Args:
        name: File name without any directory part.
        extra_patterns: Additional glob patterns to treat as junk.

    Returns:
        True if the name matches any junk pattern, False otherwise.
    """
    patterns = JUNK_PATTERNS if not extra_patterns else [*JUNK_PATTERNS, *extra_patterns]
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def is_not_junk(name: str) -> bool:
    """Inverse of :func:`is_junk` using the built-in patterns."""
    return not is_junk(name)
