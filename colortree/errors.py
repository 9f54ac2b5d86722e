"""Exception taxonomy for option parsing, output, and tree rendering.

Every error raised by colortree derives from ``TreeError`` so the CLI can
turn any of them into a one-line message and a non-zero exit.
"""

from __future__ import annotations


class TreeError(Exception):
    """Base class for all colortree failures."""


class InvalidArgument(TreeError, ValueError):
    """Malformed input: missing path, unknown flag, or ``None`` text."""


class DirectoryNotFound(TreeError, FileNotFoundError):
    """Path does not exist or does not denote a directory."""


class InvalidDirectory(TreeError):
    """Root directory is not renderable under the current hidden-file policy."""


class DirectoryUnreadable(TreeError):
    """Listing a directory failed part way through a render."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path


__all__ = [
    "TreeError",
    "InvalidArgument",
    "DirectoryNotFound",
    "InvalidDirectory",
    "DirectoryUnreadable",
]
