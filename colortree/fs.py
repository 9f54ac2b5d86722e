"""Filesystem listing and hidden-entry predicates for tree rendering."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeChild:
    """One directory child observed at listing time."""

    name: str
    path: Path
    is_dir: bool
    is_hidden: bool


def is_dot_hidden(name: str) -> bool:
    """Return whether ``name`` follows the Unix dot-file convention."""
    return name.startswith(".")


def is_platform_hidden(path: Path, stat_result: os.stat_result | None = None) -> bool:
    """Return whether the platform marks ``path`` hidden.

    Windows exposes ``FILE_ATTRIBUTE_HIDDEN`` and macOS/BSD expose
    ``UF_HIDDEN``; other platforms have no native attribute. Stat failures
    read as not hidden.
    """
    if stat_result is None:
        try:
            stat_result = path.stat(follow_symlinks=False)
        except OSError:
            return False
    attributes = getattr(stat_result, "st_file_attributes", 0)
    if attributes & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0):
        return True
    flags = getattr(stat_result, "st_flags", 0)
    return bool(flags & getattr(stat, "UF_HIDDEN", 0))


def is_hidden(path: Path, stat_result: os.stat_result | None = None) -> bool:
    """Either predicate marks an entry hidden."""
    return is_dot_hidden(path.name) or is_platform_hidden(path, stat_result)


def list_directory_children(directory: Path) -> list[TreeChild]:
    """List direct children of ``directory`` in filesystem order.

    Reads the directory fresh on every call. ``OSError`` from opening or
    iterating the directory propagates to the caller; per-entry stat
    failures degrade to a plain, non-hidden file.
    """
    children: list[TreeChild] = []
    with os.scandir(directory) as entries:
        for child in entries:
            child_path = Path(child.path)
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False

            try:
                child_stat = child.stat(follow_symlinks=False)
            except OSError:
                child_stat = None
            hidden = is_dot_hidden(child.name) or (
                child_stat is not None and is_platform_hidden(child_path, child_stat)
            )

            children.append(
                TreeChild(
                    name=child.name,
                    path=child_path,
                    is_dir=is_dir,
                    is_hidden=hidden,
                )
            )
    logger.debug("listed %d entries in %s", len(children), directory)
    return children


__all__ = [
    "TreeChild",
    "is_dot_hidden",
    "is_platform_hidden",
    "is_hidden",
    "list_directory_children",
]
