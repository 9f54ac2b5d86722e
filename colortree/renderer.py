"""Recursive directory walk producing an indented, depth-colored tree.

Output is pre-order: a directory's own line precedes its children, siblings
follow ``sorting.name_sort_key``, and each level indents by three spaces.
Lines are written to the sink as they are visited, so a failed render may
leave a partial tree behind.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TextIO

from .color_printer import ColorPrinter
from .errors import DirectoryNotFound, DirectoryUnreadable, InvalidDirectory
from .fs import TreeChild, is_hidden, list_directory_children
from .options import RenderOptions
from .palette import DEFAULT_PALETTE, Palette, color_for_depth
from .sorting import sort_entries

logger = logging.getLogger(__name__)

INDENT_UNIT = "   "


def display_name(path: Path) -> str:
    """Return the label printed for the root: its name, or the path for ``/``."""
    return path.name or str(path)


def root_line(path: Path) -> str:
    """Return the root row text; a filesystem root already ends with a separator."""
    label = display_name(path)
    if label.endswith((os.sep, "/")):
        return label
    return f"{label}/"


class TreeRenderer:
    """Render one configured directory tree to a text sink."""

    def __init__(
        self,
        options: RenderOptions,
        out: TextIO | None = None,
        palette: Palette = DEFAULT_PALETTE,
    ) -> None:
        self.options = options
        self.palette = palette
        self.out = ColorPrinter(out, reset=palette.reset)

    def render(self) -> None:
        """Print the whole tree rooted at ``options.root``.

        Raises ``DirectoryNotFound`` when the root is not a directory,
        ``InvalidDirectory`` when the root itself is hidden while hidden
        entries are suppressed, and ``DirectoryUnreadable`` when any listing
        fails; the latter aborts the render.
        """
        root = self.options.root
        if not root.is_dir():
            raise DirectoryNotFound(f"{root} does not exist or is not a directory.")
        absolute_root = Path(os.path.abspath(root))
        if not self.options.show_hidden and is_hidden(absolute_root):
            raise InvalidDirectory(f"{root} is hidden; pass -h to render it.")

        self._emit(root_line(absolute_root), depth=0)
        self._render_children(root, depth=1)

    def _render_children(self, directory: Path, depth: int) -> None:
        logger.debug("descending into %s at depth %d", directory, depth)
        try:
            children = list_directory_children(directory)
        except OSError as exc:
            logger.error("cannot list %s: %s", directory, exc)
            raise DirectoryUnreadable(directory, exc.strerror or str(exc)) from exc

        for child in sort_entries(children):
            self._visit(child, depth)

    def _visit(self, child: TreeChild, depth: int) -> None:
        if child.is_hidden and not self.options.show_hidden:
            logger.debug("skipping hidden entry %s", child.path)
            return

        if child.is_dir:
            self._emit(f"{INDENT_UNIT * depth}{child.name}/", depth)
            self._render_children(child.path, depth + 1)
            return
        self._emit(f"{INDENT_UNIT * depth}{child.name}", depth)

    def _emit(self, line: str, depth: int) -> None:
        self.out.set_color(color_for_depth(depth, self.options.use_color, self.palette))
        self.out.println(line)


def render_tree(options: RenderOptions, out: TextIO | None = None) -> None:
    """Render ``options.root`` to ``out`` (stdout by default) with a fresh renderer."""
    TreeRenderer(options, out).render()


__all__ = ["TreeRenderer", "render_tree", "display_name", "root_line", "INDENT_UNIT"]
