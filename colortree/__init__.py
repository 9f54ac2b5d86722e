"""Public package surface for colortree.

Exports the renderer, its options, and ``main`` for programmatic CLI
invocation. Implementation lives in submodules under ``colortree``.
"""

from __future__ import annotations

from .color_printer import ColorPrinter
from .errors import DirectoryNotFound, DirectoryUnreadable, InvalidArgument, InvalidDirectory, TreeError
from .options import RenderOptions
from .renderer import TreeRenderer, render_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "ColorPrinter",
    "RenderOptions",
    "TreeRenderer",
    "render_tree",
    "TreeError",
    "InvalidArgument",
    "DirectoryNotFound",
    "InvalidDirectory",
    "DirectoryUnreadable",
]
