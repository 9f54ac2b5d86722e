"""ANSI color codes and the fixed depth palette used by tree rendering.

The palette cycles by depth only; entry type and sibling position never
influence the color of a line.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
YELLOW = "\033[0;33m"
PURPLE = "\033[0;35m"
WHITE = "\033[0;37m"


@dataclass(frozen=True)
class Palette:
    """Ordered color slots selected by ``depth % len(slots)``."""

    name: str
    slots: tuple[str, str, str]
    reset: str = RESET

    def color_for_depth(self, depth: int) -> str:
        return self.slots[depth % len(self.slots)]


DEFAULT_PALETTE = Palette(name="default", slots=(WHITE, PURPLE, YELLOW))


def color_for_depth(depth: int, use_color: bool, palette: Palette = DEFAULT_PALETTE) -> str | None:
    """Return the ANSI code for ``depth``, or ``None`` when color is disabled."""
    if not use_color:
        return None
    return palette.color_for_depth(depth)


__all__ = [
    "RESET",
    "YELLOW",
    "PURPLE",
    "WHITE",
    "Palette",
    "DEFAULT_PALETTE",
    "color_for_depth",
]
