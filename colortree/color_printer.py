"""Colored line emission over a text sink.

``ColorPrinter`` remembers one active color and brackets every write with
that color and a reset code. ``println`` places the line terminator before
the reset code; existing renders depend on that byte order.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .errors import InvalidArgument
from .palette import RESET

LINE_TERMINATOR = "\n"


class ColorPrinter:
    """Stateful colored writer; color persists until ``set_color`` changes it."""

    def __init__(self, stream: TextIO | None = None, reset: str = RESET) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.reset = reset
        self.current_color: str | None = None

    def set_color(self, color: str | None) -> None:
        """Select the color for subsequent writes; ``None`` means plain text."""
        self.current_color = color

    def print(self, text: str) -> None:
        """Write ``text`` wrapped in the active color, without a terminator.

        Empty text writes nothing at all, not even color markers.
        """
        if text is None:
            raise InvalidArgument("Cannot print None.")
        if not text:
            return
        if self.current_color is None:
            self.stream.write(text)
            return
        self.stream.write(f"{self.current_color}{text}{self.reset}")

    def println(self, text: str) -> None:
        """Write ``text`` plus a line terminator; the reset code trails the terminator."""
        if text is None:
            raise InvalidArgument("Cannot print None.")
        if not text or self.current_color is None:
            self.stream.write(f"{text}{LINE_TERMINATOR}")
            return
        self.stream.write(f"{self.current_color}{text}{LINE_TERMINATOR}{self.reset}")


__all__ = ["ColorPrinter", "LINE_TERMINATOR"]
