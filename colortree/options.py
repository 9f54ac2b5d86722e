"""Render configuration built from CLI tokens or explicit values.

Token grammar: ``[-h] [-nc] PATH`` in any order.

- ``-h``  show hidden entries (default off)
- ``-nc`` disable color (color on by default)

Any other token starting with ``-`` is rejected. Every remaining token is a
path and is validated as it is seen; when several appear, the last wins.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import DirectoryNotFound, InvalidArgument

SHOW_HIDDEN_FLAG = "-h"
NO_COLOR_FLAG = "-nc"


def _checked_directory(token: str) -> Path:
    """Return ``token`` as a ``Path`` after checking it names a directory."""
    path = Path(token)
    if not path.exists():
        raise DirectoryNotFound(f"{token} does not exist.")
    if not path.is_dir():
        raise DirectoryNotFound(f"{token} points to a file, not a directory.")
    return path


@dataclass(frozen=True)
class RenderOptions:
    """Immutable render settings: root directory plus two display toggles."""

    root: Path
    show_hidden: bool = False
    use_color: bool = True

    @classmethod
    def from_args(
        cls,
        args: Sequence[str] | None,
        *,
        show_hidden: bool = False,
        use_color: bool = True,
    ) -> "RenderOptions":
        """Parse CLI tokens into validated options.

        ``show_hidden`` and ``use_color`` are the baselines before flags are
        applied; flags can only turn hidden entries on and color off.
        """
        if not args:
            raise InvalidArgument("Filepath missing.")

        root: Path | None = None
        for token in args:
            if token.startswith("-"):
                if token == SHOW_HIDDEN_FLAG:
                    show_hidden = True
                elif token == NO_COLOR_FLAG:
                    use_color = False
                else:
                    raise InvalidArgument(f"{token} is not a valid argument.")
                continue
            root = _checked_directory(token)

        if root is None:
            raise InvalidArgument("Filepath missing.")
        return cls(root=root, show_hidden=show_hidden, use_color=use_color)


__all__ = ["RenderOptions", "SHOW_HIDDEN_FLAG", "NO_COLOR_FLAG"]
