"""Command-line front door for colortree.

Loads persisted defaults, parses ``[-h] [-nc] PATH``, and renders the tree
to stdout. Any ``TreeError`` becomes a one-line message and exit status 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from . import config
from .errors import TreeError
from .log import setup_logging
from .options import RenderOptions
from .renderer import TreeRenderer

logger = logging.getLogger(__name__)

USAGE = "usage: colortree [-h] [-nc] PATH"


def main(argv: Sequence[str] | None = None) -> None:
    """Parse ``argv`` (default ``sys.argv[1:]``) and print the directory tree.

    ``-h`` shows hidden entries and ``-nc`` disables color; both start from
    the baselines stored in the user config file.
    """
    if argv is None:
        argv = sys.argv[1:]
    setup_logging(config.load_log_level())

    try:
        options = RenderOptions.from_args(
            list(argv),
            show_hidden=config.load_show_hidden(),
            use_color=config.load_use_color(),
        )
        logger.debug("rendering with %s", options)
        TreeRenderer(options, sys.stdout).render()
    except TreeError as exc:
        raise SystemExit(f"{exc}\n{USAGE}") from None


if __name__ == "__main__":
    main()
