"""Module entrypoint for ``python -m colortree``.

All argument parsing and rendering happen in ``colortree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
