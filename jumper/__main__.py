"""Module entrypoint for ``python -m jumper``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and dispatch happen in ``jumper.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
