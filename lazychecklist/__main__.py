"""Module entrypoint for ``python -m lazychecklist``.

All argument parsing and runtime setup happen in ``lazychecklist.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
