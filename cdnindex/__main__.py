"""Module entrypoint for ``python -m cdnindex``.

Argument parsing and run setup happen in ``cdnindex.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
