"""Module entrypoint for ``python -m lazyprompt``.

All argument parsing and session setup happen in ``lazyprompt.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
