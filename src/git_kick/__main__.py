"""Entry point for running git-kick as ``python -m git_kick``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
