"""Entry point for ``python -m qcat``."""

import sys

from qcat.cli import main

if __name__ == "__main__":
    sys.exit(main())
