"""Entry point exposed via ``python -m tle_codec``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
