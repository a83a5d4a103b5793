"""Allow ``python -m bowlstandings``."""

import sys

from bowlstandings.cli import main

if __name__ == "__main__":
    sys.exit(main())
