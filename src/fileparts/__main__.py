"""Allow ``python -m fileparts``."""

import sys

from fileparts.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
