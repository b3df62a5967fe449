"""Main entry point for recordkeeper."""

import sys

from recordkeeper.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
