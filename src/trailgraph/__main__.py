"""Main entry point for the Trailgraph package when run as a module.

This module enables running Trailgraph directly using 'python -m trailgraph'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
