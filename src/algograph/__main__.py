"""Main entry point for the Algograph package when run as a module.

This module enables running Algograph directly using 'python -m algograph'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
