#!/usr/bin/env python3
# File Summary: Command line entry point that delegates to the main application.

"""
Todo CLI - interactive todo-list manager.

This is the entry point behind the ``todo`` console script.
"""

import sys

from .main import main as _main


def main() -> None:
    sys.exit(_main())


if __name__ == "__main__":
    main()
