#!/usr/bin/env python3
"""
basejump - Multi-base Calculator

Main entry point for the basejump calculator application.
This file serves as a thin wrapper that delegates all functionality
to the basejump_pkg package.

Usage:
    python basejump.py                                  # Interactive session
    python basejump.py --inputbase 16 --obases 2,8,10   # Choose bases
    python basejump.py --file expressions.txt           # Evaluate a file
    python basejump.py --help                           # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for basejump.

    Delegates all functionality to the basejump_pkg.cli module,
    which handles argument parsing, file mode and the interactive session.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from basejump_pkg.cli import main_entry

    return main_entry(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
