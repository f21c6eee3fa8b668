"""Main entry point for running basejump_pkg as a module.

This allows running basejump with:
    python -m basejump_pkg
    python -m basejump_pkg --inputbase 16 --obases 2,10
    python -m basejump_pkg --file expressions.txt
    python -m basejump_pkg -e "FF+1" --inputbase 16

This is equivalent to running:
    python -m basejump_pkg.cli
    python basejump.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
