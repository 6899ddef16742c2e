"""Main entry point for running advent_pkg as a module.

This allows running the solvers with:
    python -m advent_pkg --day 1
    python -m advent_pkg --health-check
    python -m advent_pkg -d 2 -e "A Y"

This is equivalent to running:
    python -m advent_pkg.cli
    python advent.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
