#!/usr/bin/env python3
"""
Advent - puzzle solvers

Main entry point for the Advent puzzle solvers.
This file serves as a thin wrapper that delegates all functionality
to the advent_pkg package.

Usage:
    python advent.py --day 1                    # Solve both parts from data/day01.input
    python advent.py -d 3 -p 2 -i my.input      # Solve one part from a given file
    python advent.py --health-check             # Verify the worked examples
    python advent.py --help                     # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Advent.

    Delegates all functionality to the advent_pkg.cli module,
    which handles argument parsing, solving, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from advent_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import advent_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1
    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
