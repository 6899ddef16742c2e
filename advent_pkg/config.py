"""Centralized configuration for the Advent solvers.

This module defines:
- Where puzzle inputs live on disk
- Input validation limits
- Puzzle parameters (top-k for day 1, group size for day 3)
- Default logging level

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with ADVENT_)
"""

import importlib.metadata
import os
import re

try:
    VERSION = importlib.metadata.version("advent")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "0.1.0"

# Input location and limits
DATA_DIR = os.getenv("ADVENT_DATA_DIR", "data")
MAX_INPUT_LENGTH = int(
    os.getenv("ADVENT_MAX_INPUT_LENGTH", "1000000")
)  # characters

# Puzzle parameters
TOP_K = int(os.getenv("ADVENT_TOP_K", "3"))  # day 1, part 2
GROUP_SIZE = int(os.getenv("ADVENT_GROUP_SIZE", "3"))  # day 3, part 2

LOG_LEVEL = os.getenv("ADVENT_LOG_LEVEL", "WARNING")

INPUT_FILE_TEMPLATE = "day{day:02d}.input"

INTEGER_RE = re.compile(r"[+-]?[0-9]+")
ITEMS_RE = re.compile(r"[A-Za-z]+")
