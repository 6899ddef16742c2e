"""Advent puzzle solvers: per-day parsers and solvers, public API and CLI."""

from .api import available_days, solve, solve_all_parts, solve_file, validate_input
from .types import DayResult

__all__ = [
    "DayResult",
    "available_days",
    "solve",
    "solve_all_parts",
    "solve_file",
    "validate_input",
]
