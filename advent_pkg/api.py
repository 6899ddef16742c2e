"""Public API for the Advent solvers - solve functions return structured objects without raising."""

from __future__ import annotations

from pathlib import Path
from types import ModuleType

from . import day01, day02, day03
from .logging_config import get_logger
from .reader import default_input_path, load_text, read_input
from .types import AdventError, DayResult, ValidationError

logger = get_logger("api")

DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
}

PARTS = (1, 2)


def available_days() -> list[int]:
    """Return the puzzle days that have a solver, in order."""
    return sorted(DAYS)


def _failure(day: int, part: int, error: AdventError) -> DayResult:
    logger.warning("day %d part %d failed [%s]: %s", day, part, error.code, error)
    return DayResult(ok=False, day=day, part=part, error=str(error), error_code=error.code)


def _check_request(day: int, part: int) -> DayResult | None:
    if day not in DAYS:
        return DayResult(
            ok=False,
            day=day,
            part=part,
            error=f"No solver for day {day}; available days: {available_days()}",
            error_code="UNKNOWN_DAY",
        )
    if part not in PARTS:
        return DayResult(
            ok=False,
            day=day,
            part=part,
            error=f"Unknown part {part}; expected 1 or 2",
            error_code="UNKNOWN_PART",
        )
    return None


def solve(day: int, part: int, text: str) -> DayResult:
    """Solve one part of a day from literal input text.

    Args:
        day: Puzzle day (see ``available_days()``)
        part: 1 or 2
        text: Raw puzzle input

    Returns:
        DayResult with the answer, or with ``ok=False`` and an error code

    Example:
        >>> from advent_pkg.api import solve
        >>> solve(2, 1, "A Y\\nB X\\nC Z").answer
        15
    """
    rejected = _check_request(day, part)
    if rejected is not None:
        return rejected
    solver = getattr(DAYS[day], f"part{part}")
    try:
        answer = solver(load_text(text))
    except AdventError as e:
        return _failure(day, part, e)
    logger.info("day %d part %d: %d", day, part, answer)
    return DayResult(ok=True, day=day, part=part, answer=answer)


def solve_file(day: int, part: int, path: str | Path | None = None) -> DayResult:
    """Solve one part of a day from an input file.

    Args:
        day: Puzzle day
        part: 1 or 2
        path: Input file; defaults to ``<DATA_DIR>/dayNN.input``

    Returns:
        DayResult with the answer or the error
    """
    rejected = _check_request(day, part)
    if rejected is not None:
        return rejected
    try:
        text = read_input(path if path is not None else default_input_path(day))
    except AdventError as e:
        return _failure(day, part, e)
    return solve(day, part, text)


def solve_all_parts(day: int, text: str) -> list[DayResult]:
    """Solve both parts of a day.

    Stops at the first failure, so the returned list ends with the failing
    result and never contains answers computed after an error.
    """
    results = []
    for part in PARTS:
        result = solve(day, part, text)
        results.append(result)
        if not result.ok:
            break
    return results


def validate_input(day: int, text: str) -> tuple[bool, str | None]:
    """Parse input for a day without solving it.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from advent_pkg.api import validate_input
        >>> validate_input(3, "abc")
        (False, "line 1: rucksack 'abc' has odd length 3")
    """
    if day not in DAYS:
        return False, f"No solver for day {day}"
    try:
        DAYS[day].parse_input(load_text(text))
    except AdventError as e:
        return False, str(e)
    return True, None


def example(day: int) -> tuple[str, tuple[int, int]]:
    """Return a day's worked example input and its known answers.

    Raises:
        ValidationError: If there is no solver for ``day``
    """
    if day not in DAYS:
        raise ValidationError(f"No solver for day {day}", "UNKNOWN_DAY")
    module = DAYS[day]
    return module.EXAMPLE_INPUT, module.EXAMPLE_ANSWERS
