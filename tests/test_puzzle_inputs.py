"""Answers for real puzzle inputs; skipped unless data/dayNN.input is present."""

import pytest

from advent_pkg.api import solve_file
from advent_pkg.reader import default_input_path

KNOWN_ANSWERS = [
    (1, 1, 71023),
    (1, 2, 206289),
    (3, 1, 7428),
    (3, 2, 2650),
]


@pytest.mark.parametrize("day,part,expected", KNOWN_ANSWERS)
def test_puzzle_input(day, part, expected):
    path = default_input_path(day)
    if not path.exists():
        pytest.skip(f"{path} not available")
    result = solve_file(day, part, path)
    assert result.ok, result.error
    assert result.answer == expected
