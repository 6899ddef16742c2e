"""Day 1: Calorie Counting.

Each elf's inventory is a block of integers, one per line; blocks are
separated by blank lines. Part 1 asks for the largest block total, part 2 for
the combined total of the top three blocks.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from . import config
from .logging_config import get_logger
from .types import EmptyInputError, ParseError, ValidationError

logger = get_logger("day01")

TITLE = "Calorie Counting"

Inventory = tuple[tuple[int, ...], ...]

EXAMPLE_INPUT = """\
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""
EXAMPLE_ANSWERS = (24000, 45000)


def parse_input(text: str) -> Inventory:
    """Parse blank-line separated blocks of integers.

    Args:
        text: Raw input; surrounding whitespace is ignored

    Returns:
        One tuple of integers per block, in input order

    Raises:
        ParseError: If a non-empty line is not an integer
    """
    blocks = []
    current: list[int] = []
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            if current:
                blocks.append(tuple(current))
                current = []
            continue
        if not config.INTEGER_RE.fullmatch(line):
            raise ParseError(f"expected an integer, got {line!r}", "INVALID_INTEGER", line_no)
        current.append(int(line))
    if current:
        blocks.append(tuple(current))

    logger.debug("parsed %d blocks", len(blocks))
    return tuple(blocks)


def block_sums(blocks: Iterable[Sequence[int]]) -> list[int]:
    return [sum(block) for block in blocks]


def _sums_array(blocks: Iterable[Sequence[int]]) -> np.ndarray:
    # object dtype keeps Python ints, so totals never wrap at 64 bits
    return np.array(block_sums(blocks), dtype=object)


def find_max_sum(blocks: Iterable[Sequence[int]]) -> int:
    """Return the largest block total.

    Raises:
        EmptyInputError: If there are no blocks
    """
    sums = _sums_array(blocks)
    if sums.size == 0:
        raise EmptyInputError("no blocks to take the maximum of")
    return int(sums.max())


def find_top_k_sum(blocks: Iterable[Sequence[int]], k: int) -> int:
    """Return the sum of the ``k`` largest block totals.

    Fewer than ``k`` blocks is not an error: every available total is summed.

    Raises:
        ValidationError: If ``k`` is negative
    """
    if k < 0:
        raise ValidationError(f"k must be non-negative, got {k}", "INVALID_K")
    sums = _sums_array(blocks)
    top = np.sort(sums)[::-1][:k]
    return int(top.sum())


def part1(text: str) -> int:
    return find_max_sum(parse_input(text))


def part2(text: str) -> int:
    return find_top_k_sum(parse_input(text), config.TOP_K)
