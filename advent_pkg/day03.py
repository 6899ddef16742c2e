"""Day 3: Rucksack Reorganization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from . import config
from .logging_config import get_logger
from .types import InvariantViolation, ParseError, ValidationError

logger = get_logger("day03")

TITLE = "Rucksack Reorganization"

EXAMPLE_INPUT = """\
vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""
EXAMPLE_ANSWERS = (157, 70)


@dataclass(frozen=True)
class Rucksack:
    items: str

    @property
    def compartments(self) -> tuple[str, str]:
        half = len(self.items) // 2
        return self.items[:half], self.items[half:]

    @property
    def item_types(self) -> frozenset[str]:
        return frozenset(self.items)


def parse_input(text: str) -> tuple[Rucksack, ...]:
    """Parse one rucksack per line.

    Raises:
        ParseError: If a line holds anything but ASCII letters or has odd length
    """
    rucksacks = []
    for line_no, raw_line in enumerate(text.strip().splitlines(), start=1):
        line = raw_line.strip()
        if not config.ITEMS_RE.fullmatch(line):
            raise ParseError(
                f"rucksack must contain only ASCII letters, got {line!r}", "INVALID_ITEM", line_no
            )
        if len(line) % 2:
            raise ParseError(
                f"rucksack {line!r} has odd length {len(line)}", "ODD_LENGTH", line_no
            )
        rucksacks.append(Rucksack(line))

    logger.debug("parsed %d rucksacks", len(rucksacks))
    return tuple(rucksacks)


def priority(item: str) -> int:
    """Map a-z to 1-26 and A-Z to 27-52."""
    if len(item) == 1 and "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if len(item) == 1 and "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    # parse_input rejects everything else
    raise InvariantViolation(f"invalid item {item!r}")


def _single(common: set[str] | frozenset[str], what: str) -> str:
    if len(common) != 1:
        raise InvariantViolation(
            f"{what} has {len(common)} common item types ({''.join(sorted(common))!r}), expected exactly 1"
        )
    return next(iter(common))


def common_item(rucksack: Rucksack) -> str:
    """Return the one item type found in both compartments."""
    first, second = rucksack.compartments
    return _single(set(first) & set(second), f"rucksack {rucksack.items!r}")


def badge(group: Sequence[Rucksack]) -> str:
    """Return the one item type carried by every rucksack in the group."""
    if not group:
        raise InvariantViolation("empty group has no badge")
    common = set(group[0].item_types)
    for rucksack in group[1:]:
        common &= rucksack.item_types
    return _single(common, f"group {[r.items for r in group]!r}")


def groups(rucksacks: Sequence[Rucksack], size: int) -> list[tuple[Rucksack, ...]]:
    """Split rucksacks into consecutive groups of ``size``.

    Raises:
        ValidationError: If ``size`` is not positive
        InvariantViolation: If the last group would be incomplete
    """
    if size < 1:
        raise ValidationError(f"group size must be positive, got {size}", "INVALID_GROUP_SIZE")
    if len(rucksacks) % size:
        raise InvariantViolation(
            f"{len(rucksacks)} rucksacks cannot be split into groups of {size}"
        )
    return [tuple(rucksacks[i : i + size]) for i in range(0, len(rucksacks), size)]


def solve1(rucksacks: Iterable[Rucksack]) -> int:
    return sum(priority(common_item(r)) for r in rucksacks)


def solve2(rucksacks: Sequence[Rucksack], group_size: int | None = None) -> int:
    size = config.GROUP_SIZE if group_size is None else group_size
    return sum(priority(badge(group)) for group in groups(rucksacks, size))


def part1(text: str) -> int:
    return solve1(parse_input(text))


def part2(text: str) -> int:
    return solve2(parse_input(text))
