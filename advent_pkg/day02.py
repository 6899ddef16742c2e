"""Day 2: Rock Paper Scissors.

Each line of the strategy guide is ``<opponent> <response>``. The opponent
column uses ``A``/``B``/``C`` for Rock/Paper/Scissors. The response column uses
``X``/``Y``/``Z`` and means either my own shape (part 1) or the outcome I
should force (part 2).

Dominance is cyclic, so it is computed with arithmetic on shape indices
modulo 3 rather than a case table: ``(mine - theirs) % 3`` is 0 for a draw,
1 when I win and 2 when I lose.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, NamedTuple, Union

from .logging_config import get_logger
from .types import ParseError, ValidationError

logger = get_logger("day02")

TITLE = "Rock Paper Scissors"

EXAMPLE_INPUT = """\
A Y
B X
C Z
"""
EXAMPLE_ANSWERS = (15, 12)

MODES = ("shape", "outcome")


class Shape(Enum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def score(self) -> int:
        return self.value + 1

    def shift(self, steps: int) -> "Shape":
        """Return the shape ``steps`` places further round the cycle."""
        return Shape((self.value + steps) % 3)


class Outcome(Enum):
    # Values are the offset (mine - theirs) mod 3 that produces the outcome
    DRAW = 0
    WIN = 1
    LOSS = 2

    @property
    def score(self) -> int:
        return _OUTCOME_SCORES[self]

    def reversed(self) -> "Outcome":
        """Return the outcome as seen by the other player."""
        return Outcome((-self.value) % 3)


_OUTCOME_SCORES = {Outcome.LOSS: 0, Outcome.DRAW: 3, Outcome.WIN: 6}

OPPONENT_TOKENS = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
SHAPE_TOKENS = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
OUTCOME_TOKENS = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}


class Round(NamedTuple):
    theirs: Shape
    response: Union[Shape, Outcome]


def parse_input(text: str, mode: str = "shape") -> tuple[Round, ...]:
    """Parse a strategy guide.

    Args:
        text: Raw input, one round per line
        mode: ``"shape"`` to read the second column as my shape,
            ``"outcome"`` to read it as the desired outcome

    Returns:
        Rounds in input order

    Raises:
        ParseError: If a line does not hold exactly two valid tokens
        ValidationError: If ``mode`` is unknown
    """
    if mode not in MODES:
        raise ValidationError(f"Unknown parse mode {mode!r}, expected one of {MODES}", "INVALID_MODE")
    response_tokens = SHAPE_TOKENS if mode == "shape" else OUTCOME_TOKENS

    rounds = []
    for line_no, raw_line in enumerate(text.strip().splitlines(), start=1):
        tokens = raw_line.split()
        if len(tokens) != 2:
            raise ParseError(
                f"expected two tokens, got {len(tokens)} in {raw_line.strip()!r}",
                "WRONG_TOKEN_COUNT",
                line_no,
            )
        first, second = tokens
        if first not in OPPONENT_TOKENS:
            raise ParseError(
                f"invalid opponent token {first!r}, expected one of A, B, C",
                "INVALID_TOKEN",
                line_no,
            )
        if second not in response_tokens:
            raise ParseError(
                f"invalid response token {second!r}, expected one of X, Y, Z",
                "INVALID_TOKEN",
                line_no,
            )
        rounds.append(Round(OPPONENT_TOKENS[first], response_tokens[second]))

    logger.debug("parsed %d rounds in %s mode", len(rounds), mode)
    return tuple(rounds)


def decide_outcome(theirs: Shape, mine: Shape) -> Outcome:
    """Return the outcome of a round from my point of view."""
    return Outcome((mine.value - theirs.value) % 3)


def shape_for_outcome(theirs: Shape, outcome: Outcome) -> Shape:
    """Return the shape I must play against ``theirs`` to get ``outcome``."""
    return theirs.shift(outcome.value)


def score_round(theirs: Shape, mine: Shape) -> int:
    return mine.score + decide_outcome(theirs, mine).score


def score(rounds: Iterable[Round]) -> int:
    """Total score when the second column is my shape."""
    total = 0
    for theirs, mine in rounds:
        if not isinstance(mine, Shape):
            raise ValidationError("round was parsed in outcome mode, expected shapes", "INVALID_MODE")
        total += score_round(theirs, mine)
    return total


def score_with_outcomes(rounds: Iterable[Round]) -> int:
    """Total score when the second column is the outcome to force."""
    total = 0
    for theirs, outcome in rounds:
        if not isinstance(outcome, Outcome):
            raise ValidationError("round was parsed in shape mode, expected outcomes", "INVALID_MODE")
        total += score_round(theirs, shape_for_outcome(theirs, outcome))
    return total


def part1(text: str) -> int:
    return score(parse_input(text, mode="shape"))


def part2(text: str) -> int:
    return score_with_outcomes(parse_input(text, mode="outcome"))
