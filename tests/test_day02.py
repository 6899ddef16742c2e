"""Unit tests for the day 2 parser and scorer."""

import itertools
import unittest

from advent_pkg.day02 import (
    EXAMPLE_INPUT,
    Outcome,
    Round,
    Shape,
    decide_outcome,
    parse_input,
    part1,
    part2,
    score,
    score_round,
    score_with_outcomes,
    shape_for_outcome,
)
from advent_pkg.types import ParseError, ValidationError


class TestParse(unittest.TestCase):
    """Test strategy guide parsing in both modes."""

    def test_shape_mode(self):
        self.assertEqual(
            parse_input("A Y\nB X\nC Z"),
            (
                Round(Shape.ROCK, Shape.PAPER),
                Round(Shape.PAPER, Shape.ROCK),
                Round(Shape.SCISSORS, Shape.SCISSORS),
            ),
        )

    def test_outcome_mode(self):
        self.assertEqual(
            parse_input("A Y\nB X\nC Z", mode="outcome"),
            (
                Round(Shape.ROCK, Outcome.DRAW),
                Round(Shape.PAPER, Outcome.LOSS),
                Round(Shape.SCISSORS, Outcome.WIN),
            ),
        )

    def test_surrounding_whitespace(self):
        self.assertEqual(len(parse_input("\n   A Y\n   B X\n")), 2)

    def test_tab_separator(self):
        self.assertEqual(parse_input("A\tZ"), (Round(Shape.ROCK, Shape.SCISSORS),))

    def test_unknown_character(self):
        with self.assertRaises(ParseError) as ctx:
            parse_input("A Y\nD X")
        self.assertEqual(ctx.exception.code, "INVALID_TOKEN")
        self.assertEqual(ctx.exception.line, 2)

    def test_columns_are_not_interchangeable(self):
        with self.assertRaises(ParseError):
            parse_input("X A")
        with self.assertRaises(ParseError):
            parse_input("A B")

    def test_wrong_token_count(self):
        for bad in ("A", "A Y Z", "A Y\n\nB X"):
            with self.subTest(bad=bad):
                with self.assertRaises(ParseError) as ctx:
                    parse_input(bad)
                self.assertEqual(ctx.exception.code, "WRONG_TOKEN_COUNT")

    def test_multi_character_token(self):
        with self.assertRaises(ParseError):
            parse_input("AA Y")

    def test_unknown_mode(self):
        with self.assertRaises(ValidationError):
            parse_input("A Y", mode="strategy")


class TestRules(unittest.TestCase):
    """Test the cyclic dominance relation and scoring."""

    def test_each_shape_beats_exactly_one(self):
        beats = {
            Shape.ROCK: Shape.SCISSORS,
            Shape.PAPER: Shape.ROCK,
            Shape.SCISSORS: Shape.PAPER,
        }
        for mine, loser in beats.items():
            self.assertEqual(decide_outcome(loser, mine), Outcome.WIN)
            self.assertEqual(decide_outcome(mine, loser), Outcome.LOSS)

    def test_equal_shapes_draw(self):
        for shape in Shape:
            self.assertEqual(decide_outcome(shape, shape), Outcome.DRAW)

    def test_swapping_players_swaps_win_and_loss(self):
        for a, b in itertools.product(Shape, repeat=2):
            self.assertEqual(decide_outcome(a, b), decide_outcome(b, a).reversed())

    def test_shape_for_outcome_is_inverse(self):
        for theirs, outcome in itertools.product(Shape, Outcome):
            mine = shape_for_outcome(theirs, outcome)
            self.assertEqual(decide_outcome(theirs, mine), outcome)

    def test_scores(self):
        self.assertEqual([s.score for s in Shape], [1, 2, 3])
        self.assertEqual(Outcome.LOSS.score, 0)
        self.assertEqual(Outcome.DRAW.score, 3)
        self.assertEqual(Outcome.WIN.score, 6)

    def test_score_round(self):
        self.assertEqual(score_round(Shape.ROCK, Shape.PAPER), 8)
        self.assertEqual(score_round(Shape.PAPER, Shape.ROCK), 1)
        self.assertEqual(score_round(Shape.SCISSORS, Shape.SCISSORS), 6)


class TestParts(unittest.TestCase):
    def test_example_part1(self):
        self.assertEqual(score(parse_input("A Y\nB X\nC Z")), 15)
        self.assertEqual(part1(EXAMPLE_INPUT), 15)

    def test_example_part2(self):
        self.assertEqual(score_with_outcomes(parse_input("A Y\nB X\nC Z", mode="outcome")), 12)
        self.assertEqual(part2(EXAMPLE_INPUT), 12)

    def test_mode_mismatch(self):
        with self.assertRaises(ValidationError):
            score(parse_input("A Y", mode="outcome"))
        with self.assertRaises(ValidationError):
            score_with_outcomes(parse_input("A Y"))

    def test_empty_guide_scores_zero(self):
        self.assertEqual(part1(""), 0)


if __name__ == "__main__":
    unittest.main()
