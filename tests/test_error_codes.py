"""Test error codes and the error taxonomy."""

import unittest

from advent_pkg import day01, day02, day03
from advent_pkg.types import (
    AdventError,
    ComputationError,
    EmptyInputError,
    InvariantViolation,
    ParseError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that parsers and solvers raise errors with the right codes."""

    def test_parse_error_code(self):
        try:
            day01.parse_input("12\nx")
            self.fail("Should have raised ParseError")
        except ParseError as e:
            self.assertEqual(e.code, "INVALID_INTEGER")
            self.assertTrue(str(e).startswith("line 2:"))

    def test_token_count_error_code(self):
        with self.assertRaises(ParseError) as ctx:
            day02.parse_input("A")
        self.assertEqual(ctx.exception.code, "WRONG_TOKEN_COUNT")

    def test_empty_input_is_computation_error(self):
        with self.assertRaises(ComputationError) as ctx:
            day01.find_max_sum(day01.parse_input(""))
        self.assertIsInstance(ctx.exception, EmptyInputError)
        self.assertEqual(ctx.exception.code, "EMPTY_INPUT")

    def test_invariant_violation_is_computation_error(self):
        with self.assertRaises(ComputationError) as ctx:
            day03.solve1(day03.parse_input("abcd"))
        self.assertIsInstance(ctx.exception, InvariantViolation)

    def test_all_errors_share_a_base(self):
        for exc_type in (ParseError, EmptyInputError, InvariantViolation):
            self.assertTrue(issubclass(exc_type, AdventError))

    def test_explicit_code_overrides_default(self):
        error = InvariantViolation("boom", code="CUSTOM")
        self.assertEqual(error.code, "CUSTOM")
        self.assertEqual(str(error), "boom")

    def test_parse_error_without_line(self):
        error = ParseError("bad input")
        self.assertIsNone(error.line)
        self.assertEqual(str(error), "bad input")
        self.assertEqual(error.code, "PARSE_ERROR")


if __name__ == "__main__":
    unittest.main()
