"""Type definitions, result dataclasses and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class DayResult:
    """Result of solving one part of one puzzle day."""

    ok: bool
    day: int
    part: int
    answer: int | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "day": self.day, "part": self.part}
        if self.answer is not None:
            result_dict["answer"] = self.answer
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"DayResult(ok=False, day={self.day}, part={self.part}, "
                f"error={self.error!r}, error_code={self.error_code!r})"
            )
        return f"DayResult(ok=True, day={self.day}, part={self.part}, answer={self.answer!r})"


class AdventError(Exception):
    """Base class for every error raised while reading, parsing or solving."""

    default_code = "ADVENT_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(AdventError):
    """Raised when an argument or raw input fails validation."""

    default_code = "VALIDATION_ERROR"


class InputError(AdventError):
    """Raised when the puzzle input cannot be loaded."""

    default_code = "INPUT_ERROR"


class ParseError(AdventError):
    """Raised when parsing fails."""

    default_code = "PARSE_ERROR"

    def __init__(self, message: str, code: str | None = None, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message, code)


class ComputationError(AdventError):
    """Raised when a solver cannot produce an answer from parsed input."""

    default_code = "COMPUTATION_ERROR"


class EmptyInputError(ComputationError):
    """Raised when an aggregation needs at least one record and got none."""

    default_code = "EMPTY_INPUT"


class InvariantViolation(ComputationError):
    """Raised when input breaks a guarantee of the puzzle, e.g. exactly one common item."""

    default_code = "INVARIANT_VIOLATION"
