"""Loading raw puzzle input from disk or from a literal string."""

from __future__ import annotations

from pathlib import Path

from . import config
from .logging_config import get_logger
from .types import InputError, ValidationError

logger = get_logger("reader")


def load_text(text: str) -> str:
    """Validate a literal input string and trim surrounding whitespace.

    Args:
        text: Raw puzzle input

    Returns:
        The trimmed input

    Raises:
        ValidationError: If the input is not a string or exceeds MAX_INPUT_LENGTH
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"Input must be a string, got {type(text).__name__}", "INVALID_INPUT_TYPE"
        )
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long ({len(text)} characters, limit is {config.MAX_INPUT_LENGTH})",
            "TOO_LONG",
        )
    return text.strip()


def default_input_path(day: int) -> Path:
    """Return the conventional location of a day's input file."""
    return Path(config.DATA_DIR) / config.INPUT_FILE_TEMPLATE.format(day=day)


def read_input(path: str | Path) -> str:
    """Read a UTF-8 puzzle input file and return its trimmed contents.

    Raises:
        InputError: If the file does not exist or cannot be decoded
        ValidationError: If the file exceeds MAX_INPUT_LENGTH
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError(f"Input file not found: {path}", "INPUT_NOT_FOUND") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read input file {path}: {e}", "INPUT_UNREADABLE") from e
    logger.debug("read %d characters from %s", len(raw), path)
    return load_text(raw)
