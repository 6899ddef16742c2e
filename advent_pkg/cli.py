from __future__ import annotations

import argparse
import json
import sys

from . import config as _config
from .api import DAYS, available_days, example, solve, solve_all_parts
from .logging_config import get_logger, setup_logging
from .reader import default_input_path, load_text, read_input
from .types import AdventError, DayResult

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def _health_check() -> int:
    """Run every day's worked example and compare against the known answers.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Advent health check...")
    print("-" * 50)

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    for day in available_days():
        text, expected = example(day)
        for part, want in zip((1, 2), expected):
            result = solve(day, part, text)
            if result.ok and result.answer == want:
                print(f"[OK] Day {day} part {part} example gives {want}")
                checks_passed += 1
            else:
                got = result.answer if result.ok else result.error
                print(f"[FAIL] Day {day} part {part} example: expected {want}, got {got}")
                checks_failed += 1

    print("-" * 50)
    print(f"Health check complete: {checks_passed} passed, {checks_failed} failed")
    return EXIT_OK if checks_failed == 0 else EXIT_FAILURE


def _print_days() -> None:
    for day in available_days():
        print(f"Day {day:2d}: {DAYS[day].TITLE}")


def _emit_error(error: str, code: str, output_format: str) -> None:
    if output_format == "json":
        print(json.dumps({"ok": False, "error": error, "code": code}))
    else:
        print(f"Error: {error}", file=sys.stderr)


def _emit_results(results: list[DayResult], output_format: str) -> int:
    failed = next((r for r in results if not r.ok), None)
    if failed is not None:
        _emit_error(failed.error or "Unknown error", failed.error_code or "ADVENT_ERROR", output_format)
        return EXIT_FAILURE
    if output_format == "json":
        print(json.dumps({"ok": True, "results": [r.to_dict() for r in results]}))
    else:
        for result in results:
            print(f"Day {result.day} part {result.part}: {result.answer}")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent", description="Solve Advent of Code style puzzles"
    )
    parser.add_argument("-d", "--day", type=int, help="Puzzle day to solve")
    parser.add_argument(
        "-p",
        "--part",
        type=int,
        choices=[1, 2],
        help="Solve only this part (default: both)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-i", "--input", type=str, help="Input file (default: <data-dir>/dayNN.input)"
    )
    source.add_argument(
        "-e", "--text", type=str, help="Literal puzzle input instead of a file"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--top-k", type=int, help=f"Blocks summed by day 1 part 2 (default: {_config.TOP_K})"
    )
    parser.add_argument(
        "--data-dir", type=str, help=f"Directory holding dayNN.input files (default: {_config.DATA_DIR})"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=_config.LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument("--list", action="store_true", help="List available days")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Solve every built-in example and verify the answers",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    return parser


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the Advent CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except OSError as e:
        _emit_error(f"Cannot open log file {args.log_file}: {e}", "LOG_FILE_UNWRITABLE", args.format)
        return EXIT_FAILURE

    # Apply CLI configuration overrides
    if args.top_k is not None:
        if args.top_k < 0:
            parser.error("--top-k must be non-negative")
        _config.TOP_K = args.top_k
    if args.data_dir:
        _config.DATA_DIR = args.data_dir

    if args.version:
        print(_config.VERSION)
        return EXIT_OK
    if args.list:
        _print_days()
        return EXIT_OK
    if args.health_check:
        return _health_check()
    if args.day is None:
        parser.error("--day is required (use --list to see available days)")
    if args.day not in DAYS:
        _emit_error(
            f"No solver for day {args.day}; available days: {available_days()}",
            "UNKNOWN_DAY",
            args.format,
        )
        return EXIT_FAILURE

    try:
        if args.text is not None:
            text = load_text(args.text)
        else:
            text = read_input(args.input or default_input_path(args.day))
    except AdventError as e:
        _emit_error(str(e), e.code, args.format)
        return EXIT_FAILURE

    logger.debug("solving day %d (part=%s)", args.day, args.part or "all")
    if args.part is not None:
        results = [solve(args.day, args.part, text)]
    else:
        results = solve_all_parts(args.day, text)
    return _emit_results(results, args.format)


if __name__ == "__main__":
    sys.exit(main_entry())
