"""Command-line entry point for the conky deadline report.

Usage:
    conky-deadlines [max_len]

Reads <course>/0-deadlines.md for every configured course and prints the
deadlines of the coming week (plus anything overdue) in conky markup.

Exit codes:
    0  report printed
    2  a course's deadline file does not exist
    3  a course's deadline file could not be read
"""

import argparse
import sys

from conky_deadlines.cli.report import cmd_report
from conky_deadlines.deadlines.render import DEFAULT_MAX_LEN


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"max length must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conky-deadlines",
        description="Print upcoming course deadlines for a conky widget",
    )
    parser.add_argument(
        "max_len", nargs="?", type=_non_negative_int, default=DEFAULT_MAX_LEN,
        help=f"Truncate item text after this many characters (default: {DEFAULT_MAX_LEN})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return cmd_report(args)


if __name__ == "__main__":
    sys.exit(main())
