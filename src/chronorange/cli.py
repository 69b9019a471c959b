"""chronorange CLI entry point.

Usage:
    chronorange match 2024-12-31 --range 2024-12-24 2025-01-02 --range 2025-04-18 -
    chronorange compare 2000-12-24T12:00:00Z "<" 2000-12-26 --precision day
    chronorange format 2024-03-01T15:04:00Z "dddd, MMMM DD YYYY" --timezone Europe/Lisbon

match/compare print true or false and exit 0 or 1 accordingly.
Library errors print to stderr and exit 2.
"""
import argparse
import logging
import sys

from chronorange.constraints.comparison import ComparisonOperator, compare
from chronorange.constraints.constraint_set import create_constraint_set
from chronorange.domain.errors import ChronorangeError
from chronorange.domain.options import DateOptions
from chronorange.domain.types import Precision
from chronorange.formatting.formatter import create_formatter

OPEN_END = "-"


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--precision", choices=[pr.value for pr in Precision], default=None,
        help="Comparison granularity (default: milliseconds for match, day for compare)",
    )


def _add_match_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "match",
        help="Check whether a date satisfies at least one constraint.",
    )
    p.add_argument("date", help="Date to test (ISO-8601 or epoch milliseconds)")
    p.add_argument(
        "--range", nargs=2, action="append", default=[], metavar=("START", "END"),
        help=f"Inclusive range; use '{OPEN_END}' for an open end. Repeatable.",
    )
    p.add_argument(
        "--at", action="append", default=[], metavar="DATE",
        help="Single-date constraint. Repeatable.",
    )
    _add_common(p)


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Compare two dates with <=, <, =, >, >=.",
    )
    p.add_argument("date")
    p.add_argument("operator", help="One of: " + ", ".join(op.value for op in ComparisonOperator))
    p.add_argument("other")
    _add_common(p)


def _add_format_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "format",
        help="Render a date with a token format (YYYY, MM, DD, HH, mm, ...).",
    )
    p.add_argument("date")
    p.add_argument("format")
    p.add_argument("--timezone", default=None, help="zoneinfo key (default: UTC)")


def _parse_date_arg(value: str) -> str | int:
    # Bare integers on the command line are epoch milliseconds.
    try:
        return int(value)
    except ValueError:
        return value


def _run_match(args: argparse.Namespace, options: DateOptions) -> bool:
    constraints = [
        (_open_date(start), _open_date(end)) for start, end in args.range
    ]
    constraints.extend(_parse_date_arg(at) for at in args.at)
    constraint_set = create_constraint_set(*constraints, options=options)
    return constraint_set.match(
        _parse_date_arg(args.date), args.precision or Precision.MILLISECONDS
    )


def _open_date(value: str) -> str | int | None:
    return None if value == OPEN_END else _parse_date_arg(value)


def _run_compare(args: argparse.Namespace, options: DateOptions) -> bool:
    return compare(
        args.operator,
        _parse_date_arg(args.date),
        _parse_date_arg(args.other),
        args.precision or Precision.DAY,
        options,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="chronorange",
        description="Date constraint matching, comparison and formatting.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_match_parser(subparsers)
    _add_compare_parser(subparsers)
    _add_format_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = DateOptions.from_env()
        if args.command == "format":
            formatter = create_formatter(args.format, args.timezone)
            print(formatter.format(_parse_date_arg(args.date)))
            sys.exit(0)
        if args.command == "match":
            result = _run_match(args, options)
        else:
            result = _run_compare(args, options)
    except ChronorangeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    print("true" if result else "false")
    sys.exit(0 if result else 1)
