# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ethiocal.config import (
    CalendarConfig,
    ConfigurationError,
    configure_logging,
    get_calendar_config,
    verbosity_level,
)
from ethiocal.domain.arithmetic import add_days_ec, current_ec_date, diff_days_ec
from ethiocal.domain.calendar import ec_to_gregorian, gregorian_to_ec
from ethiocal.domain.errors import EthiopianDateError
from ethiocal.domain.formatting import coerce_locale, coerce_style, format_ec, parse_ec_date
from ethiocal.domain.model import DateStyle, ECDate, Locale
from ethiocal.domain.validation import is_valid_ec_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _add_display_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--locale",
        choices=[locale.value for locale in Locale],
        help="Month-name language for the long style (defaults to config)",
    )
    parser.add_argument(
        "--style",
        choices=[style.value for style in DateStyle],
        help="Output style (defaults to config)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert between Gregorian and Ethiopian dates")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_ec = subparsers.add_parser("to-ec", help="Convert a Gregorian date (YYYY-MM-DD)")
    to_ec.add_argument("date", type=str, help="Gregorian date in ISO format")
    _add_display_options(to_ec)

    to_gregorian = subparsers.add_parser(
        "to-gregorian",
        help="Convert an Ethiopian date (YYYY-MM-DD) to Gregorian",
    )
    to_gregorian.add_argument("ec_date", type=str, help="Ethiopian date in ISO format")

    today = subparsers.add_parser("today", help="Show the current Ethiopian date")
    _add_display_options(today)

    add = subparsers.add_parser("add", help="Add days to an Ethiopian date")
    add.add_argument("ec_date", type=str, help="Ethiopian date in ISO format")
    add.add_argument("days", type=int, help="Number of days to add (may be negative)")
    _add_display_options(add)

    diff = subparsers.add_parser("diff", help="Count the days between two Ethiopian dates")
    diff.add_argument("start", type=str, help="Ethiopian date in ISO format")
    diff.add_argument("end", type=str, help="Ethiopian date in ISO format")

    validate = subparsers.add_parser("validate", help="Check an Ethiopian date")
    validate.add_argument("ec_date", type=str, help="Ethiopian date in ISO format")

    return parser.parse_args(list(argv))


def _today() -> date:
    return date.today()  # noqa: DTZ011


def _parse_gregorian(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid Gregorian date: {value}") from exc


def _render(ec: ECDate, args: argparse.Namespace, config: CalendarConfig) -> str:
    locale = coerce_locale(args.locale) if args.locale else config.locale
    style = coerce_style(args.style) if args.style else config.style
    return format_ec(ec, locale, style)


def _run_command(args: argparse.Namespace, config: CalendarConfig) -> int:
    if args.command == "to-ec":
        print(_render(gregorian_to_ec(_parse_gregorian(args.date)), args, config))
    elif args.command == "to-gregorian":
        print(ec_to_gregorian(parse_ec_date(args.ec_date)).isoformat())
    elif args.command == "today":
        print(_render(current_ec_date(clock=_today), args, config))
    elif args.command == "add":
        print(_render(add_days_ec(parse_ec_date(args.ec_date), args.days), args, config))
    elif args.command == "diff":
        print(diff_days_ec(parse_ec_date(args.start), parse_ec_date(args.end)))
    elif args.command == "validate":
        ec = parse_ec_date(args.ec_date)
        valid = is_valid_ec_date(ec)
        print("valid" if valid else "invalid")
        return 0 if valid else 1
    else:
        raise ValueError(f"Unsupported command: {args.command}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=verbosity_level(verbose=parsed_args.verbose), force=True)

    try:
        config = get_calendar_config()
        status = _run_command(parsed_args, config)
    except (ConfigurationError, EthiopianDateError, ValueError) as exc:
        log.debug("Command %s rejected its input", parsed_args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while running %s", parsed_args.command)
        sys.exit(1)

    if status:
        sys.exit(status)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
