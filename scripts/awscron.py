#!/usr/bin/env python3
#
# awscron: Convert Unix crontab schedules to AWS EventBridge cron expressions
#
# Invocation pattern:
#     python awscron.py "30 9 * * 1-5" [--year 2026]
#     python awscron.py --json '{"minute": "0", "hour": "12", ...}'
#     python awscron.py --file schedules.txt
#

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure library modules are discoverable
MODULE_ROOT = Path(__file__).parent.resolve()
sys.path.insert(0, str(MODULE_ROOT))

from awscron_engine import config
from awscron_engine.convert import convert
from awscron_engine.errors import CronConversionError


log = logging.getLogger("awscron")


def setup_logging(debug: bool = False) -> logging.Logger:
    """Sends awscron log records to stderr."""
    log.handlers.clear()
    log.setLevel(logging.DEBUG if debug else logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    log.addHandler(handler)

    return log


def _ignore(message: str) -> None:
    pass


def _read_lines(source: str):
    if source == "-":
        return sys.stdin.read().splitlines()
    return Path(source).read_text(encoding="utf-8").splitlines()


def _convert_batch(lines, year, notify) -> int:
    """Converts one expression per line. Returns the exit code."""
    exit_code = 0
    for number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            print(convert(line, year, notify=notify))
        except CronConversionError as err:
            print("line {}: {}".format(number, err), file=sys.stderr)
            exit_code = 1
    return exit_code


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a Unix crontab schedule to an AWS EventBridge cron expression"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "expression",
        nargs="?",
        help='5-field Unix cron expression, e.g. "0 9 * * 1-5"',
    )
    source.add_argument(
        "--json",
        dest="record",
        type=str,
        metavar="TEXT",
        help="JSON object with minute, hour, dayOfMonth, month, dayOfWeek (and optional year)",
    )
    source.add_argument(
        "--file",
        type=str,
        metavar="PATH",
        help="Convert one expression per line from PATH ('-' for stdin)",
    )
    parser.add_argument(
        "--year",
        type=str,
        help="Year field (1970-2199, a range like 2024-2026, or *)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress advisory notices",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging",
    )
    args = parser.parse_args(argv)

    settings = config.load_config()
    setup_logging(args.debug or config.is_truthy(settings["AWSCRON_DEBUG"]))

    year = args.year if args.year is not None else settings["AWSCRON_YEAR"]
    quiet = args.quiet or config.is_truthy(settings["AWSCRON_QUIET"])
    notify = _ignore if quiet else None
    log.debug("Using year=%s quiet=%s", year, quiet)

    if args.file:
        try:
            lines = _read_lines(args.file)
        except OSError as err:
            print("Error: Cannot read {}: {}".format(args.file, err), file=sys.stderr)
            return 1
        return _convert_batch(lines, year, notify)

    if args.record is not None:
        try:
            value = json.loads(args.record)
        except json.JSONDecodeError as err:
            print("Error: Invalid JSON: {}".format(err), file=sys.stderr)
            return 1
    else:
        value = args.expression

    try:
        print(convert(value, year, notify=notify))
    except CronConversionError as err:
        print("Error: {}".format(err), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
