#!/usr/bin/env python

"""
CLI interface to httpwarn
"""

from argparse import ArgumentParser
from configparser import ConfigParser, Error as ConfigError
from datetime import datetime
import sys
from typing import Callable, List, Optional

import thor.events

from httpwarn import __version__, rules
from httpwarn.formatter import find_formatter, available_formatters
from httpwarn.lint import MAX_VALUE_SIZE, lint


def main(
    argv: Optional[List[str]] = None,
    output: Optional[Callable[[str], None]] = None,
    console: Callable[[str], Optional[int]] = sys.stderr.write,
) -> int:
    output = output or sys.stdout.write
    parser = ArgumentParser(description="Check HTTP Warning header field values.")
    parser.add_argument(
        "values",
        nargs="*",
        help="Warning field values to check; read one per line from STDIN if none are given",
    )
    parser.add_argument(
        "-c",
        "--config",
        action="store",
        dest="config_file",
        help="configuration file",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=available_formatters(),
        default=None,
        help="output format",
    )
    parser.add_argument(
        "-d",
        "--date",
        action="store",
        dest="message_date",
        help="the message's Date header, to compare warn-dates with",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    config_parser = ConfigParser()
    config_parser.read_dict(
        {"httpwarn": {"max_value_size": str(MAX_VALUE_SIZE), "output_format": "text"}}
    )
    if args.config_file:
        try:
            with open(args.config_file, encoding="utf-8") as config_fh:
                config_parser.read_file(config_fh)
        except (OSError, ConfigError) as why:
            console(f"Can't read configuration {args.config_file}: {why}\n")
            return 2
    config = config_parser["httpwarn"]

    message_date: Optional[datetime] = None
    if args.message_date:
        message_date = rules.parse_date(args.message_date.strip(" \t"))
        if message_date is None:
            console(f"Not a HTTP-date: {args.message_date}\n")
            return 2

    try:
        config.getint("max_value_size")
        tty_out = config.getboolean("color", fallback=sys.stdout.isatty())
    except ValueError as why:
        console(f"Bad configuration: {why}\n")
        return 2

    values = args.values or [
        line.rstrip("\r\n") for line in sys.stdin if line.strip(" \t\r\n")
    ]
    results = [lint(value, config, message_date) for value in values]
    formatter = find_formatter(
        args.output_format or config.get("output_format", "text"), "text"
    )(config, output, {"tty_out": tty_out})

    status = {"code": 0}

    @thor.events.on(formatter)
    def formatter_done() -> None:
        if any(result.value is None for result in results):
            status["code"] = 1

    formatter.format_all(results)
    return status["code"]


if __name__ == "__main__":
    sys.exit(main())
