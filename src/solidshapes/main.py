"""
Command Line Entry Point
========================
Runs one or more of the SOLID demos and prints their output to stdout.

Usage:
    $ solidshapes                 # every demo, in order
    $ solidshapes srp dip         # selected demos
    $ solidshapes --list
    $ solidshapes lsp --log-level debug
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from solidshapes import config
from solidshapes.demos import list_keys, run_demo
from solidshapes.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solidshapes",
        description="Shape area demos, one per SOLID principle.",
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help=f"Demo(s) to run: {', '.join(list_keys())}. Default: all.",
    )
    parser.add_argument("--all", action="store_true", help="Run every demo (the default).")
    parser.add_argument("--list", action="store_true", help="List the available demos and exit.")
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (overrides ${config.LOG_LEVEL_ENV}).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help=f"Also write logs to this file (overrides ${config.LOG_FILE_ENV}).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    unknown = [key for key in args.demos if key not in list_keys()]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")

    level = config.parse_log_level(args.log_level) if args.log_level else config.get_log_level()
    setup_logging(level=level, log_file=args.log_file or config.get_log_file())

    if args.list:
        for key in list_keys():
            print(key)
        return 0

    keys = list_keys() if args.all or not args.demos else args.demos
    for key in keys:
        try:
            run_demo(key)
        except Exception:
            logger.exception(f"Demo '{key}' failed")
            raise
    return 0
