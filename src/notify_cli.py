"""Command line entry point: console-notify."""

from __future__ import annotations

import argparse
import sys

from console_config import ConsoleConfig, env_flag
from reporters import Importance, Reporter


def add_accessibility_arguments(parser):
    """Add -A/--accessible and --no-color to a host parser."""
    parser.add_argument(
        "-A", "--accessible", action=argparse.BooleanOptionalAction,
        default=env_flag('ACCESSIBLE'),
        help="Reduce decorative and verbose output for screen readers "
             "(default: ACCESSIBLE env var)",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="Disable colored tags (also: NO_COLOR env var)",
    )
    return parser


def build_parser():
    parser = argparse.ArgumentParser(
        prog="console-notify",
        description="Print an info or warning notification",
    )
    add_accessibility_arguments(parser)
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("--warning", action="store_true",
                      help="Print a warning to stderr")
    kind.add_argument("--inaccessible", action="store_true",
                      help="Verbose info, hidden in accessibility mode")
    parser.add_argument("message", nargs="+", help="Message text")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = ConsoleConfig.from_args(args).apply()
    reporter = Reporter.from_config(config)
    message = " ".join(args.message)

    try:
        if args.warning:
            reporter.warning(message)
        elif args.inaccessible:
            reporter.info(Importance.INACCESSIBLE, message)
        else:
            reporter.info(Importance.ACCESSIBLE, message)
    except BrokenPipeError:
        # Console is gone; nothing left to report to.
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
