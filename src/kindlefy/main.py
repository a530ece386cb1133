#!/usr/bin/env python3
"""
Kindlefy command line entry point.

Usage:
    kindlefy <file-or-directory>

Scans .js, .ts, .html and .css files for constructs the Kindle WebBrowser
engines handle badly and prints one advisory per finding. Always exits 0
once the scan completes; exits 1 if no target is given.
"""

import argparse
import logging
import sys
from typing import Optional

from .config import get_log_level
from .dispatcher import scan_file
from .file_walker import resolve_targets
from .reporter import (
    make_console,
    print_complete,
    print_report,
    print_start,
    print_usage_error,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # No flags: --help and dash-prefixed names are treated as paths
    parser = argparse.ArgumentParser(
        prog="kindlefy",
        description="Scan web sources for Kindle WebBrowser compatibility quirks",
        add_help=False,
    )
    # Optional so a missing target gets our own message and exit status 1
    parser.add_argument("target", nargs="?", help="File or directory to scan")
    return parser


def parse_target(argv: Optional[list[str]] = None) -> Optional[str]:
    """Return the target path, ignoring any extra arguments."""
    args, extras = build_parser().parse_known_args(argv)
    if args.target:
        return args.target
    return extras[0] if extras else None


def run(target: str) -> None:
    """Scan target and print the report. OSErrors propagate."""
    console = make_console()
    files = resolve_targets(target)

    print_start(console)
    for path in files:
        report = scan_file(path)
        if report is not None:
            print_report(console, report)
    print_complete(console)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the kindlefy command."""
    logging.basicConfig(level=get_log_level())

    target = parse_target(argv)
    if not target:
        print_usage_error(make_console())
        return 1

    logger.debug(f"Scanning target: {target}")
    run(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
