"""
Command-line interface and main entry point for las.

Handles workflow orchestration and exit codes.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console

from .args_parser import parse_args
from .reports import print_report
from .scanner import RootPathError, scan


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the las CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        print_report(scan(args.config), Console())
    except RootPathError as exc:
        logging.error("%s", exc)
        return 1
    return 0
