"""
Argument parsing for the las CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import (
    SKIP_HIDDEN_CHOICES,
    ConfigurationError,
    ScanConfig,
    config_defaults,
    load_env_defaults,
    parse_bool_flag,
    parse_max_depth,
)

PROG = "las"
VERSION = "0.1"
DESCRIPTION = (
    "LAS - Last Access Scanner. Inspect entries in a path to check for creation, modification and "
    "last access dates; useful to decide if files are unused by a long time and can be removed "
    "from your system. Ages are reported in days. Creation ages show n/a where the platform "
    "does not expose file birth times (for example on Linux)."
)


def non_negative_int(value: str) -> int:
    """argparse type for --max_depth."""
    try:
        return parse_max_depth(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def add_path_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the root path, accepted positionally or via --path."""
    parser.add_argument("path", nargs="?", help="Root folder to begin scanning.")
    parser.add_argument("--path", dest="path_option", metavar="PATH", help="Root folder to begin scanning.")


def add_scan_arguments(parser: argparse.ArgumentParser, defaults: dict[str, object]) -> None:
    """Add traversal arguments."""
    parser.add_argument(
        "-m",
        "--max_depth",
        "--max-depth",
        dest="max_depth",
        type=non_negative_int,
        default=defaults["max_depth"],
        help="Limit the recursion level of the scanning; 0 reports the root only (default: %(default)s).",
    )
    parser.add_argument(
        "-s",
        "--skip_hidden",
        "--skip-hidden",
        dest="skip_hidden",
        choices=SKIP_HIDDEN_CHOICES,
        default="true" if defaults["skip_hidden"] else "false",
        help="Skip hidden files and directories (default: %(default)s).",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add logging and informational arguments."""
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    parser.add_argument("--version", action="version", version=f"{PROG} {VERSION}")


def _peek_env_file(argv: list[str]) -> str | None:
    """Read --env-file ahead of the full parse so it can feed the defaults."""
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--env-file")
    known, _ = pre_parser.parse_known_args(argv)
    return known.env_file


def build_parser(defaults: dict[str, object]) -> argparse.ArgumentParser:
    """Create the ArgumentParser using the resolved defaults."""
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    add_path_arguments(parser)
    add_scan_arguments(parser, defaults)
    parser.add_argument(
        "--env-file",
        help="Optional .env file providing LAS_MAX_DEPTH / LAS_SKIP_HIDDEN defaults (default: $LAS_ENV_FILE or ~/.env).",
    )
    add_output_arguments(parser)
    return parser


def _validate_and_transform_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Resolve the root path and build the ScanConfig."""
    if args.path and args.path_option and Path(args.path) != Path(args.path_option):
        parser.error(f"conflicting root paths: {args.path!r} and --path {args.path_option!r}")
    root = args.path or args.path_option
    if not root:
        parser.error("a root path is required (positional PATH or --path)")
    args.root = Path(root).expanduser()
    args.skip_hidden = parse_bool_flag(args.skip_hidden)
    args.config = ScanConfig(root=args.root, max_depth=args.max_depth, skip_hidden=args.skip_hidden)


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and process command-line arguments for las."""
    env_error: ConfigurationError | None = None
    try:
        defaults = load_env_defaults(_peek_env_file(argv))
    except ConfigurationError as exc:
        defaults, env_error = config_defaults(), exc
    parser = build_parser(defaults)
    if env_error is not None:
        parser.error(str(env_error))

    args = parser.parse_args(argv)
    _validate_and_transform_args(args, parser)
    return args
