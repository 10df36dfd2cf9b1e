"""
Last access scanner package.

Walk a directory tree and report, per entry, how many days ago it was
created, last modified and last accessed.
"""

from . import args_parser, cli, config, filters, metadata, reports, scanner, timeutils, walker
from .config import ConfigurationError, ScanConfig
from .metadata import EntryAges, VisitedEntry
from .scanner import RootPathError, scan
from .timeutils import duration_to_days

__all__ = [
    "ConfigurationError",
    "EntryAges",
    "RootPathError",
    "ScanConfig",
    "VisitedEntry",
    "args_parser",
    "cli",
    "config",
    "duration_to_days",
    "filters",
    "metadata",
    "reports",
    "scan",
    "scanner",
    "timeutils",
    "walker",
]
