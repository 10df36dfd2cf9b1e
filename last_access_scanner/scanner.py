"""
Scan orchestration: root validation, traversal and metadata collection.
"""

from __future__ import annotations

import logging
import os
import stat as stat_module
import time
from typing import Iterator

from .config import ScanConfig
from .metadata import VisitedEntry, visit
from .walker import walk_entries


class RootPathError(RuntimeError):
    """Raised when the scan root cannot be inspected."""


def check_root(config: ScanConfig) -> None:
    """Ensure the root exists and, when it will be descended into, is listable.

    Raises:
        RootPathError: If the root cannot be stat'ed or listed.
    """
    try:
        root_stat = os.stat(config.root)
    except OSError as exc:
        raise RootPathError(f"Cannot access root path {config.root}: {exc}") from exc
    if not stat_module.S_ISDIR(root_stat.st_mode) or config.max_depth == 0:
        return
    try:
        with os.scandir(config.root):
            pass
    except OSError as exc:
        raise RootPathError(f"Cannot list root path {config.root}: {exc}") from exc


def scan(config: ScanConfig, now: float | None = None) -> Iterator[VisitedEntry]:
    """Yield a VisitedEntry for every entry reachable under `config`.

    The root is validated before anything is yielded, so callers need no
    separate check_root call.

    All ages are computed against a single reference time, captured when the
    scan starts unless `now` is supplied.

    Raises:
        RootPathError: If the root is inaccessible (raised on first iteration).
    """
    check_root(config)
    reference = time.time() if now is None else now
    logging.debug(
        "Scanning %s (max_depth=%d, skip_hidden=%s)",
        config.root,
        config.max_depth,
        config.skip_hidden,
    )
    for entry in walk_entries(config.root, config.max_depth, config.skip_hidden):
        yield visit(entry, reference)
