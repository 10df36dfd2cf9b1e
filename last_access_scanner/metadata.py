"""
Metadata extraction for walked entries.

Reads are lenient: an entry whose metadata cannot be read is still reported,
with every age marked unavailable (None), and the scan carries on.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from .timeutils import age_in_days
from .walker import WalkedEntry

INDENT = "    "


class EntryAges(NamedTuple):
    """Ages in days; None means the timestamp is unavailable."""

    created: int | None
    modified: int | None
    accessed: int | None


UNAVAILABLE_AGES = EntryAges(created=None, modified=None, accessed=None)


@dataclass(frozen=True)
class VisitedEntry:
    """A walked entry together with its computed ages."""

    path: Path
    name: str
    depth: int
    is_dir: bool
    created: int | None
    modified: int | None
    accessed: int | None

    @property
    def indented_name(self) -> str:
        """Return the name indented proportionally to its depth."""
        return f"{INDENT * self.depth}{self.name}"


def read_ages(path: Path, now: float, *, follow_symlinks: bool = False) -> EntryAges:
    """Stat `path` and convert its timestamps into ages relative to `now`.

    Creation time is only reported where the platform exposes st_birthtime.
    """
    try:
        stat = os.stat(path) if follow_symlinks else os.lstat(path)
    except OSError as exc:
        logging.warning("Can't retrieve metadata for %s: %s", path, exc)
        return UNAVAILABLE_AGES
    return EntryAges(
        created=age_in_days(getattr(stat, "st_birthtime", None), now),
        modified=age_in_days(stat.st_mtime, now),
        accessed=age_in_days(stat.st_atime, now),
    )


def visit(entry: WalkedEntry, now: float) -> VisitedEntry:
    """Build the reportable form of a walked entry."""
    ages = read_ages(entry.path, now, follow_symlinks=entry.depth == 0)
    return VisitedEntry(
        path=entry.path,
        name=entry.name,
        depth=entry.depth,
        is_dir=entry.is_dir,
        created=ages.created,
        modified=ages.modified,
        accessed=ages.accessed,
    )
