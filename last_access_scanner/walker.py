"""Depth-bounded, pre-order directory traversal."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .filters import is_excluded


@dataclass(frozen=True)
class WalkedEntry:
    """A filesystem entry reached by the walker."""

    path: Path
    name: str
    depth: int
    is_dir: bool


def printable_name(name: str) -> str:
    """Return `name` with undecodable filename bytes shown as \\xNN escapes."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def display_name(path: Path) -> str:
    """Return the final path component, or the path itself for '.', '/' and friends."""
    return printable_name(path.name or str(path))


def _entry_is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _list_directory(directory: Path) -> list[os.DirEntry] | None:
    """Return directory entries in filesystem order, or None if unreadable."""
    try:
        with os.scandir(directory) as iterator:
            entries = list(iterator)
    except OSError as exc:
        logging.warning("Unable to list %s: %s", directory, exc)
        return None
    logging.debug("Listed %d entries in %s", len(entries), directory)
    return entries


def _walk_children(directory: Path, depth: int, max_depth: int, skip_hidden: bool) -> Iterator[WalkedEntry]:
    children = _list_directory(directory)
    if children is None:
        return
    for child in children:
        if is_excluded(child.name, skip_hidden):
            continue
        walked = WalkedEntry(
            path=Path(child.path),
            name=printable_name(child.name),
            depth=depth,
            is_dir=_entry_is_dir(child),
        )
        yield walked
        if walked.is_dir and depth < max_depth:
            yield from _walk_children(walked.path, depth + 1, max_depth, skip_hidden)


def walk_entries(root: Path, max_depth: int, skip_hidden: bool) -> Iterator[WalkedEntry]:
    """Yield the root and every entry below it down to `max_depth`.

    Entries come in pre-order; siblings keep the order the filesystem returns.
    Hidden entries are pruned together with their subtrees when `skip_hidden`
    is set. The root itself is never filtered and always follows symlinks;
    symlinks below it are not followed.
    """
    root = Path(root)
    root_entry = WalkedEntry(path=root, name=display_name(root), depth=0, is_dir=root.is_dir())
    yield root_entry
    if root_entry.is_dir and max_depth > 0:
        yield from _walk_children(root, 1, max_depth, skip_hidden)
