"""Hidden-entry filtering applied during traversal."""

from __future__ import annotations

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    """Return True for dotfiles and dot-directories."""
    return name.startswith(HIDDEN_PREFIX)


def is_excluded(name: str, skip_hidden: bool) -> bool:
    """Return True when the entry (and its subtree) must not be traversed."""
    return skip_hidden and is_hidden(name)
