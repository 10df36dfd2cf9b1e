#!/usr/bin/env python3
"""
Report how many days ago each entry under a path was created, modified and accessed.

Useful to decide whether files have gone unused for long enough to be removed.
This is a thin wrapper around the last_access_scanner package.
"""
from __future__ import annotations

from last_access_scanner.cli import main

if __name__ == "__main__":  # pragma: no cover - script entry point
    try:
        raise SystemExit(main())
    except KeyboardInterrupt as exc:
        raise SystemExit("\nAborted by user.") from exc
