"""Convert file timestamps into whole-day ages."""

from __future__ import annotations

import math
from datetime import timedelta

SECONDS_IN_DAY = 86_400


def duration_to_days(duration: float | timedelta) -> int:
    """Return the number of days in `duration`, rounded half away from zero.

    Accepts seconds or a timedelta. Zero and negative durations (timestamps
    in the future, clock skew) count as 0 days.
    """
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    if seconds <= 0:
        return 0
    return int(math.floor(seconds / SECONDS_IN_DAY + 0.5))


def age_in_days(timestamp: float | None, now: float) -> int | None:
    """Return days elapsed between `timestamp` and `now`, or None when unknown."""
    if timestamp is None:
        return None
    return duration_to_days(now - timestamp)
