from __future__ import annotations

import re
from datetime import datetime
from enum import Enum

MINUTES_PER_DAY = 1440

# "7:00 AM – 10:00 PM", "10:00pm-2:00am"; separator is an en-dash or hyphen.
_HOURS_RE = re.compile(
    r"(\d{1,2}):(\d{2})\s*(AM|PM)\s*[–-]\s*(\d{1,2}):(\d{2})\s*(AM|PM)",
    re.IGNORECASE,
)


class OpenState(str, Enum):
    open = "open"
    closed = "closed"
    unknown = "unknown"


def _to_minutes(hour: str, minute: str, period: str) -> int:
    h = int(hour)
    period = period.upper()
    if period == "PM" and h != 12:
        h += 12
    if period == "AM" and h == 12:
        h = 0
    return h * 60 + int(minute)


def current_minutes(now: datetime | None = None) -> int:
    """Minutes since local midnight for *now* (defaults to the wall clock)."""
    now = now or datetime.now()
    return now.hour * 60 + now.minute


def is_open_now(hours: str | None, now_minutes: int) -> OpenState:
    """
    Evaluate a free-text hours string against a time of day.

    Returns ``OpenState.unknown`` when no ``H:MM AM – H:MM PM`` range can be
    found. A close time of 12:00 AM means end of day, and a close time at or
    before the open time is read as an overnight range.
    """
    if not isinstance(hours, str):
        return OpenState.unknown
    match = _HOURS_RE.search(hours)
    if not match:
        return OpenState.unknown

    open_h, open_m, open_p, close_h, close_m, close_p = match.groups()
    open_minutes = _to_minutes(open_h, open_m, open_p)
    close_minutes = _to_minutes(close_h, close_m, close_p)
    if close_minutes == 0:
        close_minutes = MINUTES_PER_DAY

    if close_minutes > open_minutes:
        is_open = open_minutes <= now_minutes < close_minutes
    else:
        is_open = now_minutes >= open_minutes or now_minutes < close_minutes
    return OpenState.open if is_open else OpenState.closed
