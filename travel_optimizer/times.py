"""Time-of-day helpers.

Schedules carry wall-clock times in ``HH:mm`` 24-hour format with no date
component. Everything here is a pure function: parsing is a fixed rule,
not a shared formatter object.
"""

from __future__ import annotations

import re
from datetime import time

_HH_MM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_time_of_day(text: str) -> time:
    """Parse an ``HH:mm`` string into a ``datetime.time``.

    Surrounding whitespace is ignored. Both fields must be two digits.

    Raises:
        ValueError: If ``text`` is not a valid 24-hour ``HH:mm`` value.
    """
    match = _HH_MM.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid time of day {text!r}, expected HH:mm")
    return time(hour=int(match.group(1)), minute=int(match.group(2)))


def format_time_of_day(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def minute_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def minutes_between(start: time, end: time) -> int:
    """Signed number of minutes from ``start`` to ``end`` on the same day."""
    return minute_of_day(end) - minute_of_day(start)
