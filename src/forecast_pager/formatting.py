"""Date, time, and temperature formatting for forecast samples.

Pure conversion functions with no external dependencies. Date keys drive
day grouping; everything else is display-only.
"""

from __future__ import annotations

import math
from datetime import date, datetime, tzinfo

KELVIN_OFFSET = 273.15


def local_date_key(timestamp: int, tz: tzinfo) -> str:
    """ISO calendar date (``YYYY-MM-DD``) of an epoch timestamp in ``tz``.

    Stable for every timestamp within the same local day. Used for grouping
    and headings only; sample order always comes from the input sequence.
    """
    return datetime.fromtimestamp(timestamp, tz).date().isoformat()


def local_time_label(timestamp: int, tz: tzinfo) -> str:
    """24-hour ``HH:MM`` label of an epoch timestamp in ``tz``."""
    return datetime.fromtimestamp(timestamp, tz).strftime("%H:%M")


def date_label(date_key: str) -> str:
    """Heading label for a date key, e.g. ``Mon Oct 19``."""
    day = date.fromisoformat(date_key)
    return f"{day.strftime('%a')} {day.strftime('%b')} {day.day}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Unlike the built-in ``round`` this never rounds to even: 2.5 -> 3,
    -2.5 -> -2.
    """
    return math.floor(value + 0.5)


def kelvin_to_celsius(kelvin: float) -> int:
    """Whole-degree Celsius for display."""
    return round_half_up(kelvin - KELVIN_OFFSET)


def format_temperature(kelvin: float) -> str:
    """Display string for a Kelvin temperature, e.g. ``22°C``."""
    return f"{kelvin_to_celsius(kelvin)}°C"
