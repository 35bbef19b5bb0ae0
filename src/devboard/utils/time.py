"""Time-log helpers: formatting, parsing and splitting minute counts."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Optional

_PLAIN_MINUTES_RE = re.compile(r"^\d+$")
_HOURS_AND_MINUTES_RE = re.compile(r"^(\d+)\s*h\s*(\d+)\s*m$")
_HOURS_RE = re.compile(r"^(\d+)\s*h$")
_MINUTES_RE = re.compile(r"^(\d+)\s*m$")


def format_time_display(total_minutes: int) -> str:
    """Format minutes for display, e.g. 30 -> "30m", 90 -> "1h 30m"."""
    hours, mins = divmod(total_minutes, 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def parse_time_string(time_string: Optional[str]) -> Optional[int]:
    """Parse "1h", "30m", "1h 30m" or a bare number of minutes.

    Returns None for anything else.
    """
    if not time_string or not isinstance(time_string, str):
        return None

    text = time_string.strip().lower()

    if _PLAIN_MINUTES_RE.match(text):
        return int(text)

    m = _HOURS_AND_MINUTES_RE.match(text)
    if m:
        return int(m.group(1)) * 60 + int(m.group(2))

    m = _HOURS_RE.match(text)
    if m:
        return int(m.group(1)) * 60

    m = _MINUTES_RE.match(text)
    if m:
        return int(m.group(1))

    return None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_time_percentage(spent: float, estimated: float) -> int:
    """Percentage of the estimate used so far (50 means half)."""
    if estimated <= 0:
        return 0
    return _round_half_up(spent / estimated * 100)


def today_date_string() -> str:
    """Today's date (UTC) as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def round_minutes(minutes: float, interval: int = 15) -> int:
    """Round to the nearest interval; halves round up."""
    return _round_half_up(minutes / interval) * interval


def split_minutes(total_minutes: int, max_per_entry: int = 180) -> list[int]:
    """Split a long session into entries of at most ``max_per_entry`` minutes."""
    if total_minutes <= max_per_entry:
        return [total_minutes]

    entries: list[int] = []
    remaining = total_minutes
    while remaining > 0:
        chunk = min(remaining, max_per_entry)
        entries.append(chunk)
        remaining -= chunk
    return entries
