"""Clock and duration formatting for console output."""

from __future__ import annotations

from datetime import datetime


def format_elapsed(milliseconds: float) -> str:
    """Format a duration in milliseconds as ``HH:MM:SS``.

    Hours are not wrapped at 24, and fractional seconds are dropped.
    """
    total_seconds = int(milliseconds // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_12_hour(moment: datetime) -> str:
    """Format a wall-clock time as ``hh:MM:SS AM|PM``; hour 0 reads as 12."""
    suffix = "PM" if moment.hour >= 12 else "AM"
    hour = moment.hour % 12 or 12
    return f"{hour:02d}:{moment.minute:02d}:{moment.second:02d} {suffix}"
