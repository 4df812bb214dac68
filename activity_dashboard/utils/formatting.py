"""Display helpers shared by the API schemas."""

from __future__ import annotations

from datetime import date
from typing import Final

# English abbreviations regardless of the process locale.
_WEEKDAYS: Final[tuple[str, ...]] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_date(value: date) -> str:
    """Return ``value`` as a short label such as ``"Thu, Apr 18"``."""

    return f"{_WEEKDAYS[value.weekday()]}, {_MONTHS[value.month - 1]} {value.day}"


def format_time_range(start: str, end: str) -> str:
    return f"{start} - {end}"


__all__ = ["format_date", "format_time_range"]
