"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_timezone,
    today_in_app_timezone,
)
from .formatting import format_date, format_time_range

__all__ = [
    "ensure_app_timezone",
    "format_date",
    "format_time_range",
    "get_app_timezone",
    "now_in_app_timezone",
    "today_in_app_timezone",
]
