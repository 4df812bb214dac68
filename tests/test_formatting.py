import pathlib
import sys
from datetime import date, timedelta, timezone

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from activity_dashboard.utils import format_date, format_time_range
from activity_dashboard.utils.datetime import _resolve_timezone


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2024, 4, 18), "Thu, Apr 18"),
        (date(2024, 4, 28), "Sun, Apr 28"),
        (date(2024, 12, 2), "Mon, Dec 2"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_format_time_range():
    assert format_time_range("09:00", "14:00") == "09:00 - 14:00"


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC+05:30", timedelta(hours=5, minutes=30)),
        ("GMT-3", timedelta(hours=-3)),
        ("utc+0200", timedelta(hours=2)),
    ],
)
def test_resolve_timezone_accepts_offsets(name, offset):
    assert _resolve_timezone(name) == timezone(offset)


def test_resolve_timezone_falls_back_to_utc():
    resolved = _resolve_timezone("Not/AZone")

    assert resolved.utcoffset(None) == timedelta(0)
