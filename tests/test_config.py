import pathlib
import sys
from datetime import timedelta

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from activity_dashboard.config import Settings, get_settings, reset_settings_cache
from activity_dashboard.utils import get_app_timezone


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Ensure each test reads settings from a clean environment."""

    for name in ("APP_TIMEZONE", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    monkeypatch.undo()
    reset_settings_cache()


def test_reset_settings_cache_reloads_app_timezone(monkeypatch):
    assert get_app_timezone().utcoffset(None) == timedelta(0)

    monkeypatch.setenv("APP_TIMEZONE", "UTC+05:00")
    reset_settings_cache()

    assert get_settings().app_timezone == "UTC+05:00"
    assert get_app_timezone().utcoffset(None) == timedelta(hours=5)


def test_cors_origins_accept_single_plain_value(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://school.example")

    assert Settings().cors_allow_origins == ["https://school.example"]


def test_cors_origins_accept_comma_separated_values(monkeypatch):
    monkeypatch.setenv(
        "CORS_ALLOW_ORIGINS", "https://school.example, http://localhost:3000,"
    )

    assert Settings().cors_allow_origins == [
        "https://school.example",
        "http://localhost:3000",
    ]


def test_cors_origins_accept_json_list(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://a.example", "https://b.example"]')

    assert Settings().cors_allow_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_default():
    assert Settings().cors_allow_origins == ["http://localhost:3000"]


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings().log_level == "DEBUG"
