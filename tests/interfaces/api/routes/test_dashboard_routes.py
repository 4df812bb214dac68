"""Tests for the dashboard API endpoints."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from activity_dashboard.interfaces.api.dependencies import (  # noqa: E402
    get_activity_repository,
    get_reference_time,
)
from activity_dashboard.infrastructure.repositories import (  # noqa: E402
    InMemoryActivityRepository,
)
from main import create_app  # noqa: E402

REFERENCE = datetime(2024, 4, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def client():
    """Return a test client with a fixed reference time."""

    app = create_app()
    app.dependency_overrides[get_reference_time] = lambda: REFERENCE
    with TestClient(app) as test_client:
        yield test_client


def _ids(items):
    return [item["id"] for item in items]


def test_service_info(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == "Activities & Programs Dashboard"
    assert payload["school_name"]
    assert payload["reporting_window"]


def test_metrics_cover_full_catalog(client: TestClient) -> None:
    response = client.get("/metrics/")

    assert response.status_code == 200
    assert response.json() == {
        "total": 10,
        "completed": 3,
        "upcoming_this_week": 5,
        "advisors": 10,
    }


def test_activities_default_to_start_date_order(client: TestClient) -> None:
    response = client.get("/activities/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 10
    assert payload["filters_applied"] is False
    assert payload["is_empty"] is False
    assert _ids(payload["items"]) == [
        "ACT-006",
        "ACT-005",
        "ACT-009",
        "ACT-010",
        "ACT-001",
        "ACT-003",
        "ACT-002",
        "ACT-008",
        "ACT-007",
        "ACT-004",
    ]


def test_activities_filtered_by_class(client: TestClient) -> None:
    response = client.get("/activities/", params={"class_name": "Grade 7A"})

    payload = response.json()
    assert _ids(payload["items"]) == ["ACT-001", "ACT-007"]
    assert payload["filters_applied"] is True


def test_activities_filtered_by_type_and_sorted_by_class(client: TestClient) -> None:
    response = client.get("/activities/", params={"type": "Arts", "sort": "className"})

    assert _ids(response.json()["items"]) == ["ACT-007", "ACT-003"]


def test_search_matches_tags(client: TestClient) -> None:
    response = client.get("/activities/", params={"search": "  stem "})

    assert _ids(response.json()["items"]) == ["ACT-001", "ACT-008"]


def test_unknown_selectors_apply_no_filter(client: TestClient) -> None:
    response = client.get(
        "/activities/",
        params={"class_name": "Grade 9Z", "type": "Chess", "sort": "priority"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 10
    assert payload["filters_applied"] is False


def test_activity_row_formatting(client: TestClient) -> None:
    response = client.get("/activities/ACT-001")

    assert response.status_code == 200
    payload = response.json()
    assert payload["start_date"] == "2024-04-18"
    assert payload["date_label"] == "Thu, Apr 18"
    assert payload["time_range"] == "09:00 - 14:00"
    assert payload["tags"] == ["STEM", "Experiential"]
    assert payload["notes"] == "Permission slips due by April 12."
    assert payload["is_multi_day"] is False
    assert payload["end_date_label"] is None


def test_multi_day_activity_has_end_label(client: TestClient) -> None:
    payload = client.get("/activities/ACT-004").json()

    assert payload["is_multi_day"] is True
    assert payload["date_label"] == "Sat, Apr 27"
    assert payload["end_date_label"] == "Ends Sun, Apr 28"


def test_unknown_activity_returns_404(client: TestClient) -> None:
    response = client.get("/activities/ACT-999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Activity not found"


def test_selector_options(client: TestClient) -> None:
    payload = client.get("/activities/options").json()

    assert payload["classes"][0] == "All Classes"
    assert "Faculty" in payload["classes"]
    assert payload["types"] == [
        "All Types",
        "Field Trip",
        "Sports",
        "Arts",
        "Academics",
        "Community",
        "Administration",
    ]
    assert payload["sort_options"] == [
        {"value": "startDate", "label": "By Start Date"},
        {"value": "className", "label": "By Class"},
        {"value": "type", "label": "By Activity Type"},
    ]


def test_timeline_groups_by_start_date(client: TestClient) -> None:
    payload = client.get("/activities/timeline", params={"type": "Administration"}).json()

    assert payload["dates"] == ["2024-04-05", "2024-04-16"]
    assert payload["date_count"] == 2
    assert [group["label"] for group in payload["groups"]] == ["Fri, Apr 5", "Tue, Apr 16"]
    assert [_ids(group["activities"]) for group in payload["groups"]] == [
        ["ACT-006"],
        ["ACT-010"],
    ]


def test_dashboard_payload(client: TestClient) -> None:
    response = client.get("/dashboard/", params={"class_name": "Grade 8B"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["filters"] == {
        "class_name": "Grade 8B",
        "type": "All Types",
        "search": "",
        "sort": "startDate",
    }
    assert payload["metrics"]["total"] == 10
    assert payload["metrics"]["upcoming_this_week"] == 5
    assert _ids(payload["activities"]) == ["ACT-002", "ACT-008"]
    assert payload["timeline"]["dates"] == ["2024-04-20", "2024-04-22"]
    assert payload["is_empty"] is False
    assert payload["empty_state"] is None


def test_dashboard_empty_state(client: TestClient) -> None:
    payload = client.get("/dashboard/", params={"search": "underwater basket"}).json()

    assert payload["activities"] == []
    assert payload["is_empty"] is True
    assert payload["filters_applied"] is True
    assert payload["timeline"]["dates"] == []
    assert payload["timeline"]["is_empty"] is True
    assert payload["empty_state"]["title"] == "No activities match your filters."


def test_dashboard_with_empty_catalog() -> None:
    app = create_app()
    app.dependency_overrides[get_reference_time] = lambda: REFERENCE
    app.dependency_overrides[get_activity_repository] = lambda: InMemoryActivityRepository([])

    with TestClient(app) as client:
        payload = client.get("/dashboard/").json()

    assert payload["metrics"] == {
        "total": 0,
        "completed": 0,
        "upcoming_this_week": 0,
        "advisors": 0,
    }
    assert payload["timeline"]["dates"] == []
    assert payload["is_empty"] is True
    assert payload["filters_applied"] is False
