"""Use case for computing the summary metrics shown on the dashboard."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from activity_dashboard.domain.entities import (
    ACTIVITY_STATUS_COMPLETED,
    ACTIVITY_STATUS_SCHEDULED,
    Activity,
)
from activity_dashboard.utils import today_in_app_timezone

UPCOMING_WINDOW_DAYS = 7


@dataclass(frozen=True)
class DashboardMetrics:
    """Aggregate counters computed over the full activity catalog."""

    total: int
    completed: int
    upcoming_this_week: int
    advisors: int


def compute_metrics(
    activities: Iterable[Activity],
    *,
    reference: datetime | None = None,
) -> DashboardMetrics:
    """Compute the dashboard metrics relative to ``reference``.

    ``upcoming_this_week`` counts scheduled activities starting between the
    calendar day of ``reference`` and seven days later, both ends included.
    When ``reference`` is omitted the current time in the application timezone
    is used.
    """

    today = today_in_app_timezone(reference)
    week_ahead = today + timedelta(days=UPCOMING_WINDOW_DAYS)

    total = 0
    completed = 0
    upcoming = 0
    advisors: set[str] = set()

    for activity in activities:
        total += 1
        if activity.status == ACTIVITY_STATUS_COMPLETED:
            completed += 1
        if (
            activity.status == ACTIVITY_STATUS_SCHEDULED
            and today <= activity.start_date <= week_ahead
        ):
            upcoming += 1
        advisors.add(activity.advisor)

    return DashboardMetrics(
        total=total,
        completed=completed,
        upcoming_this_week=upcoming,
        advisors=len(advisors),
    )


__all__ = ["DashboardMetrics", "UPCOMING_WINDOW_DAYS", "compute_metrics"]
