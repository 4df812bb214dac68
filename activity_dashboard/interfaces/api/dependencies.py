"""FastAPI dependency utilities."""

from datetime import datetime
from functools import lru_cache

from fastapi import Query

from activity_dashboard.domain.entities import (
    ALL_CLASSES,
    ALL_TYPES,
    SORT_BY_START_DATE,
    DashboardFilters,
)
from activity_dashboard.infrastructure.repositories import (
    ActivityRepository,
    InMemoryActivityRepository,
)
from activity_dashboard.utils import now_in_app_timezone


@lru_cache(maxsize=1)
def get_activity_repository() -> ActivityRepository:
    """Return the shared repository backed by the static catalog."""

    return InMemoryActivityRepository()


def get_reference_time() -> datetime:
    """Return the instant used to evaluate time-sensitive metrics."""

    return now_in_app_timezone()


def get_dashboard_filters(
    class_name: str = Query(ALL_CLASSES, description="Class to show, or 'All Classes'"),
    activity_type: str = Query(
        ALL_TYPES, alias="type", description="Activity type to show, or 'All Types'"
    ),
    search: str = Query("", description="Matches title, description, advisor or tags"),
    sort: str = Query(
        SORT_BY_START_DATE, description="One of 'startDate', 'className' or 'type'"
    ),
) -> DashboardFilters:
    """Collect the dashboard selectors from the query string."""

    return DashboardFilters(
        class_name=class_name,
        type=activity_type,
        search=search,
        sort=sort,
    )
