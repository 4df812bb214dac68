"""Route returning every dashboard view in a single payload."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends

from activity_dashboard.application.use_cases.activities import (
    DashboardView,
    build_dashboard,
)
from activity_dashboard.config import get_settings
from activity_dashboard.domain.entities import DashboardFilters
from activity_dashboard.infrastructure.repositories import ActivityRepository
from activity_dashboard.interfaces.api.dependencies import (
    get_activity_repository,
    get_dashboard_filters,
    get_reference_time,
)
from activity_dashboard.interfaces.api.routes_helpers import (
    EMPTY_STATE,
    activity_to_schema,
    timeline_to_schema,
)
from activity_dashboard.interfaces.api.schemas import (
    DashboardFiltersRead,
    DashboardMetricsRead,
    DashboardRead,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _view_to_read_model(view: DashboardView) -> DashboardRead:
    settings = get_settings()
    return DashboardRead(
        school_name=settings.school_name,
        reporting_window=settings.reporting_window,
        filters=DashboardFiltersRead.model_validate(view.filters),
        metrics=DashboardMetricsRead.model_validate(view.metrics),
        activities=[activity_to_schema(activity) for activity in view.activities],
        timeline=timeline_to_schema(view.timeline),
        filters_applied=view.filters_applied,
        is_empty=view.is_empty,
        empty_state=EMPTY_STATE if view.is_empty else None,
    )


@router.get("/", response_model=DashboardRead)
def read_dashboard(
    filters: DashboardFilters = Depends(get_dashboard_filters),
    repository: ActivityRepository = Depends(get_activity_repository),
    reference: datetime = Depends(get_reference_time),
) -> DashboardRead:
    """Return metrics, rows and timeline for the requested selectors."""

    view = build_dashboard(repository, filters, reference=reference)
    return _view_to_read_model(view)


__all__ = ["router"]
