"""Routes for browsing the activity catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from activity_dashboard.application.use_cases.activities import (
    group_by_start_date,
    list_activities,
    resolve_filters,
)
from activity_dashboard.domain.entities import (
    ALL_CLASSES,
    ALL_TYPES,
    SORT_KEYS,
    SORT_OPTION_LABELS,
    DashboardFilters,
)
from activity_dashboard.infrastructure.repositories import ActivityRepository
from activity_dashboard.interfaces.api.dependencies import (
    get_activity_repository,
    get_dashboard_filters,
)
from activity_dashboard.interfaces.api.routes_helpers import (
    activity_to_schema,
    timeline_to_schema,
)
from activity_dashboard.interfaces.api.schemas import (
    ActivityListRead,
    ActivityRead,
    SelectorOptionsRead,
    SortOptionRead,
    TimelineRead,
)

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/", response_model=ActivityListRead)
def read_activities(
    filters: DashboardFilters = Depends(get_dashboard_filters),
    repository: ActivityRepository = Depends(get_activity_repository),
) -> ActivityListRead:
    """Return the activities matching the selectors, sorted by the chosen key."""

    resolved = resolve_filters(repository, filters)
    activities = list_activities(repository, resolved)
    return ActivityListRead(
        items=[activity_to_schema(activity) for activity in activities],
        count=len(activities),
        filters_applied=resolved.is_filtering,
        is_empty=not activities,
    )


@router.get("/timeline", response_model=TimelineRead)
def read_timeline(
    filters: DashboardFilters = Depends(get_dashboard_filters),
    repository: ActivityRepository = Depends(get_activity_repository),
) -> TimelineRead:
    """Return the filtered activities grouped by start date."""

    timeline = group_by_start_date(list_activities(repository, filters))
    return timeline_to_schema(timeline)


@router.get("/options", response_model=SelectorOptionsRead)
def read_selector_options(
    repository: ActivityRepository = Depends(get_activity_repository),
) -> SelectorOptionsRead:
    """Return the options available for each dashboard selector."""

    return SelectorOptionsRead(
        classes=[ALL_CLASSES, *repository.list_class_names()],
        types=[ALL_TYPES, *repository.list_activity_types()],
        sort_options=[
            SortOptionRead(value=key, label=SORT_OPTION_LABELS[key]) for key in SORT_KEYS
        ],
    )


@router.get("/{activity_id}", response_model=ActivityRead)
def read_activity(
    activity_id: str,
    repository: ActivityRepository = Depends(get_activity_repository),
) -> ActivityRead:
    activity = repository.get(activity_id)
    if activity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Activity not found",
        )
    return activity_to_schema(activity)


__all__ = ["router"]
