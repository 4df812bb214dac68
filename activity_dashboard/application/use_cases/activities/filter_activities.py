"""Use case for narrowing activities with the dashboard selectors."""

from collections.abc import Iterable

from activity_dashboard.domain.entities import (
    ALL_CLASSES,
    ALL_TYPES,
    Activity,
    DashboardFilters,
)


def matches_search(activity: Activity, query: str) -> bool:
    """Return whether ``query`` (already lowercased) occurs in the searchable text."""

    if not query:
        return True
    return (
        query in activity.title.lower()
        or query in activity.description.lower()
        or query in activity.advisor.lower()
        or any(query in tag.lower() for tag in activity.tags)
    )


def filter_activities(
    activities: Iterable[Activity], filters: DashboardFilters
) -> list[Activity]:
    """Return the activities matching every active selector, in input order."""

    data = list(activities)

    if filters.class_name != ALL_CLASSES:
        data = [activity for activity in data if activity.class_name == filters.class_name]

    if filters.type != ALL_TYPES:
        data = [activity for activity in data if activity.type == filters.type]

    query = filters.query
    if query:
        data = [activity for activity in data if matches_search(activity, query)]

    return data


__all__ = ["filter_activities", "matches_search"]
