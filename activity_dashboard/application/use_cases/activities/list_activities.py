"""Use case for listing the activities visible with the current selectors."""

from __future__ import annotations

import logging

from activity_dashboard.domain.entities import Activity, DashboardFilters
from activity_dashboard.infrastructure.repositories import ActivityRepository

from .filter_activities import filter_activities
from .sort_activities import sort_activities

logger = logging.getLogger(__name__)


def resolve_filters(
    repository: ActivityRepository, filters: DashboardFilters
) -> DashboardFilters:
    """Normalize ``filters`` against the options offered by ``repository``."""

    resolved = filters.normalized(
        class_names=repository.list_class_names(),
        activity_types=repository.list_activity_types(),
    )
    if resolved != filters:
        logger.debug(
            "Unrecognized dashboard selectors %s replaced with %s", filters, resolved
        )
    return resolved


def list_activities(
    repository: ActivityRepository, filters: DashboardFilters
) -> list[Activity]:
    """Return the filtered activities ordered by the selected sort key."""

    resolved = resolve_filters(repository, filters)
    filtered = filter_activities(repository.list_all(), resolved)
    return sort_activities(filtered, resolved.sort)


__all__ = ["list_activities", "resolve_filters"]
