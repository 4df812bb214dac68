"""Domain entities exposed by the application."""

from .activity import (
    ACTIVITY_STATUS_CANCELLED,
    ACTIVITY_STATUS_COMPLETED,
    ACTIVITY_STATUS_SCHEDULED,
    ACTIVITY_STATUSES,
    ACTIVITY_TYPES,
    Activity,
)
from .dashboard_filters import (
    ALL_CLASSES,
    ALL_TYPES,
    SORT_BY_CLASS_NAME,
    SORT_BY_START_DATE,
    SORT_BY_TYPE,
    SORT_KEYS,
    SORT_OPTION_LABELS,
    DashboardFilters,
)

__all__ = [
    "Activity",
    "ACTIVITY_STATUS_SCHEDULED",
    "ACTIVITY_STATUS_COMPLETED",
    "ACTIVITY_STATUS_CANCELLED",
    "ACTIVITY_STATUSES",
    "ACTIVITY_TYPES",
    "DashboardFilters",
    "ALL_CLASSES",
    "ALL_TYPES",
    "SORT_BY_START_DATE",
    "SORT_BY_CLASS_NAME",
    "SORT_BY_TYPE",
    "SORT_KEYS",
    "SORT_OPTION_LABELS",
]
