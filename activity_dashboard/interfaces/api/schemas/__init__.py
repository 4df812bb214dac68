from .activity import ActivityListRead, ActivityRead
from .dashboard import (
    DashboardFiltersRead,
    DashboardRead,
    EmptyStateRead,
    ServiceInfoRead,
)
from .metrics import DashboardMetricsRead
from .options import SelectorOptionsRead, SortOptionRead
from .timeline import TimelineGroupRead, TimelineRead

__all__ = [
    "ActivityListRead",
    "ActivityRead",
    "DashboardFiltersRead",
    "DashboardMetricsRead",
    "DashboardRead",
    "EmptyStateRead",
    "SelectorOptionsRead",
    "ServiceInfoRead",
    "SortOptionRead",
    "TimelineGroupRead",
    "TimelineRead",
]
