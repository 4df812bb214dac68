"""Use cases deriving the dashboard views from the activity catalog."""

from .build_dashboard import DashboardView, build_dashboard
from .filter_activities import filter_activities, matches_search
from .group_activities import ActivityTimeline, group_by_start_date
from .list_activities import list_activities, resolve_filters
from .sort_activities import sort_activities

__all__ = [
    "ActivityTimeline",
    "DashboardView",
    "build_dashboard",
    "filter_activities",
    "group_by_start_date",
    "list_activities",
    "matches_search",
    "resolve_filters",
    "sort_activities",
]
