"""Aggregate application use cases."""

from .activities import build_dashboard, list_activities
from .metrics import compute_metrics

__all__ = [
    "build_dashboard",
    "compute_metrics",
    "list_activities",
]
