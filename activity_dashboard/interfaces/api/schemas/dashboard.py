"""Schemas for the aggregated dashboard payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .activity import ActivityRead
from .metrics import DashboardMetricsRead
from .timeline import TimelineRead


class DashboardFiltersRead(BaseModel):
    class_name: str = Field(..., description="Selected class or 'All Classes'")
    type: str = Field(..., description="Selected type or 'All Types'")
    search: str = Field(..., description="Search text as received")
    sort: str = Field(..., description="Applied sort key")

    model_config = ConfigDict(from_attributes=True)


class EmptyStateRead(BaseModel):
    title: str
    hint: str


class DashboardRead(BaseModel):
    school_name: str
    reporting_window: str
    filters: DashboardFiltersRead
    metrics: DashboardMetricsRead
    activities: list[ActivityRead] = Field(default_factory=list)
    timeline: TimelineRead
    filters_applied: bool
    is_empty: bool
    empty_state: EmptyStateRead | None = Field(
        default=None,
        description="Message to render when no activity matches the selectors",
    )


class ServiceInfoRead(BaseModel):
    school_name: str
    title: str
    reporting_window: str


__all__ = [
    "DashboardFiltersRead",
    "DashboardRead",
    "EmptyStateRead",
    "ServiceInfoRead",
]
