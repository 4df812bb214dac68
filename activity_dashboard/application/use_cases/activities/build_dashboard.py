"""Use case assembling every derived view of the dashboard in one pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from activity_dashboard.domain.entities import Activity, DashboardFilters
from activity_dashboard.infrastructure.repositories import ActivityRepository

from ..metrics import DashboardMetrics, compute_metrics
from .filter_activities import filter_activities
from .group_activities import ActivityTimeline, group_by_start_date
from .list_activities import resolve_filters
from .sort_activities import sort_activities

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Metrics, rows and timeline derived from the catalog for one set of selectors."""

    filters: DashboardFilters
    metrics: DashboardMetrics
    activities: list[Activity]
    timeline: ActivityTimeline

    @property
    def filters_applied(self) -> bool:
        return self.filters.is_filtering

    @property
    def is_empty(self) -> bool:
        return not self.activities


def build_dashboard(
    repository: ActivityRepository,
    filters: DashboardFilters,
    *,
    reference: datetime | None = None,
) -> DashboardView:
    """Recompute the dashboard views from the full catalog.

    Metrics always cover the unfiltered catalog; the rows and the timeline
    reflect the selectors.
    """

    resolved = resolve_filters(repository, filters)
    catalog = repository.list_all()

    metrics = compute_metrics(catalog, reference=reference)
    rows = sort_activities(filter_activities(catalog, resolved), resolved.sort)
    timeline = group_by_start_date(rows)

    logger.debug(
        "Dashboard built with %d of %d activities across %d dates",
        len(rows),
        metrics.total,
        len(timeline.dates),
    )
    return DashboardView(
        filters=resolved,
        metrics=metrics,
        activities=rows,
        timeline=timeline,
    )


__all__ = ["DashboardView", "build_dashboard"]
