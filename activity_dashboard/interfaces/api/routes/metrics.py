"""Routes exposing the dashboard summary metrics."""

from datetime import datetime

from fastapi import APIRouter, Depends

from activity_dashboard.application.use_cases.metrics import (
    DashboardMetrics,
    compute_metrics,
)
from activity_dashboard.infrastructure.repositories import ActivityRepository
from activity_dashboard.interfaces.api.dependencies import (
    get_activity_repository,
    get_reference_time,
)
from activity_dashboard.interfaces.api.schemas import DashboardMetricsRead

router = APIRouter(prefix="/metrics", tags=["metrics"])


def _metrics_to_read_model(metrics: DashboardMetrics) -> DashboardMetricsRead:
    return DashboardMetricsRead.model_validate(metrics)


@router.get("/", response_model=DashboardMetricsRead)
def read_metrics(
    repository: ActivityRepository = Depends(get_activity_repository),
    reference: datetime = Depends(get_reference_time),
) -> DashboardMetricsRead:
    """Return the metrics computed over the whole catalog."""

    metrics = compute_metrics(repository.list_all(), reference=reference)
    return _metrics_to_read_model(metrics)


__all__ = ["router"]
