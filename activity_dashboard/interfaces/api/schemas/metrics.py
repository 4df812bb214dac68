"""Schemas for dashboard metrics."""

from pydantic import BaseModel, ConfigDict, Field


class DashboardMetricsRead(BaseModel):
    total: int = Field(..., description="Total number of activities in the catalog")
    completed: int = Field(..., description="Activities with status Completed")
    upcoming_this_week: int = Field(
        ..., description="Scheduled activities starting within the next seven days"
    )
    advisors: int = Field(..., description="Distinct advisors across the catalog")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["DashboardMetricsRead"]
