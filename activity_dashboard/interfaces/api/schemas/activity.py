"""Pydantic schemas for activity endpoints."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ActivityRead(BaseModel):
    id: str = Field(..., description="Unique activity identifier")
    title: str = Field(..., description="Activity title")
    class_name: str = Field(..., description="Class the activity belongs to")
    type: str = Field(..., description="Activity type")
    description: str = Field(..., description="Short description of the activity")
    advisor: str = Field(..., description="Staff member or team responsible")
    location: str = Field(..., description="Where the activity takes place")
    start_date: date = Field(..., description="First calendar day of the activity")
    end_date: date = Field(..., description="Last calendar day of the activity")
    start_time: str = Field(..., description="Advisory start time (HH:MM)")
    end_time: str = Field(..., description="Advisory end time (HH:MM)")
    status: str = Field(..., description="Scheduled, Completed or Cancelled")
    tags: list[str] = Field(default_factory=list, description="Free-text labels")
    notes: str | None = Field(default=None, description="Additional notes")
    date_label: str = Field(..., description="Formatted start date, e.g. 'Thu, Apr 18'")
    time_range: str = Field(..., description="Formatted time range, e.g. '09:00 - 14:00'")
    is_multi_day: bool = Field(..., description="Whether the activity spans several days")
    end_date_label: str | None = Field(
        default=None,
        description="Formatted end date for multi-day activities",
    )

    model_config = ConfigDict(from_attributes=True)


class ActivityListRead(BaseModel):
    items: list[ActivityRead] = Field(default_factory=list)
    count: int = Field(..., description="Number of activities after filtering")
    filters_applied: bool = Field(
        ..., description="Whether any class, type or search selector is active"
    )
    is_empty: bool = Field(..., description="Whether no activity matched the selectors")


__all__ = ["ActivityRead", "ActivityListRead"]
