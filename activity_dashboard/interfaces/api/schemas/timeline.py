"""Schemas for the date-grouped activity timeline."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from .activity import ActivityRead


class TimelineGroupRead(BaseModel):
    date: dt.date = Field(..., description="Start date shared by the grouped activities")
    label: str = Field(..., description="Formatted date label")
    activities: list[ActivityRead] = Field(default_factory=list)


class TimelineRead(BaseModel):
    groups: list[TimelineGroupRead] = Field(default_factory=list)
    dates: list[dt.date] = Field(
        default_factory=list, description="Distinct start dates in ascending order"
    )
    date_count: int = Field(..., description="Number of distinct dates")
    is_empty: bool = Field(..., description="Whether the timeline has no entries")


__all__ = ["TimelineGroupRead", "TimelineRead"]
