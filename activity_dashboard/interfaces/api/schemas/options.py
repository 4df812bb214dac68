"""Schemas describing the selector options offered by the dashboard."""

from pydantic import BaseModel, Field


class SortOptionRead(BaseModel):
    value: str = Field(..., description="Sort key accepted by the API")
    label: str = Field(..., description="Human readable label")


class SelectorOptionsRead(BaseModel):
    classes: list[str] = Field(
        ..., description="Class selector options, starting with the 'all' sentinel"
    )
    types: list[str] = Field(
        ..., description="Type selector options, starting with the 'all' sentinel"
    )
    sort_options: list[SortOptionRead] = Field(default_factory=list)


__all__ = ["SelectorOptionsRead", "SortOptionRead"]
