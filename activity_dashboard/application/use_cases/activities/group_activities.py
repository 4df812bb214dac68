"""Use case for grouping activities into a date-ordered timeline."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from activity_dashboard.domain.entities import Activity


@dataclass(frozen=True)
class ActivityTimeline:
    """Activities partitioned by start date.

    ``groups`` keeps each date's activities in arrival order and ``dates``
    lists the distinct start dates in ascending order.
    """

    groups: dict[date, list[Activity]] = field(default_factory=dict)
    dates: list[date] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.dates

    def flatten(self) -> list[Activity]:
        """Concatenate the groups following the ascending date order."""

        return [activity for day in self.dates for activity in self.groups[day]]


def group_by_start_date(activities: Iterable[Activity]) -> ActivityTimeline:
    """Group ``activities`` by their exact start date."""

    groups: dict[date, list[Activity]] = {}
    for activity in activities:
        groups.setdefault(activity.start_date, []).append(activity)

    return ActivityTimeline(groups=groups, dates=sorted(groups))


__all__ = ["ActivityTimeline", "group_by_start_date"]
