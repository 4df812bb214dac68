"""Domain entity representing a scheduled school activity."""

from dataclasses import dataclass, field
from datetime import date

ACTIVITY_TYPE_FIELD_TRIP = "Field Trip"
ACTIVITY_TYPE_SPORTS = "Sports"
ACTIVITY_TYPE_ARTS = "Arts"
ACTIVITY_TYPE_ACADEMICS = "Academics"
ACTIVITY_TYPE_COMMUNITY = "Community"
ACTIVITY_TYPE_ADMINISTRATION = "Administration"

ACTIVITY_TYPES: tuple[str, ...] = (
    ACTIVITY_TYPE_FIELD_TRIP,
    ACTIVITY_TYPE_SPORTS,
    ACTIVITY_TYPE_ARTS,
    ACTIVITY_TYPE_ACADEMICS,
    ACTIVITY_TYPE_COMMUNITY,
    ACTIVITY_TYPE_ADMINISTRATION,
)

ACTIVITY_STATUS_SCHEDULED = "Scheduled"
ACTIVITY_STATUS_COMPLETED = "Completed"
ACTIVITY_STATUS_CANCELLED = "Cancelled"

ACTIVITY_STATUSES: tuple[str, ...] = (
    ACTIVITY_STATUS_SCHEDULED,
    ACTIVITY_STATUS_COMPLETED,
    ACTIVITY_STATUS_CANCELLED,
)


@dataclass(frozen=True)
class Activity:
    """A single scheduled event or program run for a class."""

    id: str
    title: str
    class_name: str
    type: str
    description: str
    advisor: str
    location: str
    start_date: date
    end_date: date
    start_time: str
    end_time: str
    status: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    notes: str | None = None

    @property
    def is_multi_day(self) -> bool:
        return self.start_date != self.end_date


__all__ = [
    "Activity",
    "ACTIVITY_TYPE_FIELD_TRIP",
    "ACTIVITY_TYPE_SPORTS",
    "ACTIVITY_TYPE_ARTS",
    "ACTIVITY_TYPE_ACADEMICS",
    "ACTIVITY_TYPE_COMMUNITY",
    "ACTIVITY_TYPE_ADMINISTRATION",
    "ACTIVITY_TYPES",
    "ACTIVITY_STATUS_SCHEDULED",
    "ACTIVITY_STATUS_COMPLETED",
    "ACTIVITY_STATUS_CANCELLED",
    "ACTIVITY_STATUSES",
]
