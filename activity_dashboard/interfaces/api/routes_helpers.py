"""Helper utilities shared across API route handlers."""

from activity_dashboard.application.use_cases.activities import ActivityTimeline
from activity_dashboard.domain.entities import Activity
from activity_dashboard.interfaces.api.schemas import (
    ActivityRead,
    EmptyStateRead,
    TimelineGroupRead,
    TimelineRead,
)
from activity_dashboard.utils import format_date, format_time_range

EMPTY_STATE = EmptyStateRead(
    title="No activities match your filters.",
    hint="Adjust the class, type, or keywords to broaden the view.",
)


def activity_to_schema(activity: Activity) -> ActivityRead:
    return ActivityRead(
        id=activity.id,
        title=activity.title,
        class_name=activity.class_name,
        type=activity.type,
        description=activity.description,
        advisor=activity.advisor,
        location=activity.location,
        start_date=activity.start_date,
        end_date=activity.end_date,
        start_time=activity.start_time,
        end_time=activity.end_time,
        status=activity.status,
        tags=list(activity.tags),
        notes=activity.notes,
        date_label=format_date(activity.start_date),
        time_range=format_time_range(activity.start_time, activity.end_time),
        is_multi_day=activity.is_multi_day,
        end_date_label=(
            f"Ends {format_date(activity.end_date)}" if activity.is_multi_day else None
        ),
    )


def timeline_to_schema(timeline: ActivityTimeline) -> TimelineRead:
    groups = [
        TimelineGroupRead(
            date=day,
            label=format_date(day),
            activities=[activity_to_schema(activity) for activity in timeline.groups[day]],
        )
        for day in timeline.dates
    ]
    return TimelineRead(
        groups=groups,
        dates=list(timeline.dates),
        date_count=len(timeline.dates),
        is_empty=timeline.is_empty,
    )
