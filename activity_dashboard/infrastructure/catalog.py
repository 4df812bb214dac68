"""Static catalog of activities published on the dashboard."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from activity_dashboard.domain.entities import (
    ACTIVITY_STATUSES,
    ACTIVITY_TYPES,
    Activity,
)

CLASS_NAMES: tuple[str, ...] = (
    "Grade 6A",
    "Grade 6B",
    "Grade 7A",
    "Grade 7B",
    "Grade 8A",
    "Grade 8B",
    "Faculty",
)


def _activity(
    *,
    start_date: str,
    end_date: str,
    tags: Iterable[str] = (),
    **values: str,
) -> Activity:
    return Activity(
        start_date=date.fromisoformat(start_date),
        end_date=date.fromisoformat(end_date),
        tags=tuple(tags),
        **values,
    )


def validate_catalog(
    activities: Sequence[Activity],
    *,
    class_names: Sequence[str],
    activity_types: Sequence[str] = ACTIVITY_TYPES,
) -> tuple[Activity, ...]:
    """Check the catalog invariants and return it as an immutable tuple.

    Raises ``ValueError`` on duplicate identifiers, values outside the closed
    enumerations, or activities ending before they start.
    """

    seen: set[str] = set()
    for activity in activities:
        if activity.id in seen:
            raise ValueError(f"Duplicate activity id '{activity.id}'")
        seen.add(activity.id)

        if activity.class_name not in class_names:
            raise ValueError(
                f"Activity '{activity.id}' references unknown class '{activity.class_name}'"
            )
        if activity.type not in activity_types:
            raise ValueError(
                f"Activity '{activity.id}' has unsupported type '{activity.type}'"
            )
        if activity.status not in ACTIVITY_STATUSES:
            raise ValueError(
                f"Activity '{activity.id}' has unsupported status '{activity.status}'"
            )
        if activity.end_date < activity.start_date:
            raise ValueError(f"Activity '{activity.id}' ends before it starts")

    return tuple(activities)


ACTIVITIES: tuple[Activity, ...] = validate_catalog(
    [
        _activity(
            id="ACT-001",
            title="Science Museum Exploration",
            class_name="Grade 7A",
            type="Field Trip",
            description=(
                "Hands-on learning experience covering physics exhibits and robotics lab tour."
            ),
            advisor="Ms. Patel",
            location="City Science Museum",
            start_date="2024-04-18",
            end_date="2024-04-18",
            start_time="09:00",
            end_time="14:00",
            status="Scheduled",
            tags=["STEM", "Experiential"],
            notes="Permission slips due by April 12.",
        ),
        _activity(
            id="ACT-002",
            title="Inter-House Basketball Finals",
            class_name="Grade 8B",
            type="Sports",
            description=(
                "Annual inter-house basketball finals with cheering squads and halftime performance."
            ),
            advisor="Coach Ramirez",
            location="Main Gymnasium",
            start_date="2024-04-20",
            end_date="2024-04-20",
            start_time="16:30",
            end_time="18:00",
            status="Scheduled",
            tags=["Athletics", "Team Building"],
        ),
        _activity(
            id="ACT-003",
            title="Visual Arts Portfolio Review",
            class_name="Grade 8A",
            type="Arts",
            description=(
                "Mid-term portfolio review focused on composition and color theory feedback."
            ),
            advisor="Mr. Nguyen",
            location="Art Studio 2",
            start_date="2024-04-19",
            end_date="2024-04-19",
            start_time="11:00",
            end_time="12:30",
            status="Scheduled",
            tags=["Creative", "Assessment"],
        ),
        _activity(
            id="ACT-004",
            title="Math Olympiad Training Camp",
            class_name="Grade 7B",
            type="Academics",
            description=(
                "Weekend intensive training covering problem-solving strategies and mock tests."
            ),
            advisor="Dr. Wallace",
            location="Room 304",
            start_date="2024-04-27",
            end_date="2024-04-28",
            start_time="08:30",
            end_time="16:00",
            status="Scheduled",
            tags=["Competition", "Extension"],
        ),
        _activity(
            id="ACT-005",
            title="Community Garden Build Day",
            class_name="Grade 6A",
            type="Community",
            description=(
                "Service project installing raised beds and planting spring vegetables."
            ),
            advisor="Ms. Hernandez",
            location="South Courtyard",
            start_date="2024-04-13",
            end_date="2024-04-13",
            start_time="10:00",
            end_time="13:00",
            status="Completed",
            tags=["Service", "Sustainability"],
        ),
        _activity(
            id="ACT-006",
            title="Faculty PD: Differentiated Instruction",
            class_name="Faculty",
            type="Administration",
            description=(
                "Professional development workshop sharing strategies for mixed-ability classrooms."
            ),
            advisor="Instructional Team",
            location="Library Conference Room",
            start_date="2024-04-05",
            end_date="2024-04-05",
            start_time="15:30",
            end_time="17:00",
            status="Completed",
            tags=["PD", "Teaching"],
        ),
        _activity(
            id="ACT-007",
            title="Spring Musical Dress Rehearsal",
            class_name="Grade 7A",
            type="Arts",
            description=(
                "Full run-through with costumes, lights, and audio checks before opening night."
            ),
            advisor="Mrs. Allen",
            location="Auditorium",
            start_date="2024-04-24",
            end_date="2024-04-24",
            start_time="18:00",
            end_time="21:00",
            status="Scheduled",
            tags=["Performance", "Production"],
        ),
        _activity(
            id="ACT-008",
            title="Robotics Club Showcase",
            class_name="Grade 8B",
            type="Academics",
            description=(
                "Demonstrations of autonomous robots and presentations on engineering process."
            ),
            advisor="Mr. Ibrahim",
            location="Innovation Lab",
            start_date="2024-04-22",
            end_date="2024-04-22",
            start_time="13:00",
            end_time="15:00",
            status="Scheduled",
            tags=["STEM", "Showcase"],
        ),
        _activity(
            id="ACT-009",
            title="Eco Club Stream Cleanup",
            class_name="Grade 6B",
            type="Community",
            description=(
                "Outdoor cleanup near Riverside Park with reflection session on conservation."
            ),
            advisor="Ms. Long",
            location="Riverside Park",
            start_date="2024-04-14",
            end_date="2024-04-14",
            start_time="09:30",
            end_time="12:00",
            status="Completed",
            tags=["Environment", "Field Work"],
        ),
        _activity(
            id="ACT-010",
            title="Parent-Teacher Conferences",
            class_name="Grade 6A",
            type="Administration",
            description=(
                "Quarterly conferences with families focusing on academic progress and goals."
            ),
            advisor="Administration",
            location="Multipurpose Hall",
            start_date="2024-04-16",
            end_date="2024-04-17",
            start_time="17:00",
            end_time="20:00",
            status="Scheduled",
            tags=["Family Engagement"],
        ),
    ],
    class_names=CLASS_NAMES,
)


__all__ = ["ACTIVITIES", "CLASS_NAMES", "validate_catalog"]
