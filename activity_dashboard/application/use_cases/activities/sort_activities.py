"""Use case for ordering activities by the selected sort key."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from activity_dashboard.domain.entities import (
    SORT_BY_CLASS_NAME,
    SORT_BY_START_DATE,
    SORT_BY_TYPE,
    Activity,
)


def _text_key(value: str) -> tuple[str, str]:
    # Case-insensitive order, ties broken by the exact text.
    return (value.casefold(), value)


_SORTERS: dict[str, Callable[[Activity], Any]] = {
    SORT_BY_START_DATE: lambda activity: activity.start_date,
    SORT_BY_CLASS_NAME: lambda activity: _text_key(activity.class_name),
    SORT_BY_TYPE: lambda activity: _text_key(activity.type),
}


def sort_activities(
    activities: Iterable[Activity], sort_key: str = SORT_BY_START_DATE
) -> list[Activity]:
    """Return ``activities`` ordered by ``sort_key``.

    The sort is stable: activities sharing the same key keep their relative
    order. Unknown keys fall back to ordering by start date.
    """

    key = _SORTERS.get(sort_key, _SORTERS[SORT_BY_START_DATE])
    return sorted(activities, key=key)


__all__ = ["sort_activities"]
