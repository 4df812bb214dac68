"""Read-only access to the activity catalog."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from activity_dashboard.domain.entities import ACTIVITY_TYPES, Activity
from activity_dashboard.infrastructure.catalog import (
    ACTIVITIES,
    CLASS_NAMES,
    validate_catalog,
)


class ActivityRepository(Protocol):
    """Source of activities consumed by the dashboard use cases."""

    def list_all(self) -> Sequence[Activity]: ...

    def get(self, activity_id: str) -> Activity | None: ...

    def list_class_names(self) -> Sequence[str]: ...

    def list_activity_types(self) -> Sequence[str]: ...


class InMemoryActivityRepository:
    """Serve activities from an immutable in-memory collection."""

    def __init__(
        self,
        activities: Sequence[Activity] = ACTIVITIES,
        *,
        class_names: Sequence[str] = CLASS_NAMES,
        activity_types: Sequence[str] = ACTIVITY_TYPES,
    ) -> None:
        self._class_names = tuple(class_names)
        self._activity_types = tuple(activity_types)
        self._activities = validate_catalog(
            activities,
            class_names=self._class_names,
            activity_types=self._activity_types,
        )
        self._by_id = {activity.id: activity for activity in self._activities}

    def list_all(self) -> Sequence[Activity]:
        return self._activities

    def get(self, activity_id: str) -> Activity | None:
        return self._by_id.get(activity_id)

    def list_class_names(self) -> Sequence[str]:
        return self._class_names

    def list_activity_types(self) -> Sequence[str]:
        return self._activity_types


__all__ = ["ActivityRepository", "InMemoryActivityRepository"]
