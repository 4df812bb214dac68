"""Domain entity holding the selectors that drive the dashboard views."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, replace

ALL_CLASSES = "All Classes"
ALL_TYPES = "All Types"

SORT_BY_START_DATE = "startDate"
SORT_BY_CLASS_NAME = "className"
SORT_BY_TYPE = "type"

SORT_KEYS: tuple[str, ...] = (SORT_BY_START_DATE, SORT_BY_CLASS_NAME, SORT_BY_TYPE)

SORT_OPTION_LABELS: dict[str, str] = {
    SORT_BY_START_DATE: "By Start Date",
    SORT_BY_CLASS_NAME: "By Class",
    SORT_BY_TYPE: "By Activity Type",
}


@dataclass(frozen=True)
class DashboardFilters:
    """The four independent selectors of the dashboard.

    Any combination is valid. Values outside the known options are treated as
    "no filter" by :meth:`normalized` rather than rejected.
    """

    class_name: str = ALL_CLASSES
    type: str = ALL_TYPES
    search: str = ""
    sort: str = SORT_BY_START_DATE

    @property
    def query(self) -> str:
        """Return the trimmed, lowercased search text."""

        return (self.search or "").strip().lower()

    @property
    def is_filtering(self) -> bool:
        """Return ``True`` when at least one selector narrows the collection."""

        return (
            self.class_name != ALL_CLASSES
            or self.type != ALL_TYPES
            or bool(self.query)
        )

    def normalized(
        self,
        *,
        class_names: Collection[str],
        activity_types: Collection[str],
    ) -> DashboardFilters:
        """Return a copy where unrecognized selectors fall back to their defaults."""

        class_name = self.class_name if self.class_name in class_names else ALL_CLASSES
        activity_type = self.type if self.type in activity_types else ALL_TYPES
        sort = self.sort if self.sort in SORT_KEYS else SORT_BY_START_DATE
        return replace(
            self,
            class_name=class_name,
            type=activity_type,
            search=self.search or "",
            sort=sort,
        )


__all__ = [
    "DashboardFilters",
    "ALL_CLASSES",
    "ALL_TYPES",
    "SORT_BY_START_DATE",
    "SORT_BY_CLASS_NAME",
    "SORT_BY_TYPE",
    "SORT_KEYS",
    "SORT_OPTION_LABELS",
]
