"""
Civic Map - Report Filter

The map screen's filter chips: everything, one status, or one category.
Applied by the caller before viewport visibility is computed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from civicmap.geo.models import ReportCategory, ReportPin, ReportStatus

ALL = "all"

_LABELS: dict[str, str] = {
    ALL: "All",
    ReportStatus.PENDING: "Pending",
    ReportStatus.IN_PROGRESS: "In progress",
    ReportStatus.RESOLVED: "Resolved",
    ReportCategory.ROAD: "Road",
    ReportCategory.LIGHTING: "Lighting",
    ReportCategory.CLEANING: "Cleaning",
    ReportCategory.OTHERS: "Others",
}


@dataclass(frozen=True)
class ReportFilter:
    """Selected filter; ``value`` is ``None`` for "all"."""

    value: ReportStatus | ReportCategory | None = None

    @classmethod
    def parse(cls, filter_id: str) -> ReportFilter:
        """
        Parse a filter id as used by the filter chips.

        Raises:
            ValueError: If the id is neither "all", a status nor a category
        """
        if filter_id == ALL:
            return cls()
        if filter_id in {s.value for s in ReportStatus}:
            return cls(ReportStatus(filter_id))
        if filter_id in {c.value for c in ReportCategory}:
            return cls(ReportCategory(filter_id))
        raise ValueError(f"Unknown filter: {filter_id}")

    @property
    def id(self) -> str:
        return ALL if self.value is None else self.value.value

    @property
    def is_all(self) -> bool:
        return self.value is None

    @property
    def label(self) -> str:
        return _LABELS[self.id]

    def matches(self, pin: ReportPin) -> bool:
        if self.value is None:
            return True
        if isinstance(self.value, ReportStatus):
            return pin.status == self.value
        return pin.category == self.value

    def apply(self, pins: Sequence[ReportPin]) -> list[ReportPin]:
        """Return matching pins in input order."""
        return [pin for pin in pins if self.matches(pin)]


def available_filters() -> list[ReportFilter]:
    """All filter chips in display order."""
    return [ReportFilter.parse(filter_id) for filter_id in _LABELS]
