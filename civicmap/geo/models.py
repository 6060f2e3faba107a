"""
Civic Map - Geographic Data Model

Immutable value types shared by the region and viewport engine:
- Coordinate: validated (latitude, longitude) pair in degrees
- ReportPin: read-only snapshot of a geotagged problem report
- Region: map camera (center plus latitude/longitude span)
- Tier / RegionSelection: tagged outcome of initial region selection
- VisibilityResult: pins inside the current viewport

Invalid input is rejected at construction time with a GeoValidationError
subclass; nothing is clamped silently.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# =============================================================================
# Exception Classes
# =============================================================================


class GeoValidationError(ValueError):
    """Base class for precondition violations in the geo engine."""


class InvalidCoordinateError(GeoValidationError):
    """Raised when a latitude or longitude is out of range or not finite."""

    def __init__(self, name: str, value: float, lower: float, upper: float):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r}. Must be a finite number in [{lower}, {upper}]")


class InvalidRegionError(GeoValidationError):
    """Raised when a region span is not strictly positive."""


class EmptyPointSetError(GeoValidationError):
    """Raised when a region is requested for an empty point set."""


# =============================================================================
# Report Enums
# =============================================================================


class ReportCategory(StrEnum):
    """Problem category."""

    ROAD = "road"
    LIGHTING = "lighting"
    CLEANING = "cleaning"
    OTHERS = "others"


class ReportStatus(StrEnum):
    """Problem resolution status."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class ReportPriority(StrEnum):
    """Problem priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Tier(StrEnum):
    """Search tier chosen by the region selector."""

    NEARBY_5KM = "nearby_5km"
    NEARBY_10KM = "nearby_10km"
    METRO_50KM = "metro_50km"
    CITY_WIDE = "city_wide"


# =============================================================================
# Value Types
# =============================================================================


def _check_range(name: str, value: float, lower: float, upper: float) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidCoordinateError(name, value, lower, upper)
    if not math.isfinite(value) or not lower <= value <= upper:
        raise InvalidCoordinateError(name, value, lower, upper)


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_range("latitude", self.latitude, -90.0, 90.0)
        _check_range("longitude", self.longitude, -180.0, 180.0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Coordinate:
        """Build from a ``{"latitude": .., "longitude": ..}`` mapping."""
        return cls(float(data["latitude"]), float(data["longitude"]))

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class ReportPin:
    """Read-only snapshot of a report as supplied by the report store."""

    id: str
    coordinate: Coordinate
    category: ReportCategory = ReportCategory.OTHERS
    status: ReportStatus = ReportStatus.PENDING
    priority: ReportPriority = ReportPriority.MEDIUM

    def __post_init__(self) -> None:
        # Coerce plain strings coming from the store; unknown values raise ValueError
        object.__setattr__(self, "category", ReportCategory(self.category))
        object.__setattr__(self, "status", ReportStatus(self.status))
        object.__setattr__(self, "priority", ReportPriority(self.priority))

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReportPin:
        """
        Build a pin from a report store record.

        Accepts either a nested ``location`` mapping or flat
        ``latitude``/``longitude`` keys. Missing enum fields take the defaults.
        """
        location = data.get("location") or data
        return cls(
            id=str(data["id"]),
            coordinate=Coordinate.from_dict(location),
            category=data.get("category") or ReportCategory.OTHERS,
            status=data.get("status") or ReportStatus.PENDING,
            priority=data.get("priority") or ReportPriority.MEDIUM,
        )


@dataclass(frozen=True)
class Bounds:
    """Bounding box implied by a region."""

    north: float
    south: float
    east: float
    west: float

    def contains(self, coordinate: Coordinate) -> bool:
        """Inclusive containment test on both axes."""
        return (
            self.south <= coordinate.latitude <= self.north
            and self.west <= coordinate.longitude <= self.east
        )


@dataclass(frozen=True)
class Region:
    """Map camera: center coordinate plus visible latitude/longitude span."""

    center: Coordinate
    latitude_delta: float
    longitude_delta: float

    def __post_init__(self) -> None:
        for name in ("latitude_delta", "longitude_delta"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise InvalidRegionError(f"Invalid {name}: {value!r}. Must be a number")
            if not math.isfinite(value) or value <= 0:
                raise InvalidRegionError(f"Invalid {name}: {value!r}. Must be finite and > 0")

    @classmethod
    def centered_on(cls, center: Coordinate, delta: float) -> Region:
        """Square region of ``delta`` degrees on both axes."""
        return cls(center=center, latitude_delta=delta, longitude_delta=delta)

    @property
    def bounds(self) -> Bounds:
        half_lat = self.latitude_delta / 2
        half_lng = self.longitude_delta / 2
        return Bounds(
            north=self.center.latitude + half_lat,
            south=self.center.latitude - half_lat,
            east=self.center.longitude + half_lng,
            west=self.center.longitude - half_lng,
        )

    def contains(self, coordinate: Coordinate) -> bool:
        return self.bounds.contains(coordinate)

    def to_dict(self) -> dict[str, float]:
        """Flat camera dict in the shape map components expect."""
        return {
            "latitude": self.center.latitude,
            "longitude": self.center.longitude,
            "latitudeDelta": self.latitude_delta,
            "longitudeDelta": self.longitude_delta,
        }


@dataclass(frozen=True)
class RegionSelection:
    """Result of initial region selection."""

    region: Region
    tier: Tier
    context_count: int


@dataclass(frozen=True)
class VisibilityResult:
    """Pins inside a viewport, plus the size of the set they were drawn from."""

    visible_pins: tuple[ReportPin, ...] = field(default_factory=tuple)
    count: int = 0
    total: int = 0

    @property
    def has_visible(self) -> bool:
        return self.count > 0
