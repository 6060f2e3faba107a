"""
Civic Map - Geographic Engine

Pure, synchronous geometry over immutable inputs:
- Distance: haversine great-circle distance
- Proximity: radius search over report pins
- Region fitting: clamped bounding region around a point set
- Region selection: tiered choice of the initial map region
- Viewport: pins visible inside a region
"""

from civicmap.geo.distance import EARTH_RADIUS_KM, distance_km, haversine_km
from civicmap.geo.models import (
    Bounds,
    Coordinate,
    EmptyPointSetError,
    GeoValidationError,
    InvalidCoordinateError,
    InvalidRegionError,
    Region,
    RegionSelection,
    ReportCategory,
    ReportPin,
    ReportPriority,
    ReportStatus,
    Tier,
    VisibilityResult,
)
from civicmap.geo.proximity import distances_from, within
from civicmap.geo.region_fitter import RegionFitter, fit_region
from civicmap.geo.region_selector import RegionSelector, select_region
from civicmap.geo.viewport import visible_pins

__all__ = [
    # Models
    "Bounds",
    "Coordinate",
    "Region",
    "RegionSelection",
    "ReportCategory",
    "ReportPin",
    "ReportPriority",
    "ReportStatus",
    "Tier",
    "VisibilityResult",
    # Errors
    "GeoValidationError",
    "InvalidCoordinateError",
    "InvalidRegionError",
    "EmptyPointSetError",
    # Distance / proximity
    "EARTH_RADIUS_KM",
    "distance_km",
    "haversine_km",
    "distances_from",
    "within",
    # Regions
    "RegionFitter",
    "fit_region",
    "RegionSelector",
    "select_region",
    # Viewport
    "visible_pins",
]
