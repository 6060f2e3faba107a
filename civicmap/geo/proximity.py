"""
Civic Map - Proximity Search

Radius filter over a report set, measured from an origin coordinate.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from civicmap.geo.distance import haversine_km
from civicmap.geo.models import Coordinate, ReportPin

logger = logging.getLogger(__name__)


def distances_from(origin: Coordinate, pins: Sequence[ReportPin]) -> np.ndarray:
    """Distance in kilometers from ``origin`` to every pin, in input order."""
    if not pins:
        return np.empty(0, dtype=float)
    lats = np.fromiter((p.coordinate.latitude for p in pins), dtype=float, count=len(pins))
    lngs = np.fromiter((p.coordinate.longitude for p in pins), dtype=float, count=len(pins))
    return haversine_km(origin.latitude, origin.longitude, lats, lngs)


def within(origin: Coordinate, pins: Sequence[ReportPin], radius_km: float) -> list[ReportPin]:
    """
    Return every pin at most ``radius_km`` from ``origin``.

    Input order is preserved and ``pins`` is never modified.

    Args:
        origin: Search center
        pins: Report pins to search
        radius_km: Inclusive search radius

    Returns:
        New list with the matching pins

    Raises:
        ValueError: If the radius is negative or not finite
    """
    if not math.isfinite(radius_km) or radius_km < 0:
        raise ValueError(f"Invalid radius_km: {radius_km!r}. Must be finite and >= 0")

    distances = distances_from(origin, pins)
    matches = [pin for pin, dist in zip(pins, distances, strict=True) if dist <= radius_km]

    logger.debug(
        f"{len(matches)} of {len(pins)} pins within {radius_km} km",
        extra={"radius_km": radius_km, "matches": len(matches), "total": len(pins)},
    )
    return matches
