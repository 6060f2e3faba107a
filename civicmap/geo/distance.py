"""
Civic Map - Distance Calculator

Great-circle distances using the haversine formula on a spherical Earth.
The kernel is written against numpy so the same code serves a single pair
of coordinates and a whole column of report locations.
"""

from __future__ import annotations

import numpy as np

from civicmap.geo.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(
    lat1: float | np.ndarray,
    lng1: float | np.ndarray,
    lat2: float | np.ndarray,
    lng2: float | np.ndarray,
) -> np.ndarray:
    """
    Return great-circle distance in kilometers.

    Accepts scalars or broadcastable arrays of degrees.
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    # abs() keeps the result bit-identical when the endpoints are swapped
    dphi = np.abs(np.radians(np.subtract(lat2, lat1)))
    dlmb = np.abs(np.radians(np.subtract(lng2, lng1)))

    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
    # Rounding can push antipodal pairs slightly past 1
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Distance in kilometers between two coordinates."""
    return float(haversine_km(a.latitude, a.longitude, b.latitude, b.longitude))
