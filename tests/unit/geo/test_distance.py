"""
Tests for Distance Calculator
"""

import math

import numpy as np
import pytest

from civicmap.geo.distance import EARTH_RADIUS_KM, distance_km, haversine_km
from civicmap.geo.models import Coordinate

RIO = Coordinate(-22.9068, -43.1729)
SAO_PAULO = Coordinate(-23.5505, -46.6333)


def test_zero_distance(sample_coordinates):
    """Test distance from a point to itself is zero."""
    for coord in sample_coordinates:
        assert distance_km(coord, coord) == 0.0


def test_symmetry(sample_coordinates):
    """Test distance does not depend on argument order."""
    pairs = [(a, b) for a in sample_coordinates for b in sample_coordinates]
    pairs.append((RIO, SAO_PAULO))
    pairs.append((Coordinate(89.9, 179.9), Coordinate(-89.9, -179.9)))

    for a, b in pairs:
        assert distance_km(a, b) == distance_km(b, a)


def test_one_degree_of_latitude():
    """Test one degree along a meridian."""
    expected = EARTH_RADIUS_KM * math.pi / 180

    assert distance_km(Coordinate(0, 0), Coordinate(1, 0)) == pytest.approx(expected, rel=1e-9)


def test_rio_to_sao_paulo():
    """Test a known city pair (~360 km)."""
    assert 355 < distance_km(RIO, SAO_PAULO) < 366


def test_antipodal_points_are_finite():
    """Test the largest possible distance is half the circumference."""
    dist = distance_km(Coordinate(0, 0), Coordinate(0, 180))

    assert math.isfinite(dist)
    assert dist == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_distance_across_antimeridian():
    """Test points on either side of the date line are close."""
    assert distance_km(Coordinate(0, 179.9), Coordinate(0, -179.9)) == pytest.approx(
        22.239, abs=0.01
    )


def test_distance_is_non_negative_float(sample_coordinates):
    """Test return type and sign."""
    dist = distance_km(sample_coordinates[0], sample_coordinates[1])

    assert isinstance(dist, float)
    assert dist > 0


def test_haversine_vectorized_matches_scalar(sample_coordinates):
    """Test the array form agrees with pairwise calls."""
    origin = sample_coordinates[0]
    lats = np.array([c.latitude for c in sample_coordinates])
    lngs = np.array([c.longitude for c in sample_coordinates])

    distances = haversine_km(origin.latitude, origin.longitude, lats, lngs)

    expected = [distance_km(origin, c) for c in sample_coordinates]
    assert distances == pytest.approx(expected)
