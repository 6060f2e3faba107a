"""
Civic Map - Region Fitter

Compute a map region around a set of points:
- Single point: tight zoom at ``min_delta``
- Several points: bounding box midpoint, span widened by ``margin_factor``
- Each axis clamped independently to ``[min_delta, max_delta]``

Clamping to ``max_delta`` keeps the map readable at the cost of containment:
when the span of the points exceeds ``max_delta`` the outermost points can
fall outside the returned region. Callers that need every point on screen
must widen the region themselves.

Usage:
    fitter = RegionFitter()
    region = fitter.fit([user_location, *(pin.coordinate for pin in nearby)])
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from civicmap.geo.models import Coordinate, EmptyPointSetError, Region
from civicmap.shared.config import RegionFitterConfig

logger = logging.getLogger(__name__)


class RegionFitter:
    """Fit a clamped region around a non-empty point set."""

    def __init__(self, settings: RegionFitterConfig | None = None):
        """
        Initialize region fitter.

        Args:
            settings: Zoom limits (uses defaults if not provided)
        """
        self.settings = settings or RegionFitterConfig()

    def clamp_delta(self, raw_delta: float) -> float:
        """Clamp a span into ``[min_delta, max_delta]``."""
        lower = self.settings.min_delta
        upper = self.settings.max_delta
        return min(max(raw_delta, lower), upper)

    def fit(self, points: Sequence[Coordinate]) -> Region:
        """
        Fit a region around ``points``.

        Args:
            points: At least one coordinate, usually the user's own location
                followed by nearby report locations

        Returns:
            Region centered on the bounding box midpoint

        Raises:
            EmptyPointSetError: If ``points`` is empty
        """
        if not points:
            raise EmptyPointSetError("Cannot fit a region to an empty point set")

        if len(points) == 1:
            return Region.centered_on(points[0], self.settings.min_delta)

        lats = [p.latitude for p in points]
        lngs = [p.longitude for p in points]
        min_lat, max_lat = min(lats), max(lats)
        min_lng, max_lng = min(lngs), max(lngs)

        center = Coordinate((min_lat + max_lat) / 2, (min_lng + max_lng) / 2)
        raw_lat_delta = (max_lat - min_lat) * self.settings.margin_factor
        raw_lng_delta = (max_lng - min_lng) * self.settings.margin_factor

        region = Region(
            center=center,
            latitude_delta=self.clamp_delta(raw_lat_delta),
            longitude_delta=self.clamp_delta(raw_lng_delta),
        )

        if raw_lat_delta > self.settings.max_delta or raw_lng_delta > self.settings.max_delta:
            logger.debug(
                "Region span capped at max_delta; outlying points may be off-screen",
                extra={
                    "raw_latitude_delta": raw_lat_delta,
                    "raw_longitude_delta": raw_lng_delta,
                    "max_delta": self.settings.max_delta,
                },
            )

        return region


def fit_region(points: Sequence[Coordinate], settings: RegionFitterConfig | None = None) -> Region:
    """Convenience function to fit a region with the given zoom limits."""
    return RegionFitter(settings).fit(points)
