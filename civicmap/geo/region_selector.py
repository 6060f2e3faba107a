"""
Civic Map - Region Selector

Pick the initial map region for a user by widening the search in tiers:

1. Nearby (5 km): at least 3 reports -> fit user + those reports
2. Expanded (10 km): at least 2 reports -> fit user + those reports
3. Metro (50 km): no reports at all -> the caller's city-wide region
4. Otherwise -> medium zoom centered on the user

Each tier searches the full report set, never the previous tier's result.
Selection is pure and deterministic; it returns a tagged Tier instead of a
display string so the presentation layer decides how to word it.

Usage:
    selector = RegionSelector(config.map.selection, config.map.fitter)
    selection = selector.select(user_location, pins, config.map.city.region())
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from civicmap.geo.models import Coordinate, Region, RegionSelection, ReportPin, Tier
from civicmap.geo.proximity import within
from civicmap.geo.region_fitter import RegionFitter
from civicmap.shared.config import RegionFitterConfig, SelectionConfig

logger = logging.getLogger(__name__)


class RegionSelector:
    """Tiered initial-region selection."""

    def __init__(
        self,
        settings: SelectionConfig | None = None,
        fitter_settings: RegionFitterConfig | None = None,
    ):
        """
        Initialize region selector.

        Args:
            settings: Tier radii and thresholds (uses defaults if not provided)
            fitter_settings: Zoom limits for fitted tiers (uses defaults if not provided)
        """
        self.settings = settings or SelectionConfig()
        self.fitter = RegionFitter(fitter_settings)

    def select(
        self,
        user_location: Coordinate,
        all_pins: Sequence[ReportPin],
        city_wide_region: Region,
    ) -> RegionSelection:
        """
        Select the initial region for ``user_location``.

        Args:
            user_location: Resolved user coordinate
            all_pins: Complete report set (not filtered)
            city_wide_region: Fallback returned when no report is within the metro radius

        Returns:
            RegionSelection with region, tier and the number of reports giving context
        """
        s = self.settings
        extra = {
            "latitude": round(user_location.latitude, 4),
            "longitude": round(user_location.longitude, 4),
            "total_pins": len(all_pins),
        }

        nearby = within(user_location, all_pins, s.nearby_radius_km)
        if len(nearby) >= s.nearby_min_pins:
            return self._fitted(user_location, nearby, Tier.NEARBY_5KM, extra)

        expanded = within(user_location, all_pins, s.expanded_radius_km)
        if len(expanded) >= s.expanded_min_pins:
            return self._fitted(user_location, expanded, Tier.NEARBY_10KM, extra)

        metro = within(user_location, all_pins, s.metro_radius_km)
        if not metro:
            logger.debug(
                "No reports in metro radius, using city-wide region",
                extra={**extra, "tier": Tier.CITY_WIDE.value},
            )
            return RegionSelection(
                region=city_wide_region,
                tier=Tier.CITY_WIDE,
                context_count=len(all_pins),
            )

        logger.debug(
            f"{len(metro)} reports in metro radius, medium zoom on user",
            extra={**extra, "tier": Tier.METRO_50KM.value, "context_count": len(metro)},
        )
        return RegionSelection(
            region=Region.centered_on(user_location, s.metro_delta),
            tier=Tier.METRO_50KM,
            context_count=len(metro),
        )

    def _fitted(
        self,
        user_location: Coordinate,
        pins: list[ReportPin],
        tier: Tier,
        extra: dict,
    ) -> RegionSelection:
        region = self.fitter.fit([user_location, *(p.coordinate for p in pins)])
        logger.debug(
            f"Focusing on {len(pins)} nearby reports",
            extra={**extra, "tier": tier.value, "context_count": len(pins)},
        )
        return RegionSelection(region=region, tier=tier, context_count=len(pins))


def select_region(
    user_location: Coordinate,
    all_pins: Sequence[ReportPin],
    city_wide_region: Region,
    settings: SelectionConfig | None = None,
    fitter_settings: RegionFitterConfig | None = None,
) -> RegionSelection:
    """Convenience function to run region selection with the given settings."""
    selector = RegionSelector(settings, fitter_settings)
    return selector.select(user_location, all_pins, city_wide_region)
