"""
Civic Map - Map Session

Caller-side state for the map screen. The geo engine is pure; this class owns
what the screen used to keep in component state (user location, report set,
active filter, current region, context label) and re-invokes the engine on
each trigger event:

- location update    -> provisional region, then initial selection
- report set update  -> initial selection, visibility
- filter change      -> visibility over the filtered set
- pan / zoom         -> visibility for the new region
- recenter on user   -> tight region on the user, visibility

Usage:
    session = MapSession(get_config())
    session.update_reports(pins)
    session.update_location(Coordinate(-22.9068, -43.1729))
    print(session.context, session.visibility_label)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from civicmap.geo.models import (
    Coordinate,
    Region,
    RegionSelection,
    ReportPin,
    Tier,
    VisibilityResult,
)
from civicmap.geo.proximity import within
from civicmap.geo.region_selector import RegionSelector
from civicmap.geo.viewport import visible_pins
from civicmap.map import context as labels
from civicmap.map.filters import ReportFilter
from civicmap.shared.config import Settings, get_config

logger = logging.getLogger(__name__)


class MapSession:
    """State holder that drives region selection and viewport visibility."""

    def __init__(self, config: Settings | None = None):
        """
        Initialize map session.

        Args:
            config: Configuration object (uses default if not provided)
        """
        self.config = config or get_config()
        self.selector = RegionSelector(self.config.map.selection, self.config.map.fitter)
        self.city_region = self.config.map.city.region()

        self.user_location: Coordinate | None = None
        self.pins: list[ReportPin] = []
        self.report_filter = ReportFilter()
        self.region: Region = self.city_region
        self.selection: RegionSelection | None = None
        self.context = "Loading..."
        self._visibility = VisibilityResult()

    # =========================================================================
    # Derived State
    # =========================================================================

    @property
    def has_initial_region(self) -> bool:
        return self.selection is not None

    @property
    def filtered_pins(self) -> list[ReportPin]:
        return self.report_filter.apply(self.pins)

    @property
    def visibility(self) -> VisibilityResult:
        return self._visibility

    @property
    def visibility_label(self) -> str:
        return labels.visibility_label(self._visibility)

    # =========================================================================
    # Trigger Events
    # =========================================================================

    def update_location(self, location: Coordinate) -> Region:
        """Store a new user location and return the active region."""
        self.user_location = location

        if not self.has_initial_region or not self.pins:
            self.region = Region.centered_on(location, self.config.map.location_delta)

        self._try_initial_selection()
        self._refresh_visibility()
        return self.region

    def update_reports(self, pins: Sequence[ReportPin]) -> VisibilityResult:
        """Replace the report set, e.g. after a store refresh or a new report."""
        self.pins = list(pins)

        if self.user_location is None and self.pins:
            self.context = labels.city_label(self.config.map.city.name, len(self.pins))

        self._try_initial_selection()
        return self._refresh_visibility()

    def set_filter(self, report_filter: ReportFilter | str) -> VisibilityResult:
        """Apply a filter chip and recompute visibility over the filtered set."""
        if isinstance(report_filter, str):
            report_filter = ReportFilter.parse(report_filter)
        self.report_filter = report_filter

        if self.has_initial_region and self.user_location is not None:
            self.context = self._filter_context()

        return self._refresh_visibility()

    def on_region_change(self, region: Region) -> VisibilityResult:
        """User finished a pan or zoom gesture."""
        self.region = region
        return self._refresh_visibility()

    def recenter_on_user(self) -> VisibilityResult | None:
        """
        Zoom tightly on the user.

        Returns:
            The new visibility, or None when no location is known yet
        """
        if self.user_location is None:
            return None

        self.region = Region.centered_on(self.user_location, self.config.map.recenter_delta)
        result = self._refresh_visibility()
        self.context = labels.recenter_label(result.count)
        return result

    def recompute_region(self) -> Region:
        """Re-run tiered selection on demand; city-wide without a user location."""
        if self.user_location is None:
            self.region = self.city_region
        else:
            self._apply_selection()
        self._refresh_visibility()
        return self.region

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _try_initial_selection(self) -> None:
        # Wait for a non-empty report set, as the screen did
        if self.has_initial_region or self.user_location is None or not self.pins:
            return
        self._apply_selection()
        logger.info(
            "Initial map region selected",
            extra={
                "tier": self.selection.tier.value,
                "context_count": self.selection.context_count,
            },
        )

    def _apply_selection(self) -> None:
        self.selection = self.selector.select(self.user_location, self.pins, self.city_region)
        self.region = self.selection.region
        self.context = labels.context_label(self.selection, self.config.map.city.name)

    def _filter_context(self) -> str:
        filtered_count = len(self.filtered_pins)
        if not self.report_filter.is_all:
            return labels.filter_context_label(self.report_filter, filtered_count)

        # Back to "all": describe the surroundings from the expanded radius
        settings = self.selector.settings
        nearby = within(self.user_location, self.pins, settings.expanded_radius_km)
        if len(nearby) >= settings.expanded_min_pins:
            return labels.tier_label(Tier.NEARBY_10KM, filtered_count, self.config.map.city.name)
        if self.pins:
            return labels.city_label(self.config.map.city.name, filtered_count)
        return self.context

    def _refresh_visibility(self) -> VisibilityResult:
        self._visibility = visible_pins(self.region, self.filtered_pins)
        return self._visibility
