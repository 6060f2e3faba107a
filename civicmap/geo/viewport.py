"""
Civic Map - Viewport Filter

Bounding-box visibility of report pins for the active region. Re-run after
every region change and every change to the (already filtered) pin set;
no caching happens here.
"""

from __future__ import annotations

from collections.abc import Sequence

from civicmap.geo.models import Region, ReportPin, VisibilityResult


def visible_pins(region: Region, pins: Sequence[ReportPin]) -> VisibilityResult:
    """
    Return the pins inside ``region`` (inclusive bounds), preserving order.

    Args:
        region: Active map region
        pins: Pins to test, after any upstream category/status filter

    Returns:
        VisibilityResult with the visible pins, their count and the input size
    """
    bounds = region.bounds
    visible = tuple(pin for pin in pins if bounds.contains(pin.coordinate))
    return VisibilityResult(visible_pins=visible, count=len(visible), total=len(pins))
