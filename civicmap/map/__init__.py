"""
Civic Map - Map Screen Support

Caller-side pieces around the geo engine:
- ReportFilter: status/category filter chips
- Context labels for tiers, filters and visibility
- MapSession: state holder re-invoking the engine on trigger events
- DataFrame helpers for report sets
"""

from civicmap.map.context import (
    city_label,
    context_label,
    filter_context_label,
    recenter_label,
    tier_label,
    visibility_label,
)
from civicmap.map.filters import ReportFilter, available_filters
from civicmap.map.frames import frame_to_pins, pins_to_frame, status_breakdown
from civicmap.map.session import MapSession

__all__ = [
    "MapSession",
    "ReportFilter",
    "available_filters",
    "city_label",
    "context_label",
    "filter_context_label",
    "recenter_label",
    "tier_label",
    "visibility_label",
    "frame_to_pins",
    "pins_to_frame",
    "status_breakdown",
]
