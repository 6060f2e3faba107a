"""
Civic Map - Context Labels

Human-readable strings built from tagged engine results.
"""

from __future__ import annotations

from civicmap.geo.models import RegionSelection, Tier, VisibilityResult
from civicmap.map.filters import ReportFilter

SEPARATOR = " • "

TIER_LABELS: dict[Tier, str] = {
    Tier.NEARBY_5KM: "Nearby area",
    Tier.NEARBY_10KM: "Nearby region",
    Tier.METRO_50KM: "Your region",
}


def _problems(count: int) -> str:
    return f"{count} problems"


def tier_label(tier: Tier, count: int, city_name: str) -> str:
    prefix = city_name if tier == Tier.CITY_WIDE else TIER_LABELS[tier]
    return f"{prefix}{SEPARATOR}{_problems(count)}"


def context_label(selection: RegionSelection, city_name: str) -> str:
    """Describe the selected tier, e.g. "Nearby area • 4 problems"."""
    return tier_label(selection.tier, selection.context_count, city_name)


def city_label(city_name: str, count: int) -> str:
    return f"{city_name}{SEPARATOR}{_problems(count)}"


def filter_context_label(report_filter: ReportFilter, count: int) -> str:
    return f"{report_filter.label}{SEPARATOR}{_problems(count)}"


def recenter_label(count: int) -> str:
    return f"Your location{SEPARATOR}{_problems(count)}"


def visibility_label(result: VisibilityResult) -> str:
    """Visible and total counts, or the on-map count when nothing is visible."""
    if result.count > 0:
        return f"{result.count} visible problem(s){SEPARATOR}{result.total} total"
    return f"{result.total} problem(s) on the map"
