"""
Initial Region Selection Script
Loads a report CSV and prints the initial map region for a user location
"""

import json
import logging
import sys
from pathlib import Path

import pandas as pd

from civicmap.geo import Coordinate, RegionSelector, visible_pins
from civicmap.map import context_label, frame_to_pins, status_breakdown, visibility_label
from civicmap.shared.config import get_config
from civicmap.shared.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def select_initial_region(
    reports_path: str = "data/sample/reports.csv",
    latitude: float = -22.8088,
    longitude: float = -43.1950,
) -> dict:
    """
    Select the initial map region for a user over a CSV of reports

    Args:
        reports_path: CSV with id, latitude, longitude and optional category/status/priority
        latitude: User latitude
        longitude: User longitude

    Returns:
        Dictionary with region, tier, context label, visibility summary and visible ids
    """
    config = get_config()
    path = Path(reports_path)
    if not path.exists():
        raise FileNotFoundError(f"Report file not found: {path}")

    # Keep ids as text so "007" stays "007"
    pins = frame_to_pins(pd.read_csv(path, dtype={"id": str}))
    user_location = Coordinate(latitude, longitude)

    selector = RegionSelector(config.map.selection, config.map.fitter)
    selection = selector.select(user_location, pins, config.map.city.region())
    visibility = visible_pins(selection.region, pins)

    logger.info(f"Selected tier {selection.tier.value} for {len(pins)} reports")

    return {
        "region": selection.region.to_dict(),
        "tier": selection.tier.value,
        "context": context_label(selection, config.map.city.name),
        "visibility": visibility_label(visibility),
        "visible_ids": [pin.id for pin in visibility.visible_pins],
        "status": status_breakdown(pins),
    }


if __name__ == "__main__":
    configure_logging()

    args = sys.argv[1:]
    if len(args) not in (0, 1, 3):
        sys.exit("usage: select_region.py [reports.csv [latitude longitude]]")

    kwargs = {}
    if args:
        kwargs["reports_path"] = args[0]
    if len(args) == 3:
        kwargs["latitude"] = float(args[1])
        kwargs["longitude"] = float(args[2])

    print(json.dumps(select_initial_region(**kwargs), indent=2, ensure_ascii=False))
