"""
Civic Map - Report Frames

Tabular views of report pins for scripts and dashboards:
- pins_to_frame / frame_to_pins: DataFrame conversion with validation
- status_breakdown: the pending / in progress / resolved counters
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from civicmap.geo.models import Coordinate, ReportPin, ReportStatus

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["id", "latitude", "longitude", "category", "status", "priority"]
REQUIRED_COLUMNS = ["id", "latitude", "longitude"]


def pins_to_frame(pins: Sequence[ReportPin]) -> pd.DataFrame:
    """Convert pins to a DataFrame with one row per pin, in input order."""
    records = [
        {
            "id": pin.id,
            "latitude": pin.latitude,
            "longitude": pin.longitude,
            "category": pin.category.value,
            "status": pin.status.value,
            "priority": pin.priority.value,
        }
        for pin in pins
    ]
    return pd.DataFrame(records, columns=FRAME_COLUMNS)


def frame_to_pins(df: pd.DataFrame) -> list[ReportPin]:
    """
    Build validated pins from a DataFrame.

    Args:
        df: DataFrame with at least id, latitude and longitude columns

    Returns:
        List of ReportPin in row order

    Raises:
        ValueError: If required columns are missing or a row fails validation
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    # Blank CSV cells arrive as NaN; treat them as absent
    df = df.astype(object).where(df.notna(), None)

    pins = []
    for row in df.to_dict(orient="records"):
        pins.append(
            ReportPin(
                id=str(row["id"]),
                coordinate=Coordinate(float(row["latitude"]), float(row["longitude"])),
                category=row.get("category") or "others",
                status=row.get("status") or "pending",
                priority=row.get("priority") or "medium",
            )
        )

    logger.info(f"Loaded {len(pins)} report pins", extra={"rows": len(pins)})
    return pins


def status_breakdown(pins: Sequence[ReportPin]) -> dict[str, int]:
    """Count pins per status, zero-filled, plus the total."""
    counts = pins_to_frame(pins)["status"].value_counts()
    breakdown = {"total": len(pins)}
    for status in ReportStatus:
        breakdown[status.value] = int(counts.get(status.value, 0))
    return breakdown
