"""
Tests for Report Frames
"""

import numpy as np
import pandas as pd
import pytest

from civicmap.geo.models import Coordinate, InvalidCoordinateError, ReportCategory, ReportStatus
from civicmap.map.frames import FRAME_COLUMNS, frame_to_pins, pins_to_frame, status_breakdown


def test_pins_to_frame(sample_pins):
    """Test one row per pin with plain string enums."""
    df = pins_to_frame(sample_pins)

    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 5
    assert df.loc[0, "id"] == "1"
    assert df.loc[0, "latitude"] == pytest.approx(-22.8088162)
    assert df.loc[1, "status"] == "in_progress"
    assert df.loc[2, "category"] == "cleaning"


def test_pins_to_frame_empty():
    """Test empty input keeps the columns."""
    df = pins_to_frame([])

    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_frame_round_trip(sample_pins):
    """Test pins survive conversion to a frame and back."""
    assert frame_to_pins(pins_to_frame(sample_pins)) == sample_pins


def test_frame_to_pins_fills_blank_cells():
    """Test NaN enum cells fall back to defaults."""
    df = pd.DataFrame(
        {
            "id": [10, 11],
            "latitude": [-22.9, -22.8],
            "longitude": [-43.1, -43.2],
            "category": ["road", np.nan],
            "status": [np.nan, "resolved"],
        }
    )

    pins = frame_to_pins(df)

    assert pins[0].id == "10"
    assert pins[0].category is ReportCategory.ROAD
    assert pins[0].status is ReportStatus.PENDING
    assert pins[1].category is ReportCategory.OTHERS
    assert pins[1].status is ReportStatus.RESOLVED
    assert pins[1].coordinate == Coordinate(-22.8, -43.2)


def test_frame_to_pins_missing_columns():
    """Test required columns are checked."""
    df = pd.DataFrame({"id": [1], "latitude": [0.0]})

    with pytest.raises(ValueError, match="Missing required columns"):
        frame_to_pins(df)


def test_frame_to_pins_invalid_coordinate():
    """Test out-of-range rows are rejected."""
    df = pd.DataFrame({"id": [1], "latitude": [95.0], "longitude": [0.0]})

    with pytest.raises(InvalidCoordinateError):
        frame_to_pins(df)


def test_status_breakdown(sample_pins):
    """Test per-status counters."""
    assert status_breakdown(sample_pins) == {
        "total": 5,
        "pending": 2,
        "in_progress": 2,
        "resolved": 1,
    }


def test_status_breakdown_empty():
    """Test zero-filled counters."""
    assert status_breakdown([]) == {"total": 0, "pending": 0, "in_progress": 0, "resolved": 0}
