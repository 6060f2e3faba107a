"""
Civic Map - Pytest Configuration and Fixtures

Shared fixtures for all tests:
- Configuration fixtures
- Sample coordinates and report pins around Rio de Janeiro
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from civicmap.geo.models import Coordinate, ReportPin

# Set test environment
os.environ["CM_ENVIRONMENT"] = "dev"

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_reports_csv(project_root: Path) -> Path:
    """Sample report CSV shipped with the project."""
    return project_root / "data" / "sample" / "reports.csv"


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def test_config() -> Any:
    """Get test configuration."""
    from civicmap.shared.config import get_config, reload_config

    # Ensure fresh config for tests
    reload_config("dev")
    return get_config("dev")


# =============================================================================
# Geographic Fixtures
# =============================================================================


@pytest.fixture
def rio_center() -> Coordinate:
    """Downtown Rio de Janeiro."""
    return Coordinate(-22.9068, -43.1729)


@pytest.fixture
def sample_coordinates() -> list[Coordinate]:
    """Sample Rio coordinates for testing."""
    return [
        Coordinate(-22.9068, -43.1729),  # Centro
        Coordinate(-22.9711, -43.1822),  # Copacabana
        Coordinate(-22.9519, -43.2105),  # Cristo Redentor
        Coordinate(-22.8088, -43.1950),  # Ilha do Governador
    ]


@pytest.fixture
def sample_pins() -> list[ReportPin]:
    """Reports on Ilha do Governador, all within 3 km of each other."""
    return [
        ReportPin("1", Coordinate(-22.8088162, -43.1965648), "road", "pending", "high"),
        ReportPin("2", Coordinate(-22.818955, -43.179716), "lighting", "in_progress", "medium"),
        ReportPin("3", Coordinate(-22.810044, -43.203333), "cleaning", "resolved", "medium"),
        ReportPin("4", Coordinate(-22.804519, -43.188436), "others", "pending", "high"),
        ReportPin("5", Coordinate(-22.796456, -43.185250), "road", "in_progress", "medium"),
    ]


@pytest.fixture
def island_user() -> Coordinate:
    """User standing among the sample pins."""
    return Coordinate(-22.8088, -43.1950)


# =============================================================================
# Cleanup Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def cleanup_env() -> Generator[None, None, None]:
    """Restore environment variables and drop cached config after each test."""
    from civicmap.shared.config import get_config

    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
    get_config.cache_clear()
