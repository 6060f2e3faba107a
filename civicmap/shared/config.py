"""
Civic Map - Configuration Loader

Pydantic-based configuration management with:
- Environment-based configuration (dev/prod)
- YAML file loading with inheritance
- Environment variable overrides
- Type validation via Pydantic

Usage:
    from civicmap.shared.config import get_config

    config = get_config()  # Uses CM_ENVIRONMENT env var
    config = get_config("dev")  # Explicit environment

    # Access config values
    max_delta = config.map.fitter.max_delta
    city_region = config.map.city.region()
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

if TYPE_CHECKING:
    from civicmap.geo.models import Region

VALID_ENVIRONMENTS = frozenset({"dev", "prod"})

# =============================================================================
# Configuration Models
# =============================================================================


class ProjectConfig(BaseModel):
    """Project metadata configuration."""

    name: str = "civic-map"
    version: str = "0.1.0"
    description: str = "Adaptive map region and viewport visibility for citizen problem reports"


class RegionFitterConfig(BaseModel):
    """Zoom limits applied when fitting a region around a point set."""

    min_delta: float = Field(default=0.02, gt=0)
    max_delta: float = Field(default=0.1, gt=0)
    margin_factor: float = Field(default=1.5, ge=1.0)

    @model_validator(mode="after")
    def check_delta_range(self) -> RegionFitterConfig:
        """Ensure the clamp range is not inverted."""
        if self.min_delta > self.max_delta:
            raise ValueError(
                f"min_delta ({self.min_delta}) must not exceed max_delta ({self.max_delta})"
            )
        return self


class SelectionConfig(BaseModel):
    """Tiered search radii and the pin counts required to accept each tier."""

    nearby_radius_km: float = Field(default=5.0, gt=0)
    nearby_min_pins: int = Field(default=3, ge=1)
    expanded_radius_km: float = Field(default=10.0, gt=0)
    expanded_min_pins: int = Field(default=2, ge=1)
    metro_radius_km: float = Field(default=50.0, gt=0)
    metro_delta: float = Field(default=0.05, gt=0)

    @model_validator(mode="after")
    def check_radii_order(self) -> SelectionConfig:
        """Radii must widen from one tier to the next."""
        if not (self.nearby_radius_km <= self.expanded_radius_km <= self.metro_radius_km):
            raise ValueError(
                "Search radii must be non-decreasing: "
                f"nearby={self.nearby_radius_km}, expanded={self.expanded_radius_km}, "
                f"metro={self.metro_radius_km}"
            )
        return self


class CityConfig(BaseModel):
    """City-wide fallback view."""

    name: str = "Rio de Janeiro"
    latitude: float = Field(default=-22.9068, ge=-90, le=90)
    longitude: float = Field(default=-43.1729, ge=-180, le=180)
    delta: float = Field(default=0.3, gt=0)

    def region(self) -> Region:
        """Build the city-wide fallback region."""
        from civicmap.geo.models import Coordinate, Region

        return Region.centered_on(Coordinate(self.latitude, self.longitude), self.delta)


class MapConfig(BaseModel):
    """Map region configuration."""

    recenter_delta: float = Field(default=0.02, gt=0)
    location_delta: float = Field(default=0.05, gt=0)
    fitter: RegionFitterConfig = Field(default_factory=RegionFitterConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    city: CityConfig = Field(default_factory=CityConfig)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return str(v).upper()


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Main configuration class for Civic Map.

    Loads configuration from:
    1. YAML files in configs/environments/
    2. Environment variables (CM_ prefix, "__" for nesting)

    Environment variables take precedence over YAML values.
    """

    model_config = SettingsConfigDict(
        env_prefix="CM_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "prod"] = "dev"

    # Configuration sections
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment: {v}. Must be one of: {sorted(VALID_ENVIRONMENTS)}"
            )
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment variables override values passed in from YAML
        return env_settings, init_settings, dotenv_settings, file_secret_settings


# =============================================================================
# Configuration Loading Functions
# =============================================================================


def _get_config_dir() -> Path:
    """Get the configuration directory path."""
    # Try relative path from the project root
    config_dir = Path(__file__).parent.parent.parent / "configs"
    if config_dir.exists():
        return config_dir

    # Try from current working directory
    config_dir = Path.cwd() / "configs"
    if config_dir.exists():
        return config_dir

    raise FileNotFoundError(
        "Could not find configs directory. Ensure you're running from the project root."
    )


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_config_for_environment(environment: str) -> dict[str, Any]:
    """Load and merge configuration for a specific environment."""
    config_dir = _get_config_dir()
    env_dir = config_dir / "environments"

    base_config = _load_yaml_file(env_dir / "base.yaml")
    env_config = _load_yaml_file(env_dir / f"{environment}.yaml")

    # Remove inheritance marker if present
    env_config.pop("_inherit", None)

    merged = _deep_merge(base_config, env_config)
    merged["environment"] = environment

    return merged


@lru_cache(maxsize=4)
def get_config(environment: str | None = None) -> Settings:
    """
    Get configuration for the specified environment.

    Args:
        environment: Environment name (dev, prod).
                    If None, uses CM_ENVIRONMENT env var, defaulting to "dev".

    Returns:
        Settings: Validated configuration object.

    Example:
        config = get_config()
        fallback = config.map.city.region()
    """
    if environment is None:
        environment = os.getenv("CM_ENVIRONMENT", "dev")
    if environment not in VALID_ENVIRONMENTS:
        raise ValueError(
            f"Invalid environment: {environment}. Must be one of: {sorted(VALID_ENVIRONMENTS)}"
        )

    yaml_config = _load_config_for_environment(environment)
    settings = Settings(**yaml_config)

    # CM_ENVIRONMENT must not relabel an explicitly requested environment
    if settings.environment != environment:
        settings = settings.model_copy(update={"environment": environment})
    return settings


def reload_config(environment: str | None = None) -> Settings:
    """
    Reload configuration, clearing the cache.

    Useful for testing or when config files have changed.
    """
    get_config.cache_clear()
    return get_config(environment)
