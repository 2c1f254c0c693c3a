"""
JSON input/output for pulley transmission configurations.

Loads and saves the four independent inputs (plus coupling mode) that fully
determine a transmission, and defines the typed result models returned by
the calculator.

Uses Pydantic for automatic validation and enum coercion.
"""

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..enums import SystemMode, DriveCategory
from ..constants import (
    DEFAULT_DRIVER_DIAMETER_MM,
    DEFAULT_DRIVEN_DIAMETER_MM,
    DEFAULT_INPUT_RPM,
    DEFAULT_INPUT_POWER_W,
    DEFAULT_CENTRE_DISTANCE_MM,
)
from .schema import SCHEMA_VERSION


class PulleyConfig(BaseModel):
    """Two-pulley transmission configuration.

    Immutable: every change produces a new config and a freshly computed
    result. Values are not range-checked here - use validate_config() for
    that - so the calculator can still be called with degenerate input.
    """
    model_config = ConfigDict(extra='ignore', frozen=True)

    driver_diameter_mm: float = DEFAULT_DRIVER_DIAMETER_MM
    driven_diameter_mm: float = DEFAULT_DRIVEN_DIAMETER_MM
    input_rpm: float = DEFAULT_INPUT_RPM
    input_power_w: float = DEFAULT_INPUT_POWER_W
    centre_distance_mm: float = DEFAULT_CENTRE_DISTANCE_MM  # Only used in belt mode
    mode: SystemMode = SystemMode.FRICTION

    @field_validator('mode', mode='before')
    @classmethod
    def coerce_mode(cls, v):
        if isinstance(v, str):
            return SystemMode(v.lower())
        return v

    @property
    def is_belt(self) -> bool:
        return self.mode == SystemMode.BELT


class TransmissionResult(BaseModel):
    """Steady-state quantities derived from a PulleyConfig."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    ratio: float  # Driven / driver diameter
    input_torque_nm: float
    output_torque_nm: float
    output_rpm: float
    tangential_velocity_m_s: float  # At the driver rim
    belt_length_mm: float  # 0 outside belt mode
    mechanical_advantage: float  # Equal to ratio in this model
    omega_input_rad_s: float = 0.0
    omega_output_rad_s: float = 0.0
    effective_centre_distance_mm: float = 0.0


class GraphDataPoint(BaseModel):
    """One sample of the driven-diameter response curve."""
    model_config = ConfigDict(frozen=True)

    driven_diameter_mm: float
    output_rpm: float
    output_torque_nm: float


class Application(BaseModel):
    """Illustrative real-world use of a drive category."""
    model_config = ConfigDict(frozen=True)

    category: DriveCategory
    title: str
    description: str
    icon: str


def load_config_json(filepath: Union[str, Path]) -> PulleyConfig:
    """
    Load a transmission configuration from JSON.

    Accepts either a bare config object or one wrapped in a 'config' key
    (as written by to_json()).

    Args:
        filepath: Path to JSON file

    Returns:
        PulleyConfig

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON fields have the wrong types
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Invalid config JSON - expected an object")

    if 'config' in data:
        data = data['config']

    return PulleyConfig.model_validate(data)


def save_config_json(config: PulleyConfig, filepath: Union[str, Path]) -> None:
    """
    Save a transmission configuration to JSON.

    Args:
        config: Configuration to save
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    data = config.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
