"""
Pytest configuration and shared fixtures for pulleysim tests.
"""

import json
import pytest

from pulleysim.enums import SystemMode
from pulleysim.io import PulleyConfig


# ─── Configurations ──────────────────────────────────────────────────────


@pytest.fixture
def reducer_config():
    """100 mm driving 200 mm at 120 RPM and 500 W, friction wheels."""
    return PulleyConfig(
        driver_diameter_mm=100.0,
        driven_diameter_mm=200.0,
        input_rpm=120.0,
        input_power_w=500.0,
        centre_distance_mm=300.0,
        mode=SystemMode.FRICTION,
    )


@pytest.fixture
def belt_config():
    """Equal 150 mm pulleys on a belt at 300 mm centres."""
    return PulleyConfig(
        driver_diameter_mm=150.0,
        driven_diameter_mm=150.0,
        input_rpm=1000.0,
        input_power_w=1500.0,
        centre_distance_mm=300.0,
        mode=SystemMode.BELT,
    )


@pytest.fixture
def multiplier_config():
    """Large driver, small driven pulley (speed multiplier)."""
    return PulleyConfig(
        driver_diameter_mm=400.0,
        driven_diameter_mm=50.0,
        input_rpm=300.0,
        input_power_w=1000.0,
        centre_distance_mm=500.0,
        mode=SystemMode.BELT,
    )


# ─── Files ───────────────────────────────────────────────────────────────


def _config_dict():
    """Return raw config dict as saved by save_config_json()."""
    return {
        "schema_version": "1.0",
        "driver_diameter_mm": 120.0,
        "driven_diameter_mm": 240.0,
        "input_rpm": 600.0,
        "input_power_w": 750.0,
        "centre_distance_mm": 450.0,
        "mode": "belt",
    }


@pytest.fixture
def config_dict():
    """Raw config dict (fresh copy per test)."""
    return _config_dict()


@pytest.fixture
def temp_json_file(tmp_path):
    """Config JSON written to a temporary file."""
    path = tmp_path / "drive.json"
    path.write_text(json.dumps(_config_dict(), indent=2))
    return path
