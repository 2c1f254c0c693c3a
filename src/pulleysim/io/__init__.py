"""
Pulleysim IO - configuration models, JSON schema, loaders and savers.

Example:
    >>> from pulleysim.io import PulleyConfig, save_config_json, load_config_json
    >>>
    >>> config = PulleyConfig(driver_diameter_mm=100, driven_diameter_mm=200, mode="belt")
    >>> save_config_json(config, "config.json")
    >>> loaded = load_config_json("config.json")
"""

from .loaders import (
    load_config_json,
    save_config_json,
    PulleyConfig,
    TransmissionResult,
    GraphDataPoint,
    Application,
)

from .schema import (
    SCHEMA_VERSION,
    get_config_schema,
    get_result_schema,
    validate_json_schema,
)

__all__ = [
    # Loaders
    "load_config_json",
    "save_config_json",

    # Models
    "PulleyConfig",
    "TransmissionResult",
    "GraphDataPoint",
    "Application",

    # Schema
    "SCHEMA_VERSION",
    "get_config_schema",
    "get_result_schema",
    "validate_json_schema",
]
