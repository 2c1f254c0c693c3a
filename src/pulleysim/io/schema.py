"""
JSON schema definition and validation for pulley transmission configs.

This defines the contract between the calculator and any front end that
stores or exchanges configurations. The primary schema is generated from the
Pydantic models; this module provides runtime validation helpers.
"""

from typing import Any, Dict

SCHEMA_VERSION = "1.0"

REQUIRED_CONFIG_FIELDS = (
    "driver_diameter_mm",
    "driven_diameter_mm",
    "input_rpm",
    "input_power_w",
)

VALID_MODES = ("friction", "belt")


def get_config_schema() -> Dict[str, Any]:
    """Get the JSON schema of PulleyConfig, generated from the Pydantic model."""
    from .loaders import PulleyConfig

    schema = PulleyConfig.model_json_schema(by_alias=False)
    schema["$comment"] = f"pulleysim config schema v{SCHEMA_VERSION}"
    return schema


def get_result_schema() -> Dict[str, Any]:
    """Get the JSON schema of TransmissionResult."""
    from .loaders import TransmissionResult

    return TransmissionResult.model_json_schema(by_alias=False)


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate config JSON data against the schema.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }
    """
    errors = []
    warnings = []

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field (assuming current format)")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    config = data.get("config", data)

    for name in REQUIRED_CONFIG_FIELDS:
        if name not in config:
            errors.append(f"Missing required field: '{name}'")
        elif isinstance(config[name], bool) or not isinstance(config[name], (int, float)):
            errors.append(f"Field '{name}' must be a number")

    mode = config.get("mode")
    if mode is None:
        warnings.append("Missing 'mode' field (will use 'friction')")
    elif str(mode).lower() not in VALID_MODES:
        errors.append(
            f"Invalid mode '{mode}'. Must be one of: {', '.join(VALID_MODES)}"
        )
    elif str(mode).lower() == "belt" and "centre_distance_mm" not in config:
        warnings.append("Belt mode without 'centre_distance_mm' (will use default 300 mm)")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }
