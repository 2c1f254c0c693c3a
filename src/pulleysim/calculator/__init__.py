"""
Pulley Transmission Calculator - steady-state physics of a pulley pair.

All calculation functions are pure and return typed models.

Example:
    >>> from pulleysim.calculator import calculate_transmission, classify_ratio
    >>> from pulleysim.io import PulleyConfig
    >>>
    >>> result = calculate_transmission(PulleyConfig(driver_diameter_mm=100, driven_diameter_mm=200))
    >>> result.output_rpm
    60.0
    >>> classify_ratio(result.ratio)
    <DriveCategory.REDUCER: 'reducer'>
"""

from .core import (
    # Utility functions
    rpm_to_rad_s,
    torque_from_power,
    speed_ratio,
    effective_centre_distance,
    calculate_belt_length,
    sweep_diameters,

    # Transmission model
    calculate_transmission,

    # Response curve
    generate_response_curve,

    # Classification
    classify_ratio,
    get_applications,
)

from .validation import (
    validate_config,
    clamp_centre_distance,
    minimum_centre_distance,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from ..enums import SystemMode, DriveCategory

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

from ..io import PulleyConfig, TransmissionResult, GraphDataPoint, Application


__all__ = [
    # Enums
    "SystemMode",
    "DriveCategory",

    # Models
    "PulleyConfig",
    "TransmissionResult",
    "GraphDataPoint",
    "Application",

    # Utility functions
    "rpm_to_rad_s",
    "torque_from_power",
    "speed_ratio",
    "effective_centre_distance",
    "calculate_belt_length",
    "sweep_diameters",

    # Transmission model
    "calculate_transmission",

    # Response curve
    "generate_response_curve",

    # Classification
    "classify_ratio",
    "get_applications",

    # Validation
    "validate_config",
    "clamp_centre_distance",
    "minimum_centre_distance",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
