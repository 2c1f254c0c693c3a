"""
Pulleysim - two-pulley transmission calculator and belt geometry.

Steady-state speed, torque and belt length for friction wheels or an open
belt drive, plus the tangent geometry needed to draw the belt.

Example:
    >>> from pulleysim import PulleyConfig, calculate_transmission, solve_belt_wrap
    >>>
    >>> config = PulleyConfig(driver_diameter_mm=100, driven_diameter_mm=200,
    ...                       input_rpm=120, input_power_w=500)
    >>> result = calculate_transmission(config)
    >>> round(result.output_torque_nm, 2)
    79.58

Note: All imports are lazy-loaded. The calculator can be imported without
pulling in the HTTP client used by the narrative analysis.
"""

__version__ = "0.1.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"SystemMode", "DriveCategory"}

_CALCULATOR = {
    "calculate_transmission",
    "generate_response_curve",
    "classify_ratio",
    "get_applications",
    "calculate_belt_length",
    "effective_centre_distance",
    "validate_config",
    "clamp_centre_distance",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",
}

_IO = {
    "PulleyConfig",
    "TransmissionResult",
    "GraphDataPoint",
    "Application",
    "load_config_json",
    "save_config_json",
}

_CORE = {
    "BeltWrap",
    "solve_belt_wrap",
    "svg_path_data",
    "PulleyLayout",
    "compute_layout",
    "belt_wrap_for_layout",
    "AnimationState",
    "advance",
}

_ANALYSIS = {
    "NarrativeService",
    "GeminiNarrativeService",
    "ServiceError",
    "analyze_system",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    if name in _ANALYSIS:
        if "analysis" not in _modules:
            from . import analysis
            _modules["analysis"] = analysis
        return getattr(_modules["analysis"], name)

    raise AttributeError(f"module 'pulleysim' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "SystemMode",
    "DriveCategory",

    # Calculator (lazy loaded from calculator)
    "calculate_transmission",
    "generate_response_curve",
    "classify_ratio",
    "get_applications",
    "calculate_belt_length",
    "effective_centre_distance",
    "validate_config",
    "clamp_centre_distance",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",

    # IO (lazy loaded from io)
    "PulleyConfig",
    "TransmissionResult",
    "GraphDataPoint",
    "Application",
    "load_config_json",
    "save_config_json",

    # Geometry (lazy loaded from core)
    "BeltWrap",
    "solve_belt_wrap",
    "svg_path_data",
    "PulleyLayout",
    "compute_layout",
    "belt_wrap_for_layout",
    "AnimationState",
    "advance",

    # Analysis (lazy loaded from analysis)
    "NarrativeService",
    "GeminiNarrativeService",
    "ServiceError",
    "analyze_system",
]
