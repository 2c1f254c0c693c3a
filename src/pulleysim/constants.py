"""
Engineering constants for pulley transmission calculations.

This module centralizes all numerical constants used in the calculator,
validation and rendering helpers. Always include units in constant names
(_MM, _RPM, _W, _DEG).

Constants are grouped by category:
- Classification: ratio thresholds for drive categories
- Response curve: probe range for the sensitivity sweep
- Control limits: ranges offered by the interactive controls
- Rendering: scene scale and belt thickness offset
"""

from math import pi

# =============================================================================
# Unit conversion
# =============================================================================

SECONDS_PER_MINUTE: float = 60.0
MM_PER_M: float = 1000.0
RAD_PER_REV: float = 2.0 * pi

# =============================================================================
# Classification
# =============================================================================

# Ratios strictly above this multiply torque (speed reducer)
REDUCER_RATIO_THRESHOLD: float = 1.2

# Ratios strictly below this multiply speed
MULTIPLIER_RATIO_THRESHOLD: float = 0.8

# =============================================================================
# Response curve (driven diameter sweep)
# =============================================================================

SWEEP_MIN_DIAMETER_MM: float = 50.0
SWEEP_MAX_DIAMETER_MM: float = 400.0
SWEEP_STEP_MM: float = 25.0

# =============================================================================
# Control limits (ranges offered by the interactive controls)
# =============================================================================

DIAMETER_MIN_MM: float = 50.0
DIAMETER_MAX_MM: float = 400.0

INPUT_RPM_MIN: float = 0.0
INPUT_RPM_MAX: float = 3000.0

INPUT_POWER_MIN_W: float = 100.0
INPUT_POWER_MAX_W: float = 5000.0

# Belt mode: minimum gap beyond the touching distance (D1 + D2) / 2
CENTRE_DISTANCE_MARGIN_MM: float = 10.0
CENTRE_DISTANCE_MAX_MM: float = 800.0

# Above this rim speed a guard is strongly recommended
TANGENTIAL_VELOCITY_WARNING_M_S: float = 30.0

# =============================================================================
# Defaults (initial state of the interactive application)
# =============================================================================

DEFAULT_DRIVER_DIAMETER_MM: float = 100.0
DEFAULT_DRIVEN_DIAMETER_MM: float = 200.0
DEFAULT_INPUT_RPM: float = 120.0
DEFAULT_INPUT_POWER_W: float = 500.0
DEFAULT_CENTRE_DISTANCE_MM: float = 300.0

# =============================================================================
# Rendering
# =============================================================================

VIEWBOX_WIDTH: float = 800.0
VIEWBOX_HEIGHT: float = 400.0
SCENE_SCALE: float = 0.8

# Belt stroke is 10 units wide, so it sits 5 units outside the pulley rim
BELT_OFFSET_RADIUS: float = 5.0

# Animation step factors, per frame at the reference frame rate
ANIMATION_FRAME_RATE_HZ: float = 60.0
ROTATION_SPEED_FACTOR: float = 0.05
BELT_SPEED_FACTOR: float = 0.002
