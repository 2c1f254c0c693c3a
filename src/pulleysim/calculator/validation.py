"""
Pulley Transmission Calculator - Validation Rules

Checks a configuration against:
- Physical possibility (positive diameters, solvable belt wrap)
- The ranges offered by the interactive controls
- Common engineering practice for open belt and friction drives

The calculator itself never rejects input; validation is advisory and
reports findings with a severity.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import ceil, isfinite
from typing import List, Optional

from ..enums import SystemMode
from ..constants import (
    DIAMETER_MIN_MM,
    DIAMETER_MAX_MM,
    INPUT_RPM_MIN,
    INPUT_RPM_MAX,
    INPUT_POWER_MIN_W,
    INPUT_POWER_MAX_W,
    CENTRE_DISTANCE_MARGIN_MM,
    CENTRE_DISTANCE_MAX_MM,
    TANGENTIAL_VELOCITY_WARNING_M_S,
)
from ..io import PulleyConfig
from .core import calculate_transmission


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def minimum_centre_distance(config: PulleyConfig) -> float:
    """Smallest belt centre distance offered by the controls."""
    touching = (config.driver_diameter_mm + config.driven_diameter_mm) / 2
    return ceil(touching) + CENTRE_DISTANCE_MARGIN_MM


def clamp_centre_distance(config: PulleyConfig) -> PulleyConfig:
    """
    Open up the centre distance when switching into belt mode.

    In belt mode a centre distance below D1 + D2 is raised to D1 + D2 so the
    pulleys get a visible gap. Friction mode configs are returned unchanged.
    """
    if config.mode != SystemMode.BELT:
        return config

    gap = config.driver_diameter_mm + config.driven_diameter_mm
    if config.centre_distance_mm < gap:
        return config.model_copy(update={'centre_distance_mm': gap})
    return config


def validate_config(config: PulleyConfig) -> ValidationResult:
    """
    Validate a transmission configuration.

    Args:
        config: Configuration to check

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_diameters(config))
    messages.extend(_validate_speed(config))
    messages.extend(_validate_power(config))
    messages.extend(_validate_centre_distance(config))
    messages.extend(_validate_operating_point(config))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _validate_diameters(config: PulleyConfig) -> List[ValidationMessage]:
    messages = []

    for name, label, value in (
        ('DRIVER', 'Driver', config.driver_diameter_mm),
        ('DRIVEN', 'Driven', config.driven_diameter_mm),
    ):
        if not isfinite(value) or value <= 0:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code=f"{name}_DIAMETER_INVALID",
                message=f"{label} diameter must be positive (got {value} mm)",
                suggestion=f"Use a diameter between {DIAMETER_MIN_MM:.0f} and {DIAMETER_MAX_MM:.0f} mm"
            ))
        elif value < DIAMETER_MIN_MM or value > DIAMETER_MAX_MM:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code=f"{name}_DIAMETER_OUT_OF_RANGE",
                message=f"{label} diameter {value:.1f} mm is outside {DIAMETER_MIN_MM:.0f}-{DIAMETER_MAX_MM:.0f} mm",
            ))

    return messages


def _validate_speed(config: PulleyConfig) -> List[ValidationMessage]:
    messages = []
    rpm = config.input_rpm

    if not isfinite(rpm) or rpm < INPUT_RPM_MIN:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="INPUT_RPM_INVALID",
            message=f"Input speed must not be negative (got {rpm} RPM)",
        ))
    elif rpm == 0:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="INPUT_STOPPED",
            message="Input is stationary - torque is reported as 0 N·m",
        ))
    elif rpm > INPUT_RPM_MAX:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="INPUT_RPM_OUT_OF_RANGE",
            message=f"Input speed {rpm:.0f} RPM is above {INPUT_RPM_MAX:.0f} RPM",
        ))

    return messages


def _validate_power(config: PulleyConfig) -> List[ValidationMessage]:
    messages = []
    power = config.input_power_w

    if not isfinite(power) or power < 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="INPUT_POWER_INVALID",
            message=f"Input power must not be negative (got {power} W)",
        ))
    elif power < INPUT_POWER_MIN_W or power > INPUT_POWER_MAX_W:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="INPUT_POWER_OUT_OF_RANGE",
            message=f"Input power {power:.0f} W is outside {INPUT_POWER_MIN_W:.0f}-{INPUT_POWER_MAX_W:.0f} W",
        ))

    return messages


def _validate_centre_distance(config: PulleyConfig) -> List[ValidationMessage]:
    """Centre distance only matters in belt mode."""
    messages = []
    if config.mode != SystemMode.BELT:
        return messages

    c = config.centre_distance_mm
    r1 = config.driver_diameter_mm / 2
    r2 = config.driven_diameter_mm / 2

    if not isfinite(c) or c <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="CENTRE_DISTANCE_INVALID",
            message=f"Centre distance must be positive in belt mode (got {c} mm)",
            suggestion=f"Use at least {minimum_centre_distance(config):.0f} mm"
        ))
    elif c <= abs(r1 - r2):
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="BELT_WRAP_IMPOSSIBLE",
            message=f"Centre distance {c:.1f} mm is too small for an external tangent between the pulleys",
            suggestion=f"Use at least {minimum_centre_distance(config):.0f} mm"
        ))
    elif c < r1 + r2:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PULLEYS_OVERLAP",
            message=f"Centre distance {c:.1f} mm is less than the sum of the radii ({r1 + r2:.1f} mm); the pulleys overlap",
            suggestion=f"Use at least {minimum_centre_distance(config):.0f} mm"
        ))
    elif c < minimum_centre_distance(config):
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="CENTRE_DISTANCE_TOO_SMALL",
            message=f"Centre distance {c:.1f} mm leaves less than {CENTRE_DISTANCE_MARGIN_MM:.0f} mm between the pulleys",
            suggestion=f"Use at least {minimum_centre_distance(config):.0f} mm"
        ))
    elif c > CENTRE_DISTANCE_MAX_MM:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="CENTRE_DISTANCE_OUT_OF_RANGE",
            message=f"Centre distance {c:.1f} mm is above {CENTRE_DISTANCE_MAX_MM:.0f} mm",
            suggestion="Long spans tend to whip; consider an idler"
        ))

    return messages


def _validate_operating_point(config: PulleyConfig) -> List[ValidationMessage]:
    """Findings that depend on computed results."""
    messages = []
    result = calculate_transmission(config)

    if result.tangential_velocity_m_s > TANGENTIAL_VELOCITY_WARNING_M_S:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="RIM_SPEED_HIGH",
            message=f"Rim speed {result.tangential_velocity_m_s:.1f} m/s is above {TANGENTIAL_VELOCITY_WARNING_M_S:.0f} m/s",
            suggestion="Fit a guard over the pulleys and check their rated speed"
        ))

    if config.mode == SystemMode.FRICTION and result.output_torque_nm > 0:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="FRICTION_SLIP_RISK",
            message="Friction wheels rely on contact pressure; slip is not modelled",
        ))

    return messages
