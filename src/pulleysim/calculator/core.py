"""
Pulley Transmission Calculator - Core Calculations

Pure mathematical functions for two-pulley drives (friction wheels or open
belt). Returns typed TransmissionResult models for type safety.

Model assumptions:
- Ideal power transfer (input power == output power, no efficiency factor)
- Steady state only
- No slip, no belt stretch, no belt thickness correction
"""

import logging
from math import isfinite, pi
from typing import List, Tuple

from ..enums import SystemMode, DriveCategory
from ..constants import (
    SECONDS_PER_MINUTE,
    MM_PER_M,
    RAD_PER_REV,
    REDUCER_RATIO_THRESHOLD,
    MULTIPLIER_RATIO_THRESHOLD,
    SWEEP_MIN_DIAMETER_MM,
    SWEEP_MAX_DIAMETER_MM,
    SWEEP_STEP_MM,
)
from ..io import PulleyConfig, TransmissionResult, GraphDataPoint, Application

logger = logging.getLogger(__name__)


def _is_positive(value: float) -> bool:
    return isfinite(value) and value > 0


def rpm_to_rad_s(rpm: float) -> float:
    """Convert rotational speed from RPM to rad/s"""
    return RAD_PER_REV * rpm / SECONDS_PER_MINUTE


def torque_from_power(power_w: float, omega_rad_s: float) -> float:
    """
    Torque transmitted at a given power and angular speed.

    T = P / ω. Torque is undefined at standstill under a power-based model,
    so zero (or negative) speed yields 0 N·m rather than infinity.
    """
    if omega_rad_s > 0:
        return power_w / omega_rad_s
    return 0.0


def speed_ratio(driver_diameter_mm: float, driven_diameter_mm: float) -> float:
    """
    Speed ratio i = D_driven / D_driver.

    Returns 0.0 when either diameter is non-positive or non-finite.
    """
    if not (_is_positive(driver_diameter_mm) and _is_positive(driven_diameter_mm)):
        return 0.0
    return driven_diameter_mm / driver_diameter_mm


def _output_speed_and_torque(
    driver_diameter_mm: float,
    driven_diameter_mm: float,
    input_rpm: float,
    input_power_w: float
) -> Tuple[float, float, float, float]:
    """Ratio, output RPM, output ω and output torque for one driven diameter."""
    ratio = speed_ratio(driver_diameter_mm, driven_diameter_mm)
    output_rpm = input_rpm / ratio if ratio > 0 else 0.0
    omega_output = rpm_to_rad_s(output_rpm)
    output_torque = torque_from_power(input_power_w, omega_output)
    return ratio, output_rpm, omega_output, output_torque


def effective_centre_distance(config: PulleyConfig) -> float:
    """
    Centre distance used by geometry and validity checks.

    Friction wheels touch, so the distance is fixed at the sum of the radii
    and the stored centre_distance_mm is ignored.
    """
    if config.mode == SystemMode.FRICTION:
        return (config.driver_diameter_mm + config.driven_diameter_mm) / 2
    return config.centre_distance_mm


def calculate_belt_length(
    driver_diameter_mm: float,
    driven_diameter_mm: float,
    centre_distance_mm: float
) -> float:
    """
    Open belt length, first-order approximation.

    L = 2C + π(D1 + D2)/2 + (D2 - D1)² / (4C)

    Exact when D1 == D2, increasingly approximate as the diameter difference
    grows relative to C. Belt thickness and slack are ignored.

    Args:
        driver_diameter_mm: Driver pulley diameter (mm)
        driven_diameter_mm: Driven pulley diameter (mm)
        centre_distance_mm: Distance between pulley axes (mm)

    Returns:
        Belt length in mm, or 0.0 if centre distance is not positive
    """
    c = centre_distance_mm
    if not c > 0:
        return 0.0

    d1 = driver_diameter_mm
    d2 = driven_diameter_mm
    return (2 * c) + (pi * (d1 + d2) / 2) + ((d2 - d1) ** 2 / (4 * c))


def calculate_transmission(config: PulleyConfig) -> TransmissionResult:
    """
    Derive the steady-state kinematics and dynamics of a pulley pair.

    Never raises: degenerate diameters produce a zero ratio, zero output
    speed and zero output torque.

    Args:
        config: Transmission configuration

    Returns:
        TransmissionResult
    """
    d1 = config.driver_diameter_mm
    d2 = config.driven_diameter_mm

    if not (_is_positive(d1) and _is_positive(d2)):
        logger.warning(
            f"Degenerate pulley diameters (driver={d1}, driven={d2}); "
            "ratio and output speed reported as 0"
        )

    ratio, output_rpm, omega_output, output_torque = _output_speed_and_torque(
        d1, d2, config.input_rpm, config.input_power_w
    )

    omega_input = rpm_to_rad_s(config.input_rpm)
    input_torque = torque_from_power(config.input_power_w, omega_input)

    # Rim speed, radius converted mm -> m
    if _is_positive(d1):
        tangential_velocity = (d1 / 2 / MM_PER_M) * omega_input
    else:
        tangential_velocity = 0.0

    belt_length = 0.0
    if config.mode == SystemMode.BELT:
        belt_length = calculate_belt_length(d1, d2, config.centre_distance_mm)

    return TransmissionResult(
        ratio=ratio,
        input_torque_nm=input_torque,
        output_torque_nm=output_torque,
        output_rpm=output_rpm,
        tangential_velocity_m_s=tangential_velocity,
        belt_length_mm=belt_length,
        mechanical_advantage=ratio,
        omega_input_rad_s=omega_input,
        omega_output_rad_s=omega_output,
        effective_centre_distance_mm=effective_centre_distance(config),
    )


def sweep_diameters(
    start_mm: float = SWEEP_MIN_DIAMETER_MM,
    stop_mm: float = SWEEP_MAX_DIAMETER_MM,
    step_mm: float = SWEEP_STEP_MM
) -> List[float]:
    """Probe diameters from start to stop inclusive, in fixed steps."""
    if step_mm <= 0 or stop_mm < start_mm:
        return []
    count = int(round((stop_mm - start_mm) / step_mm)) + 1
    return [start_mm + i * step_mm for i in range(count)]


def generate_response_curve(config: PulleyConfig) -> List[GraphDataPoint]:
    """
    Sweep the driven diameter and record output speed and torque.

    Driver diameter, input speed and input power are held at the values in
    config; the driven diameter is replaced by each probe value in
    ascending order. Used for sensitivity charts only.

    Args:
        config: Transmission configuration

    Returns:
        One GraphDataPoint per probe diameter
    """
    points = []
    for probe in sweep_diameters():
        _, output_rpm, _, output_torque = _output_speed_and_torque(
            config.driver_diameter_mm, probe, config.input_rpm, config.input_power_w
        )
        points.append(GraphDataPoint(
            driven_diameter_mm=probe,
            output_rpm=output_rpm,
            output_torque_nm=output_torque,
        ))
    return points


def classify_ratio(ratio: float) -> DriveCategory:
    """
    Classify a speed ratio.

    The dead band [0.8, 1.2] (bounds included) counts as a direct drive.
    """
    if ratio > REDUCER_RATIO_THRESHOLD:
        return DriveCategory.REDUCER
    if ratio < MULTIPLIER_RATIO_THRESHOLD:
        return DriveCategory.MULTIPLIER
    return DriveCategory.DIRECT


_APPLICATIONS = {
    DriveCategory.REDUCER: (
        ("Conveyor Belt",
         "Needs a lot of torque to move heavy loads slowly.",
         "📦"),
        ("Winch",
         "Maximises pulling force to lift or drag objects.",
         "🏗️"),
        ("Bicycle (Low Gear)",
         "Climbing a hill: you pedal fast, the wheel turns slowly with a lot of force.",
         "🚲"),
    ),
    DriveCategory.MULTIPLIER: (
        ("Centrifugal Fan",
         "Needs high speed to move large volumes of air.",
         "💨"),
        ("Circular Saw",
         "The blade must spin very fast to cut cleanly.",
         "🪚"),
        ("Wind Generator",
         "The blades turn slowly, but the generator needs to spin fast.",
         "⚡"),
    ),
    DriveCategory.DIRECT: (
        ("Air Compressor (Direct)",
         "Simple power transmission without significantly changing torque or speed.",
         "⚙️"),
        ("Car Alternator",
         "Usually runs at speeds similar to the engine in normal driving.",
         "🚗"),
    ),
}


def get_applications(ratio: float) -> List[Application]:
    """Real-world examples for the category of a speed ratio."""
    category = classify_ratio(ratio)
    return [
        Application(category=category, title=title, description=description, icon=icon)
        for title, description, icon in _APPLICATIONS[category]
    ]
