"""
Tests for configuration validation.
"""

import pytest

from pulleysim.calculator import (
    validate_config,
    clamp_centre_distance,
    minimum_centre_distance,
    Severity,
)
from pulleysim import PulleyConfig, SystemMode


def _codes(result):
    return [m.code for m in result.messages]


class TestValidConfigurations:
    """Configurations inside the control ranges."""

    def test_default_friction_config_is_valid(self):
        """Defaults are valid; slip is reported for information only."""
        result = validate_config(PulleyConfig())

        assert result.valid
        assert result.errors == []
        assert result.warnings == []
        assert "FRICTION_SLIP_RISK" in [m.code for m in result.infos]

    def test_belt_config_is_valid(self, belt_config):
        result = validate_config(belt_config)

        assert result.valid
        assert "FRICTION_SLIP_RISK" not in _codes(result)

    def test_belt_within_range_has_no_warnings(self):
        config = PulleyConfig(
            driver_diameter_mm=100, driven_diameter_mm=200,
            centre_distance_mm=400, mode=SystemMode.BELT,
        )
        assert validate_config(config).warnings == []


class TestDiameterRules:
    """Tests for diameter checks."""

    @pytest.mark.parametrize("field,code", [
        ("driver_diameter_mm", "DRIVER_DIAMETER_INVALID"),
        ("driven_diameter_mm", "DRIVEN_DIAMETER_INVALID"),
    ])
    def test_zero_diameter_is_error(self, field, code):
        config = PulleyConfig(**{field: 0.0})
        result = validate_config(config)

        assert not result.valid
        assert code in [m.code for m in result.errors]

    def test_negative_diameter_is_error(self):
        result = validate_config(PulleyConfig(driven_diameter_mm=-5.0))
        assert "DRIVEN_DIAMETER_INVALID" in _codes(result)

    @pytest.mark.parametrize("value", [20.0, 450.0])
    def test_out_of_range_is_warning(self, value):
        """Outside the 50-400 mm controls, but physically possible."""
        result = validate_config(PulleyConfig(driver_diameter_mm=value))

        assert result.valid
        assert "DRIVER_DIAMETER_OUT_OF_RANGE" in [m.code for m in result.warnings]

    def test_error_has_suggestion(self):
        result = validate_config(PulleyConfig(driver_diameter_mm=0.0))
        error = result.errors[0]
        assert error.suggestion is not None
        assert "50" in error.suggestion


class TestSpeedAndPowerRules:
    """Tests for input speed and power checks."""

    def test_negative_rpm_is_error(self):
        result = validate_config(PulleyConfig(input_rpm=-10.0))
        assert not result.valid
        assert "INPUT_RPM_INVALID" in _codes(result)

    def test_stopped_input_is_info(self):
        """Zero speed is allowed; torque is reported as zero."""
        result = validate_config(PulleyConfig(input_rpm=0.0))

        assert result.valid
        assert "INPUT_STOPPED" in [m.code for m in result.infos]

    def test_high_rpm_is_warning(self):
        result = validate_config(PulleyConfig(input_rpm=3500.0))
        assert "INPUT_RPM_OUT_OF_RANGE" in [m.code for m in result.warnings]

    def test_negative_power_is_error(self):
        result = validate_config(PulleyConfig(input_power_w=-1.0))
        assert "INPUT_POWER_INVALID" in [m.code for m in result.errors]

    @pytest.mark.parametrize("power", [50.0, 6000.0])
    def test_power_out_of_range_is_warning(self, power):
        result = validate_config(PulleyConfig(input_power_w=power))
        assert result.valid
        assert "INPUT_POWER_OUT_OF_RANGE" in _codes(result)

    def test_high_rim_speed_warning(self):
        """400 mm at 3000 RPM runs at about 63 m/s."""
        config = PulleyConfig(driver_diameter_mm=400.0, input_rpm=3000.0)
        result = validate_config(config)
        assert "RIM_SPEED_HIGH" in [m.code for m in result.warnings]


class TestCentreDistanceRules:
    """Centre distance checks apply in belt mode only."""

    def test_friction_mode_ignores_centre_distance(self):
        config = PulleyConfig(centre_distance_mm=-100.0, mode=SystemMode.FRICTION)
        result = validate_config(config)

        assert result.valid
        assert not any(code.startswith("CENTRE_DISTANCE") for code in _codes(result))

    def test_zero_centre_distance_is_error(self):
        config = PulleyConfig(centre_distance_mm=0.0, mode=SystemMode.BELT)
        result = validate_config(config)

        assert not result.valid
        assert "CENTRE_DISTANCE_INVALID" in _codes(result)

    def test_unsolvable_wrap_is_error(self):
        """Distance within |r1 - r2|: one pulley sits inside the other."""
        config = PulleyConfig(
            driver_diameter_mm=100.0, driven_diameter_mm=400.0,
            centre_distance_mm=150.0, mode=SystemMode.BELT,
        )
        result = validate_config(config)

        assert not result.valid
        assert "BELT_WRAP_IMPOSSIBLE" in _codes(result)

    def test_overlapping_pulleys_is_error(self):
        """A tangent exists, but the pulley rims intersect."""
        config = PulleyConfig(
            driver_diameter_mm=100.0, driven_diameter_mm=200.0,
            centre_distance_mm=100.0, mode=SystemMode.BELT,
        )
        result = validate_config(config)

        assert not result.valid
        assert "PULLEYS_OVERLAP" in [m.code for m in result.errors]
        assert "CENTRE_DISTANCE_TOO_SMALL" not in _codes(result)

    def test_touching_pulleys_is_warning(self):
        """Rims touch or nearly touch: closer than the controls allow."""
        config = PulleyConfig(
            driver_diameter_mm=100.0, driven_diameter_mm=200.0,
            centre_distance_mm=155.0, mode=SystemMode.BELT,
        )
        result = validate_config(config)

        assert result.valid
        assert "CENTRE_DISTANCE_TOO_SMALL" in [m.code for m in result.warnings]
        assert "PULLEYS_OVERLAP" not in _codes(result)

    def test_long_span_is_warning(self):
        config = PulleyConfig(centre_distance_mm=900.0, mode=SystemMode.BELT)
        result = validate_config(config)
        assert "CENTRE_DISTANCE_OUT_OF_RANGE" in [m.code for m in result.warnings]


class TestMinimumCentreDistance:
    """Tests for minimum_centre_distance function."""

    def test_rounds_up_and_adds_margin(self):
        config = PulleyConfig(driver_diameter_mm=101.0, driven_diameter_mm=200.0)
        # ceil(150.5) + 10
        assert minimum_centre_distance(config) == 161

    def test_whole_number(self):
        config = PulleyConfig(driver_diameter_mm=100.0, driven_diameter_mm=200.0)
        assert minimum_centre_distance(config) == 160


class TestClampCentreDistance:
    """Tests for clamp_centre_distance function."""

    def test_raises_small_distance_in_belt_mode(self):
        config = PulleyConfig(
            driver_diameter_mm=150.0, driven_diameter_mm=250.0,
            centre_distance_mm=300.0, mode=SystemMode.BELT,
        )
        clamped = clamp_centre_distance(config)

        assert clamped.centre_distance_mm == pytest.approx(400.0)
        assert config.centre_distance_mm == pytest.approx(300.0)

    def test_keeps_large_distance(self):
        config = PulleyConfig(centre_distance_mm=500.0, mode=SystemMode.BELT)
        assert clamp_centre_distance(config) is config

    def test_friction_mode_unchanged(self):
        config = PulleyConfig(centre_distance_mm=10.0, mode=SystemMode.FRICTION)
        assert clamp_centre_distance(config) is config


class TestValidationResult:
    """Tests for the ValidationResult accessors."""

    def test_severity_partitions(self):
        config = PulleyConfig(driver_diameter_mm=0.0, input_power_w=6000.0, input_rpm=0.0)
        result = validate_config(config)

        assert all(m.severity == Severity.ERROR for m in result.errors)
        assert all(m.severity == Severity.WARNING for m in result.warnings)
        assert all(m.severity == Severity.INFO for m in result.infos)
        assert len(result.errors) + len(result.warnings) + len(result.infos) == len(result.messages)
