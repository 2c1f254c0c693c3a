"""Output formatters for pulley transmission calculations.

Converts a PulleyConfig and its TransmissionResult to JSON, Markdown and a
plain text summary.

Uses Pydantic's model_dump(mode='json') for serialization so enums come out
as their string values.
"""

import json
from typing import List, Optional, TYPE_CHECKING

from ..enums import SystemMode
from ..io import PulleyConfig, TransmissionResult, GraphDataPoint, Application
from ..io.schema import SCHEMA_VERSION
from .core import calculate_transmission, classify_ratio, get_applications

if TYPE_CHECKING:
    from .validation import ValidationResult


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def _messages_to_dicts(messages) -> List[dict]:
    return [
        {
            'severity': msg.severity.value,
            'code': msg.code,
            'message': msg.message,
            'suggestion': msg.suggestion
        }
        for msg in messages
    ]


def _mode_name(config: PulleyConfig) -> str:
    if config.mode == SystemMode.BELT:
        return "Belt drive"
    return "Friction wheels"


def to_json(
    config: PulleyConfig,
    result: Optional[TransmissionResult] = None,
    validation: Optional["ValidationResult"] = None,
    curve: Optional[List[GraphDataPoint]] = None,
    applications: Optional[List[Application]] = None,
    indent: int = 2
) -> str:
    """Convert a configuration and its results to a JSON string.

    Args:
        config: Transmission configuration
        result: Precomputed result (computed from config if omitted)
        validation: Optional validation results to include
        curve: Optional response curve samples to include
        applications: Optional illustrative applications to include
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, config, results and optional extras
    """
    if result is None:
        result = calculate_transmission(config)

    data = {
        'schema_version': SCHEMA_VERSION,
        'config': _model_to_dict(config),
        'result': _model_to_dict(result),
        'category': classify_ratio(result.ratio).value,
    }

    # Belt length has no meaning for touching wheels
    if config.mode != SystemMode.BELT:
        data['result'].pop('belt_length_mm', None)

    if curve is not None:
        data['response_curve'] = [_model_to_dict(point) for point in curve]

    if applications is not None:
        data['applications'] = [_model_to_dict(app) for app in applications]

    if validation:
        data['validation'] = {
            'valid': validation.valid,
            'errors': _messages_to_dicts(validation.errors),
            'warnings': _messages_to_dicts(validation.warnings),
            'infos': _messages_to_dicts(validation.infos),
        }

    return json.dumps(data, indent=indent, ensure_ascii=False)


def to_markdown(
    config: PulleyConfig,
    result: Optional[TransmissionResult] = None,
    validation: Optional["ValidationResult"] = None,
    curve: Optional[List[GraphDataPoint]] = None
) -> str:
    """Convert a configuration and its results to a Markdown report.

    Args:
        config: Transmission configuration
        result: Precomputed result (computed from config if omitted)
        validation: Optional validation results to include
        curve: Optional response curve samples to tabulate

    Returns:
        Markdown report string
    """
    if result is None:
        result = calculate_transmission(config)

    category = classify_ratio(result.ratio)

    md = "# Pulley Transmission Report\n\n"

    md += "## Configuration\n\n"
    md += "| Parameter | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| System | {_mode_name(config)} |\n"
    md += f"| Driver Diameter (D1) | {config.driver_diameter_mm:.1f} mm |\n"
    md += f"| Driven Diameter (D2) | {config.driven_diameter_mm:.1f} mm |\n"
    md += f"| Input Speed (N1) | {config.input_rpm:.1f} RPM |\n"
    md += f"| Input Power | {config.input_power_w:.0f} W |\n"
    md += f"| Centre Distance | {result.effective_centre_distance_mm:.1f} mm |\n\n"

    md += "## Results\n\n"
    md += "| Quantity | Value |\n"
    md += "|----------|-------|\n"
    md += f"| Speed Ratio | {result.ratio:.2f}:1 |\n"
    md += f"| Output Speed | {result.output_rpm:.2f} RPM |\n"
    md += f"| Input Torque | {result.input_torque_nm:.2f} N·m |\n"
    md += f"| Output Torque | {result.output_torque_nm:.2f} N·m |\n"
    md += f"| Tangential Velocity | {result.tangential_velocity_m_s:.2f} m/s |\n"
    md += f"| Mechanical Advantage | {result.mechanical_advantage:.2f} |\n"
    if config.mode == SystemMode.BELT:
        md += f"| Belt Length | {result.belt_length_mm:.2f} mm |\n"
    md += f"| Category | {category.value} |\n\n"

    md += "## Typical Applications\n\n"
    for app in get_applications(result.ratio):
        md += f"- {app.icon} **{app.title}**: {app.description}\n"
    md += "\n"

    if curve:
        md += "## Response Curve\n\n"
        md += "| Driven Diameter | Output Speed | Output Torque |\n"
        md += "|-----------------|--------------|---------------|\n"
        for point in curve:
            md += (
                f"| {point.driven_diameter_mm:.0f} mm | {point.output_rpm:.2f} RPM "
                f"| {point.output_torque_nm:.2f} N·m |\n"
            )
        md += "\n"

    if validation:
        md += "## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Configuration is valid\n\n"
        else:
            md += "**Status:** ❌ Configuration has errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "## Notes\n\n"
    md += "- Ideal transmission: input power equals output power (no losses)\n"
    md += "- Mechanical advantage is taken as the diameter ratio\n"
    if config.mode == SystemMode.BELT:
        md += "- Belt length uses the open-belt approximation, ignoring thickness and slack\n"
    md += "\n"

    md += "---\n"
    md += "*Generated by Pulleysim Calculator*\n"

    return md


def to_summary(
    config: PulleyConfig,
    result: Optional[TransmissionResult] = None
) -> str:
    """Convert a configuration and its results to a formatted text summary.

    Returns:
        Multi-line formatted summary string
    """
    if result is None:
        result = calculate_transmission(config)

    lines = [
        "═══ Pulley Transmission ═══",
        f"System: {_mode_name(config)}",
        f"Ratio: {result.ratio:.2f}:1 ({classify_ratio(result.ratio).value})",
        "",
        "Driver:",
        f"  Diameter:      {config.driver_diameter_mm:.1f} mm",
        f"  Speed:         {config.input_rpm:.1f} RPM",
        f"  Power:         {config.input_power_w:.0f} W",
        f"  Torque:        {result.input_torque_nm:.2f} N·m",
        f"  Rim velocity:  {result.tangential_velocity_m_s:.2f} m/s",
        "",
        "Driven:",
        f"  Diameter:      {config.driven_diameter_mm:.1f} mm",
        f"  Speed:         {result.output_rpm:.2f} RPM",
        f"  Torque:        {result.output_torque_nm:.2f} N·m",
        "",
        f"Centre distance: {result.effective_centre_distance_mm:.1f} mm",
    ]

    if config.mode == SystemMode.BELT:
        lines.append(f"Belt length: {result.belt_length_mm:.2f} mm")

    return "\n".join(lines)
