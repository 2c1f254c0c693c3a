"""
JSON bridge for a browser front end.

Provides a single, clean entry point for all front end -> Python calculator
calls. All inputs are validated via Pydantic models before processing.

Usage:
    from pulleysim.calculator.bridge import calculate
    output_json = calculate(json.dumps({"driver_diameter": 100, "mode": "belt"}))
"""

import json
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
# pydantic only accepts typing.TypedDict from Python 3.12 on
from typing_extensions import TypedDict

from ..enums import SystemMode
from ..io import PulleyConfig
from ..core import compute_layout, belt_wrap_for_layout, svg_path_data
from .core import (
    calculate_transmission,
    generate_response_curve,
    classify_ratio,
    get_applications,
)
from .validation import validate_config, clamp_centre_distance
from .output import to_summary, to_markdown


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to the front end."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "CENTRE_DISTANCE_TOO_SMALL"
    message: str
    suggestion: Optional[str]


# ============================================================================
# Input Models
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    All inputs from the calculator UI.

    This is the single source of truth for what the front end sends.
    """
    model_config = ConfigDict(extra='ignore')

    mode: str = "friction"  # "friction" | "belt"

    driver_diameter: float = 100.0
    driven_diameter: float = 200.0
    input_rpm: float = 120.0
    input_power: float = 500.0
    centre_distance: float = 300.0

    # Set by the front end on the call that switches into belt mode
    auto_centre_distance: bool = False

    include_curve: bool = True
    include_markdown: bool = False

    @field_validator('mode', mode='before')
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    def to_config(self) -> PulleyConfig:
        return PulleyConfig(
            driver_diameter_mm=self.driver_diameter,
            driven_diameter_mm=self.driven_diameter,
            input_rpm=self.input_rpm,
            input_power_w=self.input_power,
            centre_distance_mm=self.centre_distance,
            mode=SystemMode(self.mode),
        )


# ============================================================================
# Output Models
# ============================================================================

class SceneOutput(BaseModel):
    """Pulley positions and belt path for the renderer."""
    model_config = ConfigDict(extra='ignore')

    x1: float
    y1: float
    r1: float
    x2: float
    y2: float
    r2: float
    belt_path: Optional[str] = None  # SVG path data, None without a belt


class CalculatorOutput(BaseModel):
    """Output from calculate() - matches what the front end expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    config: Optional[dict] = None
    result: Optional[dict] = None
    category: Optional[str] = None
    applications: List[dict] = Field(default_factory=list)
    response_curve: List[dict] = Field(default_factory=list)
    scene: Optional[SceneOutput] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from the front end.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)
        config = inputs.to_config()

        if inputs.auto_centre_distance:
            config = clamp_centre_distance(config)

        result = calculate_transmission(config)
        validation = validate_config(config)

        layout = compute_layout(config)
        wrap = belt_wrap_for_layout(layout)
        scene = SceneOutput(
            x1=layout.x1, y1=layout.y1, r1=layout.r1,
            x2=layout.x2, y2=layout.y2, r2=layout.r2,
            belt_path=svg_path_data(wrap) if wrap is not None else None,
        )

        curve = generate_response_curve(config) if inputs.include_curve else []

        output = CalculatorOutput(
            success=True,
            config=config.model_dump(mode='json'),
            result=result.model_dump(mode='json'),
            category=classify_ratio(result.ratio).value,
            applications=[app.model_dump(mode='json') for app in get_applications(result.ratio)],
            response_curve=[point.model_dump(mode='json') for point in curve],
            scene=scene,
            summary=to_summary(config, result),
            markdown=to_markdown(config, result, validation) if inputs.include_markdown else None,
            valid=validation.valid,
            messages=[
                {
                    'severity': m.severity.value,
                    'message': m.message,
                    'code': m.code,
                    'suggestion': m.suggestion
                }
                for m in validation.messages
            ],
        )

        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except Exception as e:
        return CalculatorOutput(
            success=False,
            error=str(e)
        ).model_dump_json()
