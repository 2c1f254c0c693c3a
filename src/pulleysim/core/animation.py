"""
Rotation and belt-travel animation as an explicit state transition.

The host redraw loop owns timing; it keeps an AnimationState and calls
advance() each frame with the elapsed time. advance() is pure.
"""

from dataclasses import dataclass

from ..enums import SystemMode
from ..constants import (
    ANIMATION_FRAME_RATE_HZ,
    ROTATION_SPEED_FACTOR,
    BELT_SPEED_FACTOR,
    SCENE_SCALE,
)
from ..io import PulleyConfig


@dataclass(frozen=True)
class AnimationState:
    """Pose of the animated scene."""
    rotation_a_deg: float = 0.0  # Driver
    rotation_b_deg: float = 0.0  # Driven
    belt_offset: float = 0.0  # Dash offset along the belt path


def advance(
    state: AnimationState,
    dt: float,
    config: PulleyConfig,
    scale: float = SCENE_SCALE
) -> AnimationState:
    """
    Step the animation forward by dt seconds.

    Per reference frame (1/60 s) the driver turns rpm * 0.05 degrees and
    the driven pulley follows at the diameter ratio. Friction wheels
    counter-rotate; a belt keeps both pulleys turning the same way. Belt
    dashes travel proportionally to rim speed.

    Args:
        state: Current pose
        dt: Elapsed time in seconds
        config: Transmission configuration
        scale: View-box units per millimetre (belt travel only)

    Returns:
        New AnimationState (state itself if dt <= 0)
    """
    if dt <= 0:
        return state

    frames = dt * ANIMATION_FRAME_RATE_HZ
    rpm = config.input_rpm

    if config.driven_diameter_mm > 0:
        ratio = config.driver_diameter_mm / config.driven_diameter_mm
    else:
        ratio = 0.0

    direction = -1 if config.mode == SystemMode.FRICTION else 1

    step_a = rpm * ROTATION_SPEED_FACTOR * frames
    step_b = rpm * ratio * direction * ROTATION_SPEED_FACTOR * frames

    r1_scaled = (config.driver_diameter_mm / 2) * scale
    belt_step = rpm * r1_scaled * BELT_SPEED_FACTOR * frames

    return AnimationState(
        rotation_a_deg=(state.rotation_a_deg + step_a) % 360.0,
        rotation_b_deg=(state.rotation_b_deg + step_b) % 360.0,
        belt_offset=state.belt_offset - belt_step,
    )
