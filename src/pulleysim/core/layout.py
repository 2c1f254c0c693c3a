"""
Scene layout for drawing a pulley pair.

Places both pulleys on the horizontal centre line of a fixed view box.
Friction wheels are drawn touching; belt-coupled pulleys are placed
symmetrically about the view centre at the configured centre distance.
"""

from dataclasses import dataclass
from typing import Optional

from ..enums import SystemMode
from ..constants import (
    VIEWBOX_WIDTH,
    VIEWBOX_HEIGHT,
    SCENE_SCALE,
    BELT_OFFSET_RADIUS,
)
from ..io import PulleyConfig
from .belt_geometry import BeltWrap, solve_belt_wrap


@dataclass(frozen=True)
class PulleyLayout:
    """Pulley centres and radii in view-box units."""
    mode: SystemMode
    x1: float
    y1: float
    r1: float
    x2: float
    y2: float
    r2: float
    width: float = VIEWBOX_WIDTH
    height: float = VIEWBOX_HEIGHT

    @property
    def centre_distance(self) -> float:
        return abs(self.x2 - self.x1)


def compute_layout(
    config: PulleyConfig,
    scale: float = SCENE_SCALE,
    width: float = VIEWBOX_WIDTH,
    height: float = VIEWBOX_HEIGHT
) -> PulleyLayout:
    """
    Position the pulleys for rendering.

    Args:
        config: Transmission configuration
        scale: View-box units per millimetre
        width: View-box width
        height: View-box height

    Returns:
        PulleyLayout
    """
    cx = width / 2
    cy = height / 2
    r1 = (config.driver_diameter_mm / 2) * scale
    r2 = (config.driven_diameter_mm / 2) * scale

    if config.mode == SystemMode.FRICTION:
        total_width = r1 + r2
        x1 = cx - total_width / 2 + r1 / 2
        x2 = x1 + r1 + r2
    else:
        d = config.centre_distance_mm * scale
        x1 = cx - d / 2
        x2 = cx + d / 2

    return PulleyLayout(
        mode=config.mode,
        x1=x1, y1=cy, r1=r1,
        x2=x2, y2=cy, r2=r2,
        width=width,
        height=height,
    )


def belt_wrap_for_layout(
    layout: PulleyLayout,
    offset: float = BELT_OFFSET_RADIUS
) -> Optional[BeltWrap]:
    """
    Belt path for a layout, with radii inflated so the belt sits on the rims.

    Friction layouts have no belt and return None without invoking the
    solver, as do belt layouts with no valid external tangent.
    """
    if layout.mode != SystemMode.BELT:
        return None

    return solve_belt_wrap(
        layout.x1, layout.y1, layout.r1 + offset,
        layout.x2, layout.y2, layout.r2 + offset,
    )
