"""
Belt wrap geometry for two pulleys on a common horizontal axis.

Finds the external (open belt) tangent lines between two circles of
different radii and describes the closed wrap path as two straight spans and
two arcs. Coordinates follow screen convention: x to the right, y down.
"""

from dataclasses import dataclass
from math import acos, cos, sin, sqrt, pi, degrees
from typing import Optional, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class BeltWrap:
    """Closed belt path around two pulleys.

    Path order: top_1 -> top_2 -> arc around pulley 2 -> bottom_2 ->
    bottom_1 -> arc around pulley 1 -> top_1. Both arcs are swept clockwise
    on screen (sweep 1) when pulley 2 is to the right of pulley 1, and
    counter-clockwise (sweep 0) for the mirrored arrangement.
    """
    center_1: Point
    center_2: Point
    radius_1: float
    radius_2: float
    theta: float  # Angle of the tangent points from the centre line (rad)
    top_1: Point
    top_2: Point
    bottom_1: Point
    bottom_2: Point
    large_arc_1: int
    large_arc_2: int
    sweep: int = 1

    @property
    def span_length(self) -> float:
        """Length of one straight tangent span."""
        dx = self.top_2[0] - self.top_1[0]
        dy = self.top_2[1] - self.top_1[1]
        return sqrt(dx * dx + dy * dy)

    @property
    def wrap_angle_1(self) -> float:
        """Angle of contact on pulley 1 (rad)."""
        return 2 * pi - 2 * self.theta

    @property
    def wrap_angle_2(self) -> float:
        """Angle of contact on pulley 2 (rad)."""
        return 2 * self.theta

    @property
    def wrap_angle_1_deg(self) -> float:
        return degrees(self.wrap_angle_1)

    @property
    def wrap_angle_2_deg(self) -> float:
        return degrees(self.wrap_angle_2)

    @property
    def length(self) -> float:
        """Exact path length: two spans plus both arcs."""
        return (
            2 * self.span_length
            + self.radius_1 * self.wrap_angle_1
            + self.radius_2 * self.wrap_angle_2
        )


def solve_belt_wrap(
    x1: float,
    y1: float,
    r1: float,
    x2: float,
    y2: float,
    r2: float
) -> Optional[BeltWrap]:
    """
    Solve the open belt wrap around two circles.

    θ = acos((r1 - r2) / d), where d is the horizontal separation of the
    centres. Tangent points sit at ±θ from the centre line on each circle.

    The belt wraps more than half way round the larger pulley, so that
    pulley gets the large-arc flag. Equal radii give parallel spans and
    half wraps on both pulleys (both flags 0).

    Centres may come in either order along x; with pulley 2 on the left the
    construction is mirrored and the arcs sweep the other way.

    Args:
        x1, y1: Centre of pulley 1
        r1: Radius of pulley 1, including any belt offset
        x2, y2: Centre of pulley 2
        r2: Radius of pulley 2, including any belt offset

    Returns:
        BeltWrap, or None when no external tangent exists
        (d <= |r1 - r2|: circles nested, coincident or internally touching)
    """
    dist = abs(x2 - x1)
    if dist <= abs(r1 - r2):
        return None

    theta = acos((r1 - r2) / dist)
    # Mirror about the vertical when pulley 2 lies to the left of pulley 1
    direction = 1 if x2 >= x1 else -1
    c = direction * cos(theta)
    s = sin(theta)

    top_1 = (x1 + r1 * c, y1 - r1 * s)
    top_2 = (x2 + r2 * c, y2 - r2 * s)
    bottom_1 = (x1 + r1 * c, y1 + r1 * s)
    bottom_2 = (x2 + r2 * c, y2 + r2 * s)

    return BeltWrap(
        center_1=(x1, y1),
        center_2=(x2, y2),
        radius_1=r1,
        radius_2=r2,
        theta=theta,
        top_1=top_1,
        top_2=top_2,
        bottom_1=bottom_1,
        bottom_2=bottom_2,
        large_arc_1=1 if r1 > r2 else 0,
        large_arc_2=1 if r2 > r1 else 0,
        sweep=1 if direction > 0 else 0,
    )


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip('0').rstrip('.')


def svg_path_data(wrap: BeltWrap) -> str:
    """SVG path 'd' attribute for a closed belt wrap."""
    r1 = _fmt(wrap.radius_1)
    r2 = _fmt(wrap.radius_2)
    return " ".join([
        f"M {_fmt(wrap.top_1[0])} {_fmt(wrap.top_1[1])}",
        f"L {_fmt(wrap.top_2[0])} {_fmt(wrap.top_2[1])}",
        f"A {r2} {r2} 0 {wrap.large_arc_2} {wrap.sweep} {_fmt(wrap.bottom_2[0])} {_fmt(wrap.bottom_2[1])}",
        f"L {_fmt(wrap.bottom_1[0])} {_fmt(wrap.bottom_1[1])}",
        f"A {r1} {r1} 0 {wrap.large_arc_1} {wrap.sweep} {_fmt(wrap.top_1[0])} {_fmt(wrap.top_1[1])}",
    ])
