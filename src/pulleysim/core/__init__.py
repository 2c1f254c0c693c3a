"""
Pulleysim core - belt wrap geometry, scene layout and animation.

Pure geometry with no rendering dependency. A renderer asks for a layout,
solves the belt wrap in belt mode, and steps an AnimationState each frame.

Example:
    >>> from pulleysim.io import PulleyConfig
    >>> from pulleysim.core import compute_layout, belt_wrap_for_layout, svg_path_data
    >>>
    >>> layout = compute_layout(PulleyConfig(mode="belt"))
    >>> wrap = belt_wrap_for_layout(layout)
    >>> d = svg_path_data(wrap)
"""

from .belt_geometry import BeltWrap, solve_belt_wrap, svg_path_data
from .layout import PulleyLayout, compute_layout, belt_wrap_for_layout
from .animation import AnimationState, advance

__all__ = [
    # Belt geometry
    "BeltWrap",
    "solve_belt_wrap",
    "svg_path_data",

    # Layout
    "PulleyLayout",
    "compute_layout",
    "belt_wrap_for_layout",

    # Animation
    "AnimationState",
    "advance",
]
