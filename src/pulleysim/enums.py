"""Type-safe enums for the pulley transmission calculator."""

from enum import Enum


class SystemMode(Enum):
    """How the two pulleys are coupled"""
    FRICTION = "friction"  # Pulleys in direct rolling contact
    BELT = "belt"  # Pulleys coupled by an open belt at an explicit centre distance


class DriveCategory(Enum):
    """Qualitative behaviour of a speed ratio"""
    REDUCER = "reducer"  # Gains torque, loses speed
    MULTIPLIER = "multiplier"  # Gains speed, loses torque
    DIRECT = "direct"  # Close to 1:1
