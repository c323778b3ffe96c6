"""Steering direction value object for the Drivable contract."""

from enum import Enum


class SteeringDirection(Enum):
    """Direction a vehicle can be steered."""

    LEFT = "left"
    RIGHT = "right"
    STRAIGHT = "straight"
