"""Conversion between vision (millimetre) and internal (metre) coordinates."""

from __future__ import annotations

import math
from typing import Any, Tuple

from kuruk.vector import Vector

_CHIP_ANGLE = 45.0 / 180.0 * math.pi
_GRAVITY = 9.81


def _value(obj: Any, name: str) -> float:
    attr = getattr(obj, name)
    return float(attr() if callable(attr) else attr)


def _position(value: Any) -> Tuple[float, float]:
    if hasattr(value, "x") and hasattr(value, "y"):
        return _value(value, "x"), _value(value, "y")
    x, y = value
    return float(x), float(y)


def _velocity(value: Any) -> Tuple[float, float]:
    for x_name, y_name in (("v_x", "v_y"), ("vx", "vy")):
        if hasattr(value, x_name) and hasattr(value, y_name):
            return _value(value, x_name), _value(value, y_name)
    return _position(value)


def _from_vision(x: float, y: float) -> Vector:
    return Vector(-y / 1000.0, x / 1000.0)


def _to_vision(x: float, y: float) -> Vector:
    return Vector(y * 1000.0, -x * 1000.0)


def from_vision(position: Any) -> Vector:
    """Convert a vision position in millimetres to internal metres."""
    return _from_vision(*_position(position))


def to_vision(position: Any) -> Vector:
    """Convert an internal position in metres to vision millimetres."""
    return _to_vision(*_position(position))


def from_vision_velocity(velocity: Any) -> Vector:
    """Convert a vision velocity to the internal frame."""
    return _from_vision(*_velocity(velocity))


def to_vision_velocity(velocity: Any) -> Vector:
    """Convert an internal velocity to the vision frame."""
    return _to_vision(*_velocity(velocity))


def from_vision_rotation(vision: float) -> float:
    return vision + math.pi / 2


def to_vision_rotation(rotation: float) -> float:
    return rotation - math.pi / 2


def chip_vel_from_chip_distance(distance: float) -> float:
    """Shot speed needed for a 45 degree chip to land at the given distance."""
    dir_floor = math.cos(_CHIP_ANGLE)
    dir_up = math.sin(_CHIP_ANGLE)
    return math.sqrt(distance * _GRAVITY / (2 * abs(dir_up * dir_floor)))


def chip_distance_from_chip_vel(velocity: float) -> float:
    """Landing distance of a 45 degree chip shot with the given speed."""
    dir_floor = math.cos(_CHIP_ANGLE)
    dir_up = math.sin(_CHIP_ANGLE)
    return 2 * velocity * velocity * dir_floor * dir_up / _GRAVITY