"""Flip and affine transforms for field positions, speeds and angles."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from kuruk.vector import Vector

_IDENTITY: Tuple[float, ...] = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class FieldTransform:
    """Applies an optional side flip and an affine transform to field data.

    The transform is given as six values ``(a, b, c, d, tx, ty)`` describing
    ``x' = a*x + b*y + tx`` and ``y' = c*x + d*y + ty``.
    """

    def __init__(self) -> None:
        self._last_flipped = False
        self._has_transform = False
        self._transform: Tuple[float, ...] = _IDENTITY
        self._flip_factor = 1.0

    @property
    def flipped(self) -> bool:
        return self._last_flipped

    @property
    def transform(self) -> Tuple[float, ...]:
        return self._transform

    def set_flip(self, flip: bool) -> None:
        """Enable or disable mirroring of the field through its centre."""
        self._last_flipped = bool(flip)
        self._flip_factor = -1.0 if flip else 1.0

    def set_transform(self, values: Sequence[float]) -> None:
        """Set the six affine transform parameters."""
        values = tuple(float(v) for v in values)
        if len(values) != 6:
            raise ValueError(f"a field transform needs 6 values, got {len(values)}")
        self._has_transform = values != _IDENTITY
        self._transform = values

    def apply_pos_x(self, x: float, y: float) -> float:
        a, b, _, _, tx, _ = self._transform
        return self._flip_factor * (a * x + b * y + tx)

    def apply_pos_y(self, x: float, y: float) -> float:
        _, _, c, d, _, ty = self._transform
        return self._flip_factor * (c * x + d * y + ty)

    def apply_position(self, pos: Vector) -> Vector:
        return Vector(self.apply_pos_x(pos.x, pos.y), self.apply_pos_y(pos.x, pos.y))

    def apply_speed_x(self, x: float, y: float) -> float:
        a, b, _, _, _, _ = self._transform
        return self._flip_factor * (a * x + b * y)

    def apply_speed_y(self, x: float, y: float) -> float:
        _, _, c, d, _, _ = self._transform
        return self._flip_factor * (c * x + d * y)

    def apply_angle(self, angle: float) -> float:
        if not self._has_transform:
            return angle + math.pi if self._last_flipped else angle
        x = math.cos(angle)
        y = math.sin(angle)
        return math.atan2(self.apply_speed_y(x, y), self.apply_speed_x(x, y))

    def _untranslated(self, x: float, y: float) -> Tuple[float, float, float]:
        a, b, c, d, tx, ty = self._transform
        x = x * self._flip_factor - tx
        y = y * self._flip_factor - ty
        # scales by the determinant itself; exact for determinant +-1
        det = a * d - b * c
        return x, y, det

    def apply_inverse_x(self, x: float, y: float) -> float:
        _, b, _, d, _, _ = self._transform
        x, y, det = self._untranslated(x, y)
        return det * (d * x - b * y)

    def apply_inverse_y(self, x: float, y: float) -> float:
        a, _, c, _, _, _ = self._transform
        x, y, det = self._untranslated(x, y)
        return det * (-c * x + a * y)

    def apply_inverse_position(self, pos: Vector) -> Vector:
        return Vector(
            self.apply_inverse_x(pos.x, pos.y), self.apply_inverse_y(pos.x, pos.y)
        )