"""Two-dimensional vector with arithmetic helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass
class Vector:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"vector index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = float(value)
        elif index == 1:
            self.y = float(value)
        else:
            raise IndexError(f"vector index out of range: {index}")

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector, float]) -> Union[Vector, float]:
        """Scalar product with a number, dot product with another vector."""
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __imul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __abs__(self) -> Vector:
        """Component-wise absolute value."""
        return Vector(abs(self.x), abs(self.y))

    def __str__(self) -> str:
        return f"Vector({self.x:g}, {self.y:g})"

    def perpendicular(self) -> Vector:
        """Vector rotated clockwise by a quarter turn."""
        return Vector(self.y, -self.x)

    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vector(self.x / length, self.y / length)
        return Vector(self.x, self.y)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance(self, other: Vector) -> float:
        return (self - other).length()

    def distance_sq(self, other: Vector) -> float:
        return (self - other).length_squared()

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    @staticmethod
    def det(a: Vector, b: Vector, c: Vector) -> float:
        """Twice the signed area of the triangle a, b, c."""
        return (
            a.x * b.y + b.x * c.y + c.x * a.y
            - a.x * c.y - b.x * a.y - c.x * b.y
        )

    def angle(self) -> float:
        """Angle measured clockwise from the y axis, shifted by a full turn."""
        return math.atan2(self.x, self.y) + 2 * math.pi