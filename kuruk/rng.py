"""Combined Tausworthe pseudorandom number generator."""

from __future__ import annotations

import math
import time
from typing import Optional

from kuruk.vector import Vector

_MASK = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0


def _lcg(n: int) -> int:
    return (69069 * n) & _MASK


def _tausworthe(s: int, a: int, b: int, c: int, d: int) -> int:
    return (((s & c) << d) & _MASK) ^ ((((s << a) & _MASK) ^ s) >> b)


class Rng:
    """Reproducible pseudorandom generator with uniform and normal draws."""

    def __init__(self, seed: int = 0) -> None:
        seed &= _MASK
        if seed == 0:
            seed = (time.time_ns() // 1000) & _MASK
        self._s1 = self._s2 = self._s3 = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator state from a 32-bit seed."""
        seed &= _MASK
        if seed == 0:
            # a zero seed would lock the generator, use all ones instead
            seed = _MASK
        self._s1 = _lcg(seed)
        self._s2 = _lcg(self._s1)
        self._s3 = _lcg(self._s2)
        for _ in range(6):
            self.uniform_int()

    def uniform_int(self) -> int:
        """Uniform integer in [0, 2**32 - 1]."""
        self._s1 = _tausworthe(self._s1, 13, 19, 4294967294, 12)
        self._s2 = _tausworthe(self._s2, 2, 25, 4294967288, 4)
        self._s3 = _tausworthe(self._s3, 3, 11, 4294967280, 17)
        return self._s1 ^ self._s2 ^ self._s3

    def uniform(self) -> float:
        """Uniform float in [0, 1)."""
        return self.uniform_int() / _TWO_POW_32

    def uniform_positive(self) -> float:
        """Uniform float in (0, 1)."""
        while True:
            r = self.uniform()
            if r != 0.0:
                return r

    def uniform_float(self, minimum: float, maximum: float) -> float:
        """Uniform float between minimum and maximum."""
        return minimum + (self.uniform_int() / _TWO_POW_32) * (maximum - minimum)

    def uniform_vector(self) -> Vector:
        x = self.uniform()
        return Vector(x, self.uniform())

    def uniform_vector_in(self, minimum: Vector, maximum: Vector) -> Vector:
        x = self.uniform_float(minimum.x, maximum.x)
        return Vector(x, self.uniform_float(minimum.y, maximum.y))

    def normal(self, sigma: float, mean: float = 0.0) -> float:
        return self.normal_vector(sigma, mean).x

    def normal_vector(self, sigma: float, mean: Optional[float] = 0.0) -> Vector:
        """Vector of two independent normal draws (polar Box-Muller)."""
        mean = 0.0 if mean is None else mean
        while True:
            u = -1.0 + 2.0 * self.uniform_positive()
            v = -1.0 + 2.0 * self.uniform_positive()
            s = u * u + v * v
            if 0.0 < s < 1.0:
                break
        factor = sigma * math.sqrt(-2.0 * math.log(s) / s)
        return Vector(factor * u + mean, factor * v + mean)