"""High precision timer with adjustable time scaling."""

from __future__ import annotations

import time as _time
from typing import Callable, List


def _check_scaling(scaling: float) -> None:
    if scaling < 0:
        raise ValueError(f"timer scaling must not be negative, got {scaling}")


class Timer:
    """Tracks an internal time in nanoseconds that may run faster or slower
    than the system clock.

    Changing the scaling keeps the internal time continuous.
    """

    def __init__(self) -> None:
        self._listeners: List[Callable[[float], object]] = []
        self._scaling = 1.0
        self._start = 0
        self._offset = 0
        self.reset()

    def scaling(self) -> float:
        """Current scaling factor (1.0 is real time)."""
        return self._scaling

    def set_scaling(self, scaling: float) -> None:
        """Change the scaling factor without a jump in the internal time."""
        _check_scaling(scaling)
        self.set_time(self.current_time(), scaling)
        for callback in list(self._listeners):
            callback(float(scaling))

    def reset(self) -> None:
        """Set the internal time to the system time and the scaling to 1.0."""
        self.set_time(self.system_time(), 1.0)

    def current_time(self) -> int:
        """Internal time in nanoseconds."""
        elapsed = self.system_time() - self._start
        return self._offset + int(elapsed * self._scaling)

    def set_time(self, time: int, scaling: float) -> None:
        """Set the internal time in nanoseconds and the scaling factor."""
        _check_scaling(scaling)
        self._offset = int(time)
        self._start = self.system_time()
        self._scaling = float(scaling)

    def add_scaling_listener(self, callback: Callable[[float], object]) -> None:
        """Register a callable that receives every new scaling factor."""
        self._listeners.append(callback)

    @staticmethod
    def system_time() -> int:
        """Wall clock time in nanoseconds since the epoch."""
        return _time.time_ns()