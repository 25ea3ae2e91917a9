"""Core utilities for small-size robot soccer simulation: vectors, random
numbers, field transforms, coordinates, timing, message logs, field geometry,
robot defaults and referee packets."""

__version__ = "1.0.0"