"""Random numbers for scene generation."""

from __future__ import annotations

import random

_RNG = random.Random()


def random_float(lower: float, upper: float) -> float:
    """Return a float drawn uniformly from the half-open range [lower, upper)."""
    value = lower + (upper - lower) * _RNG.random()
    return value if value < upper or lower == upper else lower


def random_vector3(lower: float, upper: float) -> tuple[float, float, float]:
    """Return three independent uniform floats from [lower, upper)."""
    return random_float(lower, upper), random_float(lower, upper), random_float(lower, upper)


def random_bool() -> bool:
    """Return True or False with equal probability."""
    return _RNG.random() < 0.5