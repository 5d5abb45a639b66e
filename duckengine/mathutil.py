"""Scalar helpers: clamping, angle conversion, trigonometry and random ranges."""

from __future__ import annotations

import math
import random

PI = 3.14159265358979323846264338327950288
RADIANS = 0.01745329251994329576923690768489
DEGREES = 57.295779513082320876798154814105
COS_ONE_OVER_TWO = 0.877582561890372716130286068203503191

RAND_MAX = 2**31 - 1

_rng = random.Random()


def clamp(value, minimum, maximum):
    """Return value limited to the closed range [minimum, maximum]."""
    if maximum < minimum:
        raise ValueError(f"clamp range is empty: [{minimum}, {maximum}]")
    if value < minimum:
        return minimum
    if maximum < value:
        return maximum
    return value


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * RADIANS


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * DEGREES


def sin(radians: float) -> float:
    """Sine of an angle given in radians."""
    return math.sin(radians)


def cos(radians: float) -> float:
    """Cosine of an angle given in radians."""
    return math.cos(radians)


def tan(radians: float) -> float:
    """Tangent of an angle given in radians."""
    return math.tan(radians)


def set_seed(seed: int) -> None:
    """Reseed the generator used by random_range."""
    _rng.seed(seed)


def random_range(minimum, maximum):
    """Random value starting at minimum.

    With integer bounds the result lies in [minimum, maximum]. With
    floating-point bounds the span is scaled by (maximum - minimum + 1),
    so the result lies in [minimum, maximum + 1].
    """
    if maximum < minimum:
        raise ValueError(f"random range is empty: [{minimum}, {maximum}]")
    raw = _rng.randint(0, RAND_MAX)
    span = maximum - minimum + 1
    if isinstance(minimum, int) and isinstance(maximum, int):
        step = RAND_MAX // span
        return min(minimum + raw // step, maximum)
    return minimum + raw / (RAND_MAX / span)