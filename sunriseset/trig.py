"""Degree-based trigonometry helpers used by the sunrise/sunset algorithm."""

from __future__ import annotations

import math

__all__ = ["sin", "cos", "tan", "asin", "acos", "atan", "constrain", "round_half_up"]


def sin(angle: float) -> float:
    return math.sin(math.radians(angle))


def cos(angle: float) -> float:
    return math.cos(math.radians(angle))


def tan(angle: float) -> float:
    return math.tan(math.radians(angle))


def asin(value: float) -> float:
    return math.degrees(math.asin(value))


def acos(value: float) -> float:
    return math.degrees(math.acos(value))


def atan(value: float) -> float:
    return math.degrees(math.atan(value))


def constrain(limit: float, value: float) -> float:
    """Bring *value* into ``[0, limit]`` by adding or subtracting *limit*.

    Both bounds are inclusive, so ``constrain(360, 720)`` is ``360``.
    """

    while value < 0:
        value += limit
    while value > limit:
        value -= limit
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""

    return math.floor(value + 0.5)
