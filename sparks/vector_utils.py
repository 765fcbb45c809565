#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

These are small, fast functions for point math used throughout the simulation.
"""
import math
from typing import Tuple


def distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def vec_add(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] + b[0], a[1] + b[1])


def polar(angle: float, length: float) -> Tuple[float, float]:
    """Vector of the given length pointing along angle (radians)."""
    return (math.cos(angle) * length, math.sin(angle) * length)


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))
