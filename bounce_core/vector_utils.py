#!/usr/bin/env python3
"""
Scalar and 2D vector helpers used by the motion engine and the renderer.
"""
import math
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_len(a: Tuple[float, float]) -> float:
    return math.hypot(a[0], a[1])
