"""Vector helpers for distance guards, operating on tuple[float, ...]."""
from __future__ import annotations

import math

from tick_statemachine.types import Vec


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def magnitude_sq(v: Vec) -> float:
    return sum(vi * vi for vi in v)


def distance_sq(a: Vec, b: Vec) -> float:
    return magnitude_sq(sub(a, b))


def distance(a: Vec, b: Vec) -> float:
    return math.sqrt(distance_sq(a, b))
