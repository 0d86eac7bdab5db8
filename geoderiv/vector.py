from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

from .errors import InvalidInput

Vec = np.ndarray
Cross = Union[float, np.ndarray]


def as_point(value: Sequence[float]) -> Vec:
    arr = np.asarray(value, dtype=float)
    if arr.ndim != 1 or arr.shape[0] not in (2, 3):
        raise InvalidInput(f"point must have 2 or 3 coordinates, got shape {arr.shape}")
    return arr


def sub(a: Vec, b: Vec) -> Vec:
    return a - b


def dot(a: Vec, b: Vec) -> float:
    return float(np.dot(a, b))


def cross(a: Vec, b: Vec) -> Cross:
    """Return the z-component in 2D and the full cross product in 3D."""

    if a.shape[0] == 2:
        return float(a[0] * b[1] - a[1] * b[0])
    if a.shape[0] == 3:
        return np.array(
            [
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            ],
            dtype=float,
        )
    raise InvalidInput(f"cross product needs 2D or 3D vectors, got {a.shape[0]}D")


def norm_sq(v: Vec) -> float:
    return dot(v, v)


def norm(v: Vec) -> float:
    return math.sqrt(max(norm_sq(v), 0.0))


def scale(v: Vec, s: float) -> Vec:
    return v * s


def rotate90(v: Vec) -> Vec:
    return np.array([-v[1], v[0]], dtype=float)


__all__ = [
    "Vec",
    "as_point",
    "sub",
    "dot",
    "cross",
    "norm_sq",
    "norm",
    "scale",
    "rotate90",
]
