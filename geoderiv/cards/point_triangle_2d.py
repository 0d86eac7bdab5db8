"""Distance from a 2D point to the boundary of a triangle.

Input layout ``[px, py, ax, ay, bx, by, cx, cy]``.  The boundary is the union
of edges ``ab``, ``bc`` and ``ca``; a point inside the triangle measures to its
nearest edge, there is no interior branch.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..config import TRIANGLE_2D_BOUNDS, Thresholds
from ..decompose import split_points, triangle_2d_candidates
from ..features import Candidate
from ..logging_utils import apply_debug_logging
from ..primitives import require_triangle
from ..sampling import Domain, LinearCongruentialGenerator
from ..selection import require_finite, select_gradient, select_minimum
from ..vector import norm, rotate90
from .base import not_implemented

logger = logging.getLogger(__name__)

NAME = "point-triangle-distance-2d"
INPUT_SIZE = 8


def candidates(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> List[Candidate]:
    arr = require_finite(x, INPUT_SIZE)
    _, a, b, c = split_points(arr, 2)
    require_triangle(a, b, c, thresholds)
    return triangle_2d_candidates(arr, thresholds)


def value(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> float:
    return select_minimum(candidates(x, thresholds)).distance


def grad(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> np.ndarray:
    return select_gradient(candidates(x, thresholds), thresholds)


def hess(*_args, **_kwargs):
    not_implemented(NAME, "hess")


def hvp(*_args, **_kwargs):
    not_implemented(NAME, "hvp")


def _draw(rng: LinearCongruentialGenerator, index: int) -> np.ndarray:
    bounds = TRIANGLE_2D_BOUNDS
    ax = rng.uniform(bounds.lower, bounds.upper)
    ay = rng.uniform(bounds.lower, bounds.upper)
    bx = ax + bounds.min_length + abs(rng.uniform(bounds.lower, bounds.upper))
    by = ay + 0.1 * rng.uniform(bounds.lower, bounds.upper)
    cx = ax + 0.1 * rng.uniform(bounds.lower, bounds.upper)
    cy = ay + bounds.min_length + abs(rng.uniform(bounds.lower, bounds.upper))
    vertices = np.array([[ax, ay], [bx, by], [cx, cy]], dtype=float)

    # just outside an edge midpoint, cycling ab, bc, ca
    start = vertices[index % 3]
    end = vertices[(index + 1) % 3]
    midpoint = 0.5 * (start + end)
    normal = rotate90(end - start)
    if float(np.dot(normal, midpoint - vertices.mean(axis=0))) < 0.0:
        normal = -normal
    px, py = midpoint + bounds.min_distance * normal / norm(normal)
    return np.array([px, py, ax, ay, bx, by, cx, cy], dtype=float)


domain = Domain(NAME, _draw)

apply_debug_logging(globals(), names=("value", "grad"), logger=logger)
