"""Distance from a 2D point to a segment.

Input layout ``[px, py, ax, ay, bx, by]``.  The branch (before ``a``, after
``b`` or interior) follows from the projection parameter of the point onto
``a``-``b``; ``grad`` refuses to differentiate within the branch margin of
either switch.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..config import POINT_SEGMENT_BOUNDS, Thresholds
from ..decompose import point_segment_candidates
from ..features import Candidate
from ..logging_utils import apply_debug_logging
from ..sampling import Domain, LinearCongruentialGenerator
from ..selection import require_finite, select_gradient, select_minimum
from .base import not_implemented

logger = logging.getLogger(__name__)

NAME = "point-segment-distance-2d"
INPUT_SIZE = 6


def candidates(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> List[Candidate]:
    return point_segment_candidates(require_finite(x, INPUT_SIZE), thresholds)


def value(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> float:
    return select_minimum(candidates(x, thresholds)).distance


def grad(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> np.ndarray:
    return select_gradient(candidates(x, thresholds), thresholds)


def hess(*_args, **_kwargs):
    not_implemented(NAME, "hess")


def hvp(*_args, **_kwargs):
    not_implemented(NAME, "hvp")


def _draw(rng: LinearCongruentialGenerator, index: int) -> np.ndarray:
    bounds = POINT_SEGMENT_BOUNDS
    ax = rng.uniform(bounds.lower, bounds.upper)
    ay = rng.uniform(bounds.lower, bounds.upper)
    dx = bounds.min_length + abs(rng.uniform(bounds.lower, bounds.upper))
    dy = 0.3 * rng.uniform(bounds.lower, bounds.upper)
    bx = ax + dx
    by = ay + dy

    branch = index % 3
    if branch == 0:
        px, py = ax - 0.5 * dx, ay + bounds.min_distance
    elif branch == 1:
        px, py = bx + 0.5 * dx, by + bounds.min_distance
    else:
        px, py = ax + 0.5 * dx, ay + 0.5 * dy + bounds.min_distance
    return np.array([px, py, ax, ay, bx, by], dtype=float)


domain = Domain(NAME, _draw)

apply_debug_logging(globals(), names=("value", "grad"), logger=logger)
