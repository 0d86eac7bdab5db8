"""Distance between two 2D segments.

Input layout ``[a0x, a0y, a1x, a1y, b0x, b0y, b1x, b1y]``.  Non-crossing
segments attain their distance at an endpoint of one of them, so the
candidates are the four endpoint-to-segment distances.  Strictly crossing
segments are at distance zero and have no unique gradient.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..config import SAMPLER_RETRIES, SEGMENT_PAIR_BOUNDS, Thresholds
from ..decompose import segment_pair_candidates, segments_intersect, split_points
from ..errors import GeometryError, NonUniqueBranch, SamplingError
from ..features import Candidate
from ..logging_utils import apply_debug_logging
from ..primitives import require_segment
from ..sampling import Domain, LinearCongruentialGenerator
from ..selection import require_finite, select_gradient, select_minimum
from .base import not_implemented

logger = logging.getLogger(__name__)

NAME = "segment-segment-distance-2d"
INPUT_SIZE = 8


def _validated(x: Sequence[float], thresholds: Optional[Thresholds]) -> np.ndarray:
    arr = require_finite(x, INPUT_SIZE)
    a0, a1, b0, b1 = split_points(arr, 2)
    require_segment(a0, a1, thresholds)
    require_segment(b0, b1, thresholds)
    return arr


def candidates(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> List[Candidate]:
    return segment_pair_candidates(_validated(x, thresholds), thresholds)


def value(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> float:
    arr = _validated(x, thresholds)
    if segments_intersect(arr):
        return 0.0
    return select_minimum(segment_pair_candidates(arr, thresholds)).distance


def grad(x: Sequence[float], thresholds: Optional[Thresholds] = None) -> np.ndarray:
    arr = _validated(x, thresholds)
    if segments_intersect(arr):
        logger.debug("Segments cross; gradient is not unique")
        raise NonUniqueBranch("gradient is not unique for intersecting segments")
    return select_gradient(segment_pair_candidates(arr, thresholds), thresholds)


def hess(*_args, **_kwargs):
    not_implemented(NAME, "hess")


def hvp(*_args, **_kwargs):
    not_implemented(NAME, "hvp")


def _differentiable(x: np.ndarray) -> bool:
    try:
        grad(x)
    except GeometryError as exc:
        logger.debug("Rejecting segment pair sample: %s", exc)
        return False
    return True


def _draw(rng: LinearCongruentialGenerator, index: int) -> np.ndarray:
    bounds = SEGMENT_PAIR_BOUNDS
    a0x = rng.uniform(bounds.lower, bounds.upper)
    a0y = rng.uniform(bounds.lower, bounds.upper)
    a1x = a0x + bounds.min_length + abs(rng.uniform(bounds.lower, bounds.upper))
    a1y = a0y + 0.2 * rng.uniform(bounds.lower, bounds.upper)

    b0x = rng.uniform(bounds.lower, bounds.upper)
    b0y = a0y + bounds.separation + abs(rng.uniform(bounds.lower, bounds.upper))
    b1x = b0x + bounds.min_length + abs(rng.uniform(bounds.lower, bounds.upper))
    b1y = b0y + 0.35 + 0.2 * rng.uniform(bounds.lower, bounds.upper)

    sample = np.array([a0x, a0y, a1x, a1y, b0x, b0y, b1x, b1y], dtype=float)
    for step in range(SAMPLER_RETRIES):
        if _differentiable(sample):
            return sample
        # nudge the second segment and try again
        sample[4:] += (step + 1) * np.array([0.137, 0.071, 0.083, 0.059])
    if _differentiable(sample):
        return sample
    raise SamplingError(f"could not separate segment pair sample {index} within {SAMPLER_RETRIES} nudges")


domain = Domain(NAME, _draw)

apply_debug_logging(globals(), names=("value", "grad"), logger=logger)
