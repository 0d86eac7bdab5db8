"""Branch selection and the differentiability guards applied before ``grad``.

``value`` only needs :func:`select_minimum`.  ``grad`` walks the full decision
chain: minimum, uniqueness (:func:`select_unique`), then the active
candidate's own guards (:func:`check_active`).  Any failure aborts the call.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .config import Thresholds, get_thresholds
from .errors import BranchBoundary, InvalidInput, NonUniqueBranch, SingularDistance
from .features import Candidate

logger = logging.getLogger(__name__)


def select_minimum(candidates: Sequence[Candidate]) -> Candidate:
    """Return the first candidate holding the smallest distance."""

    if not candidates:
        raise ValueError("select_minimum requires at least one candidate")
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.distance < best.distance:
            best = candidate
    return best


def select_unique(candidates: Sequence[Candidate], thresholds: Optional[Thresholds] = None) -> Candidate:
    """Return the minimum candidate, rejecting ties between distinct features.

    Candidates that reach the same feature through different sub-shapes (a
    triangle vertex seen from both adjacent edges) describe one branch and do
    not count as a tie.
    """

    limits = get_thresholds(thresholds)
    best = select_minimum(candidates)
    tied: List[Candidate] = []
    for candidate in candidates:
        if abs(candidate.distance - best.distance) > limits.tie_margin:
            continue
        if any(candidate.feature == other.feature for other in tied):
            continue
        tied.append(candidate)
    if len(tied) > 1:
        features = [str(candidate.feature) for candidate in tied]
        logger.debug("Minimum distance %.6g tied between %s", best.distance, features)
        raise NonUniqueBranch(
            f"minimum candidate is not unique within tie margin {limits.tie_margin}: {', '.join(features)}",
            features=[candidate.feature for candidate in tied],
        )
    return best


def check_distance(distance: float, thresholds: Optional[Thresholds] = None) -> None:
    limits = get_thresholds(thresholds)
    if distance <= limits.min_distance:
        logger.debug("Distance %.3g at or below %.3g", distance, limits.min_distance)
        raise SingularDistance(f"distance must be greater than {limits.min_distance}, got {distance:.3g}")


def check_projection(projection: float, thresholds: Optional[Thresholds] = None) -> None:
    limits = get_thresholds(thresholds)
    if abs(projection) <= limits.branch_margin:
        logger.debug("Projection parameter %.3g within %.3g of 0", projection, limits.branch_margin)
        raise BranchBoundary(
            f"projection parameter must stay away from 0 by more than {limits.branch_margin}", projection
        )
    if abs(projection - 1.0) <= limits.branch_margin:
        logger.debug("Projection parameter %.3g within %.3g of 1", projection, limits.branch_margin)
        raise BranchBoundary(
            f"projection parameter must stay away from 1 by more than {limits.branch_margin}", projection
        )


def check_active(
    candidate: Candidate,
    thresholds: Optional[Thresholds] = None,
    merged: Sequence[Candidate] = (),
) -> np.ndarray:
    """Apply the active branch's guards and return its gradient.

    ``merged`` holds the other candidates reaching the same feature; each of
    their projection parameters must clear the branch margin as well.
    """

    check_distance(candidate.distance, thresholds)
    for member in (candidate, *merged):
        if member.projection is not None:
            check_projection(member.projection, thresholds)
    if candidate.gradient is None:
        raise SingularDistance(f"no gradient available for {candidate.feature}")
    return candidate.gradient


def select_gradient(candidates: Sequence[Candidate], thresholds: Optional[Thresholds] = None) -> np.ndarray:
    limits = get_thresholds(thresholds)
    best = select_unique(candidates, limits)
    merged = [
        candidate
        for candidate in candidates
        if candidate is not best
        and candidate.feature == best.feature
        and abs(candidate.distance - best.distance) <= limits.tie_margin
    ]
    logger.debug("Active branch %s from %s (distance=%.6g)", best.feature, best.source, best.distance)
    return check_active(best, limits, merged).copy()


def require_finite(x: Sequence[float], size: int, name: str = "input") -> np.ndarray:
    """Return ``x`` as a float vector of length ``size`` with finite entries."""

    try:
        arr = np.asarray(x, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} must be a numeric vector") from exc
    if arr.shape != (size,):
        raise InvalidInput(f"{name} must have shape ({size},), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"{name} must contain finite values")
    return arr


__all__ = [
    "select_minimum",
    "select_unique",
    "check_distance",
    "check_projection",
    "check_active",
    "select_gradient",
    "require_finite",
]
