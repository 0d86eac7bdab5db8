"""Shape-specific candidate enumeration.

Each compound shape is split into atomic features.  Every candidate carries a
gradient zero-extended into the full input layout of its card, so the branch
selector can return the winner's gradient unchanged.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import Thresholds
from .features import Candidate, FeaturePair, endpoint, face
from .primitives import PointSegmentResult, point_segment, triangle_interior
from .vector import Vec, cross, sub

logger = logging.getLogger(__name__)

# vertex slots of the 2D triangle layout [p, a, b, c]
_TRIANGLE_EDGES: Tuple[Tuple[str, int, int], ...] = (
    ("ab", 1, 2),
    ("bc", 2, 3),
    ("ca", 3, 1),
)
_TRIANGLE_NAMES = ("p", "a", "b", "c")

# vertex slots of the segment pair layout [a0, a1, b0, b1]
_SEGMENT_PAIR_QUERIES: Tuple[Tuple[int, int, int], ...] = (
    (0, 2, 3),
    (1, 2, 3),
    (2, 0, 1),
    (3, 0, 1),
)
_SEGMENT_NAMES = ("a0", "a1", "b0", "b1")


def split_points(x: np.ndarray, dim: int) -> List[Vec]:
    return [x[i : i + dim] for i in range(0, x.shape[0], dim)]


def scatter(local: Optional[np.ndarray], slots: Sequence[int], size: int, dim: int) -> Optional[np.ndarray]:
    """Zero-extend a per-block gradient into a layout of ``size`` coordinates."""

    if local is None:
        return None
    full = np.zeros(size, dtype=float)
    for block, slot in enumerate(slots):
        full[slot * dim : (slot + 1) * dim] += local[block * dim : (block + 1) * dim]
    return full


def _candidate(result: PointSegmentResult, gradient: Optional[np.ndarray], feature, source: str) -> Candidate:
    return Candidate(
        distance=result.distance,
        gradient=gradient,
        feature=feature,
        source=source,
        projection=result.projection,
    )


def point_segment_candidates(x: np.ndarray, thresholds: Optional[Thresholds] = None) -> List[Candidate]:
    point, start, end = split_points(x, 2)
    result = point_segment(point, start, end, names=("a", "b"), thresholds=thresholds)
    return [_candidate(result, result.gradient, result.feature, "segment")]


def triangle_2d_candidates(x: np.ndarray, thresholds: Optional[Thresholds] = None) -> List[Candidate]:
    points = split_points(x, 2)
    candidates: List[Candidate] = []
    for label, start, end in _TRIANGLE_EDGES:
        result = point_segment(
            points[0],
            points[start],
            points[end],
            names=(_TRIANGLE_NAMES[start], _TRIANGLE_NAMES[end]),
            thresholds=thresholds,
        )
        gradient = scatter(result.gradient, (0, start, end), x.shape[0], 2)
        candidates.append(_candidate(result, gradient, result.feature, f"edge {label}"))
    return candidates


def triangle_3d_candidates(
    point: Vec, a: Vec, b: Vec, c: Vec, thresholds: Optional[Thresholds] = None
) -> List[Candidate]:
    """Face candidate (when the projection lands inside) plus the three edges.

    Gradients are taken with respect to the query point only.
    """

    candidates: List[Candidate] = []
    interior = triangle_interior(point, a, b, c, thresholds=thresholds)
    if interior is not None:
        candidates.append(
            Candidate(
                distance=interior.distance,
                gradient=interior.gradient,
                feature=face("a", "b", "c"),
                source="face",
            )
        )
    vertices = {"a": a, "b": b, "c": c}
    for label in ("ab", "bc", "ca"):
        start, end = label
        result = point_segment(point, vertices[start], vertices[end], names=(start, end), thresholds=thresholds)
        gradient = None if result.gradient is None else result.gradient[:3].copy()
        candidates.append(_candidate(result, gradient, result.feature, f"edge {label}"))
    return candidates


def orientation(p: Vec, q: Vec, r: Vec) -> float:
    """Twice the signed area of ``pqr``; positive for a counter-clockwise turn."""

    return cross(sub(q, p), sub(r, p))


def segments_intersect(x: np.ndarray) -> bool:
    """Return ``True`` when segments ``a0-a1`` and ``b0-b1`` strictly cross."""

    a0, a1, b0, b1 = split_points(x, 2)
    o1 = orientation(a0, a1, b0)
    o2 = orientation(a0, a1, b1)
    o3 = orientation(b0, b1, a0)
    o4 = orientation(b0, b1, a1)
    return o1 * o2 < 0.0 and o3 * o4 < 0.0


def segment_pair_candidates(x: np.ndarray, thresholds: Optional[Thresholds] = None) -> List[Candidate]:
    """Each endpoint of one segment measured against the other segment."""

    points = split_points(x, 2)
    candidates: List[Candidate] = []
    for query, start, end in _SEGMENT_PAIR_QUERIES:
        result = point_segment(
            points[query],
            points[start],
            points[end],
            names=(_SEGMENT_NAMES[start], _SEGMENT_NAMES[end]),
            thresholds=thresholds,
        )
        gradient = scatter(result.gradient, (query, start, end), x.shape[0], 2)
        query_feature = endpoint(_SEGMENT_NAMES[query])
        if query < 2:
            feature = FeaturePair(query_feature, result.feature)
        else:
            feature = FeaturePair(result.feature, query_feature)
        candidates.append(
            _candidate(result, gradient, feature, f"{_SEGMENT_NAMES[query]} to {_SEGMENT_NAMES[start]}-{_SEGMENT_NAMES[end]}")
        )
    return candidates


__all__ = [
    "split_points",
    "scatter",
    "point_segment_candidates",
    "triangle_2d_candidates",
    "triangle_3d_candidates",
    "orientation",
    "segments_intersect",
    "segment_pair_candidates",
]
