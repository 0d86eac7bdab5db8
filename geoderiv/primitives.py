"""Atomic distance primitives used by every card.

``point_segment`` is the reusable building block: it classifies the query
point against the segment's projection parameter, evaluates the distance of
the active branch, and returns the gradient with respect to the point, the
segment start and the segment end (in that block order).  ``triangle_interior``
handles the face branch of the 3D triangle and reports containment through an
``Optional`` result instead of raising.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import Thresholds, get_thresholds
from .errors import DegenerateGeometry
from .features import Feature, edge, endpoint, face
from .vector import Vec, cross, dot, norm, norm_sq, scale, sub

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointSegmentResult:
    distance: float
    gradient: Optional[np.ndarray]
    projection: float
    feature: Feature


@dataclass(frozen=True)
class InteriorResult:
    distance: float
    gradient: Optional[np.ndarray]
    signed_distance: float
    barycentric: Tuple[float, float, float]


def require_segment(start: Vec, end: Vec, thresholds: Optional[Thresholds] = None) -> float:
    """Return ``|end - start|^2`` or raise :class:`DegenerateGeometry`."""

    limits = get_thresholds(thresholds)
    length_sq = norm_sq(sub(end, start))
    if length_sq <= limits.min_segment_norm_sq:
        logger.debug("Rejecting degenerate segment with squared length %.3g", length_sq)
        raise DegenerateGeometry(
            f"segment squared length must be greater than {limits.min_segment_norm_sq}, got {length_sq:.3g}"
        )
    return length_sq


def require_triangle(a: Vec, b: Vec, c: Vec, thresholds: Optional[Thresholds] = None) -> float:
    """Return the squared doubled area of ``abc`` or raise :class:`DegenerateGeometry`."""

    limits = get_thresholds(thresholds)
    normal = cross(sub(b, a), sub(c, a))
    area_sq = float(normal * normal) if a.shape[0] == 2 else norm_sq(normal)
    if area_sq <= limits.min_normal_norm_sq:
        logger.debug("Rejecting degenerate triangle with squared normal %.3g", area_sq)
        raise DegenerateGeometry(
            f"triangle normal squared norm must be greater than {limits.min_normal_norm_sq}, got {area_sq:.3g}"
        )
    return area_sq


def _endpoint_gradient(offset: Vec, distance: float, slot: int) -> np.ndarray:
    dim = offset.shape[0]
    unit = scale(offset, 1.0 / distance)
    grad = np.zeros(3 * dim, dtype=float)
    grad[:dim] = unit
    grad[slot * dim : (slot + 1) * dim] = -unit
    return grad


def _interior_gradient_2d(point: Vec, start: Vec, end: Vec, numerator: float, length_sq: float) -> np.ndarray:
    # d = |N| / sqrt(V), N = cross(end - start, point - start), V = |end - start|^2
    direction = sub(end, start)
    grad_numerator = np.array(
        [
            -direction[1],
            direction[0],
            end[1] - point[1],
            point[0] - end[0],
            point[1] - start[1],
            start[0] - point[0],
        ],
        dtype=float,
    )
    grad_length_sq = np.concatenate([np.zeros(2), -2.0 * direction, 2.0 * direction])
    inv_len = 1.0 / math.sqrt(length_sq)
    inv_len_cubed = inv_len / length_sq
    return (
        math.copysign(1.0, numerator) * inv_len * grad_numerator
        - 0.5 * abs(numerator) * inv_len_cubed * grad_length_sq
    )


def _interior_gradient_3d(point: Vec, start: Vec, end: Vec, t: float, distance: float) -> np.ndarray:
    # grad(|N|^2 / V) / (2d) with N = direction x offset collapses to the
    # foot-point residual split between the endpoints by (1 - t, t)
    direction = sub(end, start)
    residual = sub(sub(point, start), scale(direction, t))
    unit = scale(residual, 1.0 / distance)
    return np.concatenate([unit, -(1.0 - t) * unit, -t * unit])


def point_segment(
    point: Vec,
    start: Vec,
    end: Vec,
    *,
    names: Tuple[str, str] = ("a", "b"),
    thresholds: Optional[Thresholds] = None,
) -> PointSegmentResult:
    """Distance from ``point`` to segment ``start``-``end`` with its gradient.

    The gradient is ``None`` when the distance does not exceed the
    zero-distance threshold; the value is still reported so callers that only
    need the distance keep working at singular points.
    """

    limits = get_thresholds(thresholds)
    length_sq = require_segment(start, end, limits)
    direction = sub(end, start)
    from_start = sub(point, start)
    t = dot(from_start, direction) / length_sq

    if t <= 0.0:
        distance = norm(from_start)
        gradient = _endpoint_gradient(from_start, distance, 1) if distance > limits.min_distance else None
        return PointSegmentResult(distance, gradient, t, endpoint(names[0]))

    if t >= 1.0:
        from_end = sub(point, end)
        distance = norm(from_end)
        gradient = _endpoint_gradient(from_end, distance, 2) if distance > limits.min_distance else None
        return PointSegmentResult(distance, gradient, t, endpoint(names[1]))

    numerator = cross(direction, from_start)
    if point.shape[0] == 2:
        distance = abs(numerator) / math.sqrt(length_sq)
        gradient = (
            _interior_gradient_2d(point, start, end, numerator, length_sq)
            if distance > limits.min_distance
            else None
        )
    else:
        distance = norm(numerator) / math.sqrt(length_sq)
        gradient = (
            _interior_gradient_3d(point, start, end, t, distance) if distance > limits.min_distance else None
        )
    return PointSegmentResult(distance, gradient, t, edge(*names))


def triangle_interior(
    point: Vec,
    a: Vec,
    b: Vec,
    c: Vec,
    *,
    names: Tuple[str, str, str] = ("a", "b", "c"),
    thresholds: Optional[Thresholds] = None,
) -> Optional[InteriorResult]:
    """Face branch of the point-to-triangle distance in 3D.

    Projects ``point`` onto the triangle's plane and returns ``None`` when the
    projection falls outside the triangle.  The gradient with respect to the
    point is the signed unit normal.
    """

    limits = get_thresholds(thresholds)
    edge_ab = sub(b, a)
    edge_ac = sub(c, a)
    normal = cross(edge_ab, edge_ac)
    normal_norm_sq = norm_sq(normal)
    if normal_norm_sq <= limits.min_normal_norm_sq:
        raise DegenerateGeometry(
            f"triangle normal squared norm must be greater than {limits.min_normal_norm_sq}"
        )
    unit_normal = scale(normal, 1.0 / math.sqrt(normal_norm_sq))

    from_a = sub(point, a)
    signed = dot(from_a, unit_normal)
    projected = sub(from_a, scale(unit_normal, signed))

    d00 = dot(edge_ab, edge_ab)
    d01 = dot(edge_ab, edge_ac)
    d11 = dot(edge_ac, edge_ac)
    d20 = dot(projected, edge_ab)
    d21 = dot(projected, edge_ac)
    denom = d00 * d11 - d01 * d01
    u = (d11 * d20 - d01 * d21) / denom
    v = (d00 * d21 - d01 * d20) / denom
    w = 1.0 - u - v
    if u < 0.0 or v < 0.0 or w < 0.0:
        logger.debug("Projection outside %s (barycentric=%.3g, %.3g, %.3g)", face(*names), w, u, v)
        return None

    distance = abs(signed)
    gradient = math.copysign(1.0, signed) * unit_normal if distance > limits.min_distance else None
    return InteriorResult(distance, gradient, signed, (w, u, v))


__all__ = [
    "PointSegmentResult",
    "InteriorResult",
    "require_segment",
    "require_triangle",
    "point_segment",
    "triangle_interior",
]
