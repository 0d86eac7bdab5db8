"""Distance from a 3D point to a solid triangle.

Input layout ``[px, py, pz]``; the triangle is a card parameter and is not
differentiated.  Candidates are the face (only when the orthogonal projection
lands inside the triangle) and the three edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import SAMPLER_RETRIES, TRIANGLE_3D_BOUNDS, Thresholds
from ..decompose import triangle_3d_candidates
from ..errors import GeometryError, InvalidInput, SamplingError
from ..features import Candidate
from ..logging_utils import apply_debug_logging
from ..primitives import require_triangle
from ..sampling import Domain, LinearCongruentialGenerator
from ..selection import require_finite, select_gradient, select_minimum
from ..vector import as_point
from .base import not_implemented

logger = logging.getLogger(__name__)

NAME = "point-triangle-distance-3d"
INPUT_SIZE = 3

Vertex = Tuple[float, float, float]


@dataclass(frozen=True)
class TriangleParameters:
    vertex_a: Vertex = (0.0, 0.0, 0.0)
    vertex_b: Vertex = (1.0, 0.0, 0.0)
    vertex_c: Vertex = (0.0, 1.0, 0.0)

    def vertices(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        arrays = tuple(as_point(v) for v in (self.vertex_a, self.vertex_b, self.vertex_c))
        for arr in arrays:
            if arr.shape != (3,) or not np.all(np.isfinite(arr)):
                raise InvalidInput("triangle vertices must be finite 3D points")
        return arrays  # type: ignore[return-value]


DEFAULT_TRIANGLE = TriangleParameters()


def candidates(
    x: Sequence[float],
    parameters: TriangleParameters = DEFAULT_TRIANGLE,
    thresholds: Optional[Thresholds] = None,
) -> List[Candidate]:
    point = require_finite(x, INPUT_SIZE)
    a, b, c = parameters.vertices()
    require_triangle(a, b, c, thresholds)
    return triangle_3d_candidates(point, a, b, c, thresholds)


def value(
    x: Sequence[float],
    parameters: TriangleParameters = DEFAULT_TRIANGLE,
    thresholds: Optional[Thresholds] = None,
) -> float:
    return select_minimum(candidates(x, parameters, thresholds)).distance


def grad(
    x: Sequence[float],
    parameters: TriangleParameters = DEFAULT_TRIANGLE,
    thresholds: Optional[Thresholds] = None,
) -> np.ndarray:
    return select_gradient(candidates(x, parameters, thresholds), thresholds)


def hess(*_args, **_kwargs):
    not_implemented(NAME, "hess")


def hvp(*_args, **_kwargs):
    not_implemented(NAME, "hvp")


def _draw(rng: LinearCongruentialGenerator, index: int) -> np.ndarray:
    bounds = TRIANGLE_3D_BOUNDS
    for _ in range(SAMPLER_RETRIES + 1):
        point = np.array([rng.uniform(bounds.lower, bounds.upper) for _ in range(3)], dtype=float)
        try:
            grad(point)
        except GeometryError as exc:
            logger.debug("Rejecting 3D triangle sample %d: %s", index, exc)
            continue
        return point
    raise SamplingError(f"could not draw a differentiable sample for {NAME} at index {index}")


domain = Domain(NAME, _draw)

apply_debug_logging(globals(), names=("value", "grad"), logger=logger)
