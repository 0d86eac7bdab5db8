"""Finite-difference verification of analytic card derivatives.

A card passes when, at every sampled input, each component of ``grad``
agrees with a central-difference estimate of ``value`` within
``absolute + relative * max(|expected|, 1)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np

from .cards import CARDS, DerivativeCard, get_card
from .errors import GeometryError

logger = logging.getLogger(__name__)

ScalarFunc = Callable[[np.ndarray], float]
VectorFunc = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class Tolerance:
    absolute: float = 1e-6
    relative: float = 1e-6

    def allowed(self, expected: float) -> float:
        return self.absolute + self.relative * max(abs(expected), 1.0)


DEFAULT_TOLERANCE = Tolerance()
RELAXED_TOLERANCE = Tolerance(absolute=3e-6, relative=3e-6)
CENTRAL_DIFFERENCE_EPS = 1e-6


class CheckFailure(AssertionError):
    """Raised when an analytic quantity disagrees with its numeric estimate."""


def estimate_gradient(func: ScalarFunc, x: Sequence[float], eps: float = CENTRAL_DIFFERENCE_EPS) -> np.ndarray:
    base = np.asarray(x, dtype=float)
    estimate = np.zeros_like(base)
    for i in range(base.shape[0]):
        forward = base.copy()
        forward[i] += eps
        backward = base.copy()
        backward[i] -= eps
        estimate[i] = (func(forward) - func(backward)) / (2.0 * eps)
    return estimate


def estimate_hessian(grad_func: VectorFunc, x: Sequence[float], eps: float = CENTRAL_DIFFERENCE_EPS) -> np.ndarray:
    base = np.asarray(x, dtype=float)
    columns = []
    for i in range(base.shape[0]):
        forward = base.copy()
        forward[i] += eps
        backward = base.copy()
        backward[i] -= eps
        columns.append((np.asarray(grad_func(forward)) - np.asarray(grad_func(backward))) / (2.0 * eps))
    return np.stack(columns, axis=1)


def estimate_directional_derivative(
    grad_func: VectorFunc, x: Sequence[float], direction: Sequence[float], eps: float = CENTRAL_DIFFERENCE_EPS
) -> np.ndarray:
    base = np.asarray(x, dtype=float)
    shifted = base + eps * np.asarray(direction, dtype=float)
    return (np.asarray(grad_func(shifted)) - np.asarray(grad_func(base))) / eps


def assert_close(actual, expected, tolerance: Tolerance = DEFAULT_TOLERANCE) -> None:
    actual_arr = np.atleast_1d(np.asarray(actual, dtype=float))
    expected_arr = np.atleast_1d(np.asarray(expected, dtype=float))
    if actual_arr.shape != expected_arr.shape:
        raise CheckFailure(f"shape mismatch: {actual_arr.shape} vs {expected_arr.shape}")
    for index, (a, e) in enumerate(zip(actual_arr.ravel(), expected_arr.ravel())):
        allowed = tolerance.allowed(float(e))
        if abs(a - e) > allowed:
            raise CheckFailure(
                f"component {index}: actual={a!r}, expected={e!r}, allowed={allowed:.3g}"
            )


@dataclass
class CardCheckResult:
    card: str
    seed: int
    samples: int
    max_error: float = 0.0
    failures: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def check_card(
    card: DerivativeCard,
    *,
    seed: int,
    count: int,
    eps: float = CENTRAL_DIFFERENCE_EPS,
    tolerance: Tolerance = RELAXED_TOLERANCE,
) -> CardCheckResult:
    """Compare ``grad`` against central differences of ``value`` on sampled inputs."""

    result = CardCheckResult(card=card.name, seed=seed, samples=count)
    for index, sample in enumerate(card.sample(seed, count)):
        try:
            analytic = card.grad(sample)
        except GeometryError as exc:
            logger.warning("%s sample %d is not differentiable: %s", card.name, index, exc)
            result.failures.append(f"sample {index}: {type(exc).__name__}: {exc}")
            continue
        numeric = estimate_gradient(card.value, sample, eps)
        error = float(np.max(np.abs(analytic - numeric))) if analytic.size else 0.0
        result.max_error = max(result.max_error, error)
        try:
            assert_close(analytic, numeric, tolerance)
        except CheckFailure as exc:
            logger.warning("%s sample %d failed: %s", card.name, index, exc)
            result.failures.append(f"sample {index}: {exc}")
    logger.info(
        "Checked %s on %d sample(s): max_error=%.3g passed=%s",
        card.name,
        count,
        result.max_error,
        result.passed,
    )
    return result


def run_checks(
    names: Optional[Iterable[str]] = None,
    *,
    seed: int = 47,
    count: int = 12,
    tolerance: Tolerance = RELAXED_TOLERANCE,
) -> List[CardCheckResult]:
    selected = list(names) if names else list(CARDS)
    return [check_card(get_card(name), seed=seed, count=count, tolerance=tolerance) for name in selected]


__all__ = [
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "RELAXED_TOLERANCE",
    "CENTRAL_DIFFERENCE_EPS",
    "CheckFailure",
    "CardCheckResult",
    "estimate_gradient",
    "estimate_hessian",
    "estimate_directional_derivative",
    "assert_close",
    "check_card",
    "run_checks",
]
