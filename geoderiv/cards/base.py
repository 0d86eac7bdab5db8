"""Card record shared by every distance card module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, NoReturn

import numpy as np

from ..errors import UnsupportedOperation
from ..sampling import Domain


@dataclass(frozen=True)
class DerivativeCard:
    """Value/gradient pair with its sampler, as consumed by the checker."""

    name: str
    input_size: int
    value: Callable[..., float]
    grad: Callable[..., np.ndarray]
    hess: Callable[..., Any]
    hvp: Callable[..., Any]
    domain: Domain
    summary: str = ""

    def sample(self, seed: int, count: int):
        return self.domain.sample(seed, count)


def not_implemented(card: str, operation: str) -> NoReturn:
    raise UnsupportedOperation(f"{operation} is not implemented for {card}; only first derivatives are analytic")


__all__ = ["DerivativeCard", "not_implemented"]
