"""Deterministic domain sampling for finite-difference verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

import numpy as np

from .config import LCG_INCREMENT, LCG_MODULUS, LCG_MULTIPLIER
from .errors import InvalidInput

logger = logging.getLogger(__name__)


class LinearCongruentialGenerator:
    """Fixed-parameter LCG; the same seed always replays the same stream."""

    def __init__(self, seed: int) -> None:
        self.state = int(seed) % LCG_MODULUS

    def next_unit(self) -> float:
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def uniform(self, lower: float, upper: float) -> float:
        return lower + (upper - lower) * self.next_unit()


SampleFunc = Callable[[LinearCongruentialGenerator, int], np.ndarray]


@dataclass(frozen=True)
class Domain:
    """Sampler bound to one card; ``draw`` builds the sample at a given index."""

    name: str
    draw: SampleFunc

    def sample(self, seed: int, count: int) -> List[np.ndarray]:
        if count < 0:
            raise InvalidInput(f"sample count must be greater than or equal to zero, got {count}")
        rng = LinearCongruentialGenerator(seed)
        samples = [self.draw(rng, index) for index in range(count)]
        logger.debug("Sampled %d input(s) for %s with seed %d", len(samples), self.name, seed)
        return samples


__all__ = ["LinearCongruentialGenerator", "Domain", "SampleFunc"]
