"""Numeric thresholds and sampler constants shared by the distance cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Thresholds:
    """Read-only numeric guards applied during evaluation."""

    min_segment_norm_sq: float = 1e-10
    min_normal_norm_sq: float = 1e-10
    min_distance: float = 1e-10
    branch_margin: float = 1e-5
    tie_margin: float = 1e-8


@dataclass(frozen=True)
class SamplerBounds:
    """Box and spacing parameters for a card's domain sampler."""

    lower: float
    upper: float
    min_length: float = 0.0
    min_distance: float = 0.0
    separation: float = 0.0


DEFAULT_THRESHOLDS = Thresholds()

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32

POINT_SEGMENT_BOUNDS = SamplerBounds(lower=-2.0, upper=2.0, min_length=0.3, min_distance=0.05)
TRIANGLE_2D_BOUNDS = SamplerBounds(lower=-2.0, upper=2.0, min_length=0.3, min_distance=0.05)
TRIANGLE_3D_BOUNDS = SamplerBounds(lower=-1.5, upper=1.5)
SEGMENT_PAIR_BOUNDS = SamplerBounds(lower=-2.0, upper=2.0, min_length=0.4, separation=0.3)

SAMPLER_RETRIES = 4


def get_thresholds(thresholds: Optional[Thresholds] = None) -> Thresholds:
    """Return ``thresholds`` or the process-wide defaults."""

    return DEFAULT_THRESHOLDS if thresholds is None else thresholds


__all__ = [
    "Thresholds",
    "SamplerBounds",
    "DEFAULT_THRESHOLDS",
    "LCG_MULTIPLIER",
    "LCG_INCREMENT",
    "LCG_MODULUS",
    "POINT_SEGMENT_BOUNDS",
    "TRIANGLE_2D_BOUNDS",
    "TRIANGLE_3D_BOUNDS",
    "SEGMENT_PAIR_BOUNDS",
    "SAMPLER_RETRIES",
    "get_thresholds",
]
