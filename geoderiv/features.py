"""Tagged features and the transient candidate record built from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np


class FeatureKind(enum.Enum):
    ENDPOINT = "endpoint"
    EDGE_INTERIOR = "edge-interior"
    FACE_INTERIOR = "face-interior"


@dataclass(frozen=True)
class Feature:
    """Atomic sub-feature of a compound shape, named by its defining vertices."""

    kind: FeatureKind
    vertices: Tuple[str, ...]

    def __post_init__(self) -> None:
        expected = {
            FeatureKind.ENDPOINT: 1,
            FeatureKind.EDGE_INTERIOR: 2,
            FeatureKind.FACE_INTERIOR: 3,
        }[self.kind]
        if len(self.vertices) != expected:
            raise ValueError(f"{self.kind.value} feature needs {expected} vertices, got {self.vertices}")
        if self.kind is not FeatureKind.ENDPOINT:
            # an edge or face is the same feature whichever way it is walked
            object.__setattr__(self, "vertices", tuple(sorted(self.vertices)))

    def __str__(self) -> str:
        return f"{self.kind.value}({'-'.join(self.vertices)})"


@dataclass(frozen=True)
class FeaturePair:
    """Closest-feature pair between two shapes (first shape, second shape)."""

    first: Feature
    second: Feature

    def __str__(self) -> str:
        return f"{self.first}|{self.second}"


AnyFeature = Union[Feature, FeaturePair]


def endpoint(name: str) -> Feature:
    return Feature(FeatureKind.ENDPOINT, (name,))


def edge(first: str, second: str) -> Feature:
    return Feature(FeatureKind.EDGE_INTERIOR, (first, second))


def face(a: str, b: str, c: str) -> Feature:
    return Feature(FeatureKind.FACE_INTERIOR, (a, b, c))


@dataclass(frozen=True)
class Candidate:
    """Distance proposal produced by one sub-feature of a compound shape.

    ``gradient`` is already laid out like the caller's input vector, or
    ``None`` when the distance is too small for a gradient to exist.
    ``projection`` is the segment parameter of edge-based candidates and
    ``None`` for face candidates.
    """

    distance: float
    gradient: Optional[np.ndarray]
    feature: AnyFeature
    source: str
    projection: Optional[float] = None


__all__ = [
    "FeatureKind",
    "Feature",
    "FeaturePair",
    "AnyFeature",
    "Candidate",
    "endpoint",
    "edge",
    "face",
]
