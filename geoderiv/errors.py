"""Failure taxonomy for distance evaluations.

Every condition below is a local, synchronous validation failure.  None of them
is retryable: each one means the requested value or derivative is not defined
at the given input.
"""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for domain errors raised by the distance cards."""


class InvalidInput(GeometryError):
    """Raised when an input vector is malformed or holds non-finite values."""


class DegenerateGeometry(GeometryError):
    """Raised when a segment or triangle fails its minimum-size invariant."""


class SingularDistance(GeometryError):
    """Raised when the distance is too close to zero for a unit direction."""


class BranchBoundary(GeometryError):
    """Raised when a projection parameter sits on a piecewise boundary."""

    def __init__(self, message: str, projection: float):
        super().__init__(message)
        self.projection = projection


class NonUniqueBranch(GeometryError):
    """Raised when two distinct features share the minimum distance."""

    def __init__(self, message: str, features=()):
        super().__init__(message)
        self.features = tuple(features)


class UnsupportedOperation(NotImplementedError):
    """Raised for derivative orders a card does not provide analytically."""


class SamplingError(RuntimeError):
    """Raised when a domain sampler cannot produce a valid sample."""


__all__ = [
    "GeometryError",
    "InvalidInput",
    "DegenerateGeometry",
    "SingularDistance",
    "BranchBoundary",
    "NonUniqueBranch",
    "UnsupportedOperation",
    "SamplingError",
]
