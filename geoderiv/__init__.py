from .errors import (
    GeometryError,
    InvalidInput,
    DegenerateGeometry,
    SingularDistance,
    BranchBoundary,
    NonUniqueBranch,
    UnsupportedOperation,
    SamplingError,
)
from .config import Thresholds, DEFAULT_THRESHOLDS, get_thresholds
from .features import Candidate, Feature, FeatureKind, FeaturePair
from .primitives import PointSegmentResult, point_segment, triangle_interior
from .selection import select_minimum, select_unique, select_gradient
from .sampling import Domain, LinearCongruentialGenerator
from .cards import (
    CARDS,
    DerivativeCard,
    get_card,
    list_cards,
    point_segment_2d,
    point_triangle_2d,
    point_triangle_3d,
    segment_segment_2d,
)
from .checks import (
    Tolerance,
    CheckFailure,
    CardCheckResult,
    estimate_gradient,
    assert_close,
    check_card,
    run_checks,
)

__all__ = [
    'GeometryError',
    'InvalidInput',
    'DegenerateGeometry',
    'SingularDistance',
    'BranchBoundary',
    'NonUniqueBranch',
    'UnsupportedOperation',
    'SamplingError',
    'Thresholds',
    'DEFAULT_THRESHOLDS',
    'get_thresholds',
    'Candidate',
    'Feature',
    'FeatureKind',
    'FeaturePair',
    'PointSegmentResult',
    'point_segment',
    'triangle_interior',
    'select_minimum',
    'select_unique',
    'select_gradient',
    'Domain',
    'LinearCongruentialGenerator',
    'CARDS',
    'DerivativeCard',
    'get_card',
    'list_cards',
    'point_segment_2d',
    'point_triangle_2d',
    'point_triangle_3d',
    'segment_segment_2d',
    'Tolerance',
    'CheckFailure',
    'CardCheckResult',
    'estimate_gradient',
    'assert_close',
    'check_card',
    'run_checks',
]
