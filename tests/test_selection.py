import numpy as np
import pytest

from geoderiv.config import Thresholds
from geoderiv.errors import BranchBoundary, InvalidInput, NonUniqueBranch, SingularDistance
from geoderiv.features import Candidate, Feature, FeatureKind, edge, endpoint, face
from geoderiv.selection import (
    check_active,
    check_projection,
    require_finite,
    select_gradient,
    select_minimum,
    select_unique,
)


def _candidate(distance, feature, projection=0.5, source="test"):
    return Candidate(
        distance=distance,
        gradient=np.array([distance, 0.0]),
        feature=feature,
        source=source,
        projection=projection,
    )


def test_select_minimum_prefers_first_of_equal_candidates():
    first = _candidate(1.0, edge("a", "b"), source="first")
    second = _candidate(1.0, edge("b", "c"), source="second")
    third = _candidate(2.0, edge("c", "a"), source="third")

    assert select_minimum([third, first, second]).source == "first"


def test_select_unique_rejects_distinct_tied_features():
    candidates = [_candidate(1.0, edge("a", "b")), _candidate(1.0 + 1e-9, edge("b", "c"))]

    with pytest.raises(NonUniqueBranch) as excinfo:
        select_unique(candidates)
    assert len(excinfo.value.features) == 2


def test_select_unique_merges_candidates_reaching_the_same_feature():
    via_bc = _candidate(1.5, endpoint("c"), projection=1.25, source="edge bc")
    via_ca = _candidate(1.5, endpoint("c"), projection=-1.0, source="edge ca")
    far = _candidate(3.0, edge("a", "b"))

    assert select_unique([far, via_bc, via_ca]).source == "edge bc"


def test_tie_margin_comes_from_thresholds():
    candidates = [_candidate(1.0, edge("a", "b")), _candidate(1.001, edge("b", "c"))]

    assert select_unique(candidates).distance == pytest.approx(1.0)
    with pytest.raises(NonUniqueBranch):
        select_unique(candidates, Thresholds(tie_margin=1e-2))


def test_check_projection_margins():
    check_projection(0.5)
    with pytest.raises(BranchBoundary):
        check_projection(0.0)
    with pytest.raises(BranchBoundary):
        check_projection(1.0 + 5e-6)
    check_projection(-1e-3)


def test_check_active_rejects_zero_distance():
    candidate = Candidate(distance=0.0, gradient=None, feature=face("a", "b", "c"), source="face")
    with pytest.raises(SingularDistance):
        check_active(candidate)


def test_select_gradient_returns_a_copy():
    candidate = _candidate(1.0, edge("a", "b"))
    gradient = select_gradient([candidate])
    gradient[0] = 42.0
    assert candidate.gradient[0] == pytest.approx(1.0)


def test_require_finite():
    assert require_finite([1, 2], 2).dtype == float
    with pytest.raises(InvalidInput):
        require_finite([1.0, float("nan")], 2)
    with pytest.raises(InvalidInput):
        require_finite([1.0, float("inf")], 2)
    with pytest.raises(InvalidInput):
        require_finite([1.0, 2.0, 3.0], 2)
    with pytest.raises(InvalidInput):
        require_finite(["x", "y"], 2)


def test_feature_identity_ignores_edge_direction():
    assert edge("c", "a") == edge("a", "c")
    assert face("c", "b", "a") == face("a", "b", "c")
    assert endpoint("a") != endpoint("b")
    assert str(edge("b", "a")) == "edge-interior(a-b)"
    with pytest.raises(ValueError):
        Feature(FeatureKind.ENDPOINT, ("a", "b"))


def test_select_gradient_checks_every_candidate_reaching_the_winner():
    via_bc = _candidate(1.0, endpoint("c"), projection=1.5, source="edge bc")
    via_ca = _candidate(1.0, endpoint("c"), projection=0.0, source="edge ca")

    with pytest.raises(BranchBoundary):
        select_gradient([via_bc, via_ca])
    with pytest.raises(BranchBoundary):
        select_gradient([via_ca, via_bc])


def test_check_active_requires_a_gradient():
    candidate = Candidate(distance=1.0, gradient=None, feature=endpoint("a"), source="edge ab", projection=-1.0)
    with pytest.raises(SingularDistance):
        check_active(candidate)
