import math

import numpy as np
import pytest

from geoderiv.errors import DegenerateGeometry
from geoderiv.features import FeatureKind, edge, endpoint
from geoderiv.primitives import point_segment, require_triangle, triangle_interior


def _p(*coords):
    return np.array(coords, dtype=float)


def test_point_segment_interior_branch_2d():
    result = point_segment(_p(0.5, 1.0), _p(0.0, 0.0), _p(2.0, 0.0))

    assert result.projection == pytest.approx(0.25)
    assert result.distance == pytest.approx(1.0)
    assert result.feature == edge("a", "b")
    assert np.allclose(result.gradient, [0.0, 1.0, 0.0, -0.75, 0.0, -0.25])


def test_point_segment_interior_sign_does_not_matter():
    above = point_segment(_p(0.5, 1.0), _p(0.0, 0.0), _p(2.0, 0.0))
    below = point_segment(_p(0.5, -1.0), _p(0.0, 0.0), _p(2.0, 0.0))

    assert below.distance == pytest.approx(above.distance)
    assert np.allclose(below.gradient, [0.0, -1.0, 0.0, 0.75, 0.0, 0.25])


def test_point_segment_endpoint_branches():
    before = point_segment(_p(-1.0, 0.0), _p(0.0, 0.0), _p(2.0, 0.0))
    assert before.feature == endpoint("a")
    assert before.distance == pytest.approx(1.0)
    assert np.allclose(before.gradient, [-1.0, 0.0, 1.0, 0.0, 0.0, 0.0])

    after = point_segment(_p(2.0, 3.0), _p(0.0, 0.0), _p(2.0, 0.0), names=("s", "e"))
    assert after.projection == pytest.approx(1.0)
    assert after.feature == endpoint("e")
    assert after.distance == pytest.approx(3.0)
    assert np.allclose(after.gradient, [0.0, 1.0, 0.0, 0.0, 0.0, -1.0])


def test_point_segment_interior_branch_3d():
    result = point_segment(_p(1.0, 1.0, 1.0), _p(0.0, 0.0, 0.0), _p(2.0, 0.0, 0.0))

    unit = np.array([0.0, 1.0, 1.0]) / math.sqrt(2.0)
    assert result.distance == pytest.approx(math.sqrt(2.0))
    assert result.feature.kind is FeatureKind.EDGE_INTERIOR
    assert np.allclose(result.gradient[:3], unit)
    assert np.allclose(result.gradient[3:6], -0.5 * unit)
    assert np.allclose(result.gradient[6:], -0.5 * unit)


def test_point_on_segment_has_no_gradient():
    result = point_segment(_p(1.0, 0.0), _p(0.0, 0.0), _p(2.0, 0.0))

    assert result.distance == pytest.approx(0.0)
    assert result.gradient is None


def test_degenerate_segment_is_rejected():
    with pytest.raises(DegenerateGeometry):
        point_segment(_p(1.0, 1.0), _p(0.0, 0.0), _p(0.0, 0.0))


def test_triangle_interior_above_and_below_face():
    a, b, c = _p(0, 0, 0), _p(1, 0, 0), _p(0, 1, 0)

    above = triangle_interior(_p(0.25, 0.25, 2.0), a, b, c)
    assert above is not None
    assert above.distance == pytest.approx(2.0)
    assert np.allclose(above.gradient, [0.0, 0.0, 1.0])
    assert sum(above.barycentric) == pytest.approx(1.0)

    below = triangle_interior(_p(0.2, 0.2, -0.5), a, b, c)
    assert below is not None
    assert below.signed_distance == pytest.approx(-0.5)
    assert np.allclose(below.gradient, [0.0, 0.0, -1.0])


def test_triangle_interior_outside_projection_is_none():
    a, b, c = _p(0, 0, 0), _p(1, 0, 0), _p(0, 1, 0)
    assert triangle_interior(_p(2.0, 2.0, 1.0), a, b, c) is None


def test_require_triangle_rejects_collinear_vertices():
    with pytest.raises(DegenerateGeometry):
        require_triangle(_p(0, 0), _p(1, 1), _p(2, 2))
    with pytest.raises(DegenerateGeometry):
        require_triangle(_p(0, 0, 0), _p(1, 0, 0), _p(2, 0, 0))
    assert require_triangle(_p(0, 0), _p(1, 0), _p(0, 1)) == pytest.approx(1.0)
