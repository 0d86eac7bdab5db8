import math

import numpy as np
import pytest

from geoderiv.errors import InvalidInput
from geoderiv.vector import as_point, cross, dot, norm, norm_sq, rotate90, scale, sub


def test_cross_is_scalar_in_2d_and_vector_in_3d():
    assert cross(np.array([1.0, 0.0]), np.array([0.0, 1.0])) == pytest.approx(1.0)
    assert cross(np.array([0.0, 1.0]), np.array([1.0, 0.0])) == pytest.approx(-1.0)

    result = cross(np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]))
    assert np.allclose(result, [0.0, 0.0, 1.0])


def test_basic_operations():
    a = np.array([3.0, 4.0])
    b = np.array([1.0, 1.0])
    assert np.allclose(sub(a, b), [2.0, 3.0])
    assert dot(a, b) == pytest.approx(7.0)
    assert norm_sq(a) == pytest.approx(25.0)
    assert norm(a) == pytest.approx(5.0)
    assert np.allclose(scale(a, 0.5), [1.5, 2.0])
    assert dot(rotate90(a), a) == pytest.approx(0.0)
    assert norm(np.array([1.0, 1.0, 1.0])) == pytest.approx(math.sqrt(3.0))


def test_as_point_rejects_other_dimensions():
    assert as_point([1, 2]).dtype == float
    with pytest.raises(InvalidInput):
        as_point([1.0, 2.0, 3.0, 4.0])
    with pytest.raises(InvalidInput):
        cross(np.zeros(4), np.zeros(4))
