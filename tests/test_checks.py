import math

import numpy as np
import pytest

from geoderiv.cards import CARDS, get_card, point_segment_2d
from geoderiv.checks import (
    CheckFailure,
    Tolerance,
    assert_close,
    check_card,
    estimate_directional_derivative,
    estimate_gradient,
    estimate_hessian,
    run_checks,
)

_SEEDS = {
    "point-segment-distance-2d": 11,
    "point-triangle-distance-2d": 29,
    "point-triangle-distance-3d": 73,
    "segment-segment-distance-2d": 47,
}


@pytest.mark.parametrize("name", sorted(CARDS))
def test_analytic_gradient_matches_central_differences(name):
    result = check_card(get_card(name), seed=_SEEDS[name], count=12)

    assert result.passed, result.failures
    assert result.max_error < 1e-5


def test_estimate_gradient_of_quadratic():
    estimate = estimate_gradient(lambda v: float(v[0] ** 2 + 3.0 * v[1]), [2.0, -1.0])
    assert np.allclose(estimate, [4.0, 3.0], atol=1e-6)


def test_estimate_hessian_and_directional_derivative():
    def grad(v):
        return np.array([2.0 * v[0] + v[1], v[0]])

    hessian = estimate_hessian(grad, [1.0, 2.0])
    assert np.allclose(hessian, [[2.0, 1.0], [1.0, 0.0]], atol=1e-6)

    directional = estimate_directional_derivative(grad, [1.0, 2.0], [1.0, 0.0])
    assert np.allclose(directional, [2.0, 1.0], atol=1e-5)


def test_assert_close_uses_absolute_and_relative_tolerance():
    assert_close(1.0 + 1.5e-6, 1.0)
    assert_close([1000.0 + 5e-4], [1000.0])
    with pytest.raises(CheckFailure):
        assert_close(1.0 + 1e-5, 1.0)
    with pytest.raises(CheckFailure):
        assert_close([1.0, 2.0], [1.0])
    assert_close(1.0 + 1e-5, 1.0, Tolerance(absolute=1e-4, relative=0.0))


def test_check_card_reports_mismatches(monkeypatch):
    card = get_card("point-segment-distance-2d")
    broken = type(card)(
        name=card.name,
        input_size=card.input_size,
        value=card.value,
        grad=lambda x: 2.0 * point_segment_2d.grad(x),
        hess=card.hess,
        hvp=card.hvp,
        domain=card.domain,
    )

    result = check_card(broken, seed=1, count=3)
    assert not result.passed
    assert len(result.failures) == 3
    assert result.max_error > 0.1


def test_run_checks_selects_cards_by_name():
    results = run_checks(["point-segment-distance-2d"], seed=5, count=3)
    assert [result.card for result in results] == ["point-segment-distance-2d"]
    assert results[0].passed
    with pytest.raises(KeyError):
        run_checks(["no-such-card"], count=1)


def test_unit_distance_reference():
    assert point_segment_2d.value([0.0, 1.0, -1.0, 0.0, 1.0, 0.0]) == pytest.approx(1.0)
    assert point_segment_2d.value([3.0, 4.0, -1.0, 0.0, 0.0, 0.0]) == pytest.approx(math.hypot(3.0, 4.0))
