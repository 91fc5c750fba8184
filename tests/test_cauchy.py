import math

import numpy as np
import pytest
from scipy import stats

from bayespost.errors import DomainError
from bayespost.models.cauchy import cauchy_error_post


def test_observation_at_location_with_unit_scale():
    val = cauchy_error_post(np.array([[3.0, 0.0]]), [3.0])
    assert val[0] == pytest.approx(math.log(1.0 / math.pi), abs=1e-14)


def test_matches_student_t_with_one_degree_of_freedom():
    y = np.array([-1.2, 0.4, 2.5, 7.0, 3.3])
    theta = np.array([[0.5, math.log(2.0)], [-1.0, -0.3], [4.0, 1.1]])
    for row, val in zip(theta, cauchy_error_post(theta, y)):
        mu, lam = row
        sigma = math.exp(lam)
        expected = np.sum(np.log(stats.t.pdf((y - mu) / sigma, df=1) / sigma))
        assert math.isclose(val, expected, rel_tol=1e-12)


def test_one_value_per_draw_and_rows_permute():
    rng = np.random.default_rng(4)
    theta = rng.normal(size=(30, 2))
    y = rng.standard_cauchy(20)
    out = cauchy_error_post(theta, y)
    assert out.shape == (30,)
    perm = rng.permutation(30)
    np.testing.assert_allclose(cauchy_error_post(theta[perm], y), out[perm])


def test_single_draw_returns_float():
    assert isinstance(cauchy_error_post([0.0, 0.0], [1.0, 2.0]), float)


def test_wrong_theta_columns_raise():
    with pytest.raises(ValueError, match="2 columns"):
        cauchy_error_post(np.zeros((3, 3)), [1.0])


def test_strict_rejects_non_finite_result():
    assert np.isnan(cauchy_error_post(np.array([[np.nan, 0.0]]), [1.0])[0])
    with pytest.raises(DomainError, match="not finite"):
        cauchy_error_post(np.array([[np.nan, 0.0]]), [1.0], strict=True)
