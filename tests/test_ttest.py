import math
import warnings

import numpy as np
import pytest
from scipy import stats

from bayespost.errors import DomainError
from bayespost.stats.ttest import compute_tstat, sample_variance


def test_identical_samples_give_zero():
    x = [1.0, 2.0, 3.0, 4.0]
    assert compute_tstat(x, x) == 0.0


def test_known_value():
    # means 2 and 5, both variances 1, so sp = 1
    t = compute_tstat([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert math.isclose(t, -3.0 / math.sqrt(2.0 / 3.0))


def test_antisymmetric():
    x1 = [1.0, 2.5, 3.1]
    x2 = [0.2, 0.9, 1.4, 2.2]
    assert compute_tstat(x1, x2) == -compute_tstat(x2, x1)


def test_matches_scipy_pooled_ttest():
    rng = np.random.default_rng(7)
    x1 = rng.normal(0.0, 1.0, size=12)
    x2 = rng.normal(0.5, 2.0, size=8)
    expected = stats.ttest_ind(x1, x2, equal_var=True).statistic
    assert math.isclose(compute_tstat(x1, x2), expected, rel_tol=1e-12)


def test_returns_python_float_for_vectors():
    assert isinstance(compute_tstat([1.0, 2.0], [3.0, 5.0]), float)


def test_rows_are_independent_trials():
    rng = np.random.default_rng(3)
    x1 = rng.standard_normal((4, 5))
    x2 = rng.standard_normal((4, 3))
    batch = compute_tstat(x1, x2)
    assert batch.shape == (4,)
    for i in range(4):
        assert math.isclose(batch[i], compute_tstat(x1[i], x2[i]))


def test_inputs_are_not_modified():
    x1 = np.array([3.0, 1.0, 2.0])
    x2 = np.array([5.0, 4.0])
    compute_tstat(x1, x2)
    np.testing.assert_array_equal(x1, [3.0, 1.0, 2.0])
    np.testing.assert_array_equal(x2, [5.0, 4.0])


def test_single_element_sample_is_not_finite():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        t = compute_tstat([1.0], [1.0, 2.0])
    assert not math.isfinite(t)


def test_zero_degrees_of_freedom_is_not_finite():
    assert not math.isfinite(compute_tstat([1.0], [2.0]))


def test_constant_samples_with_different_means_are_infinite():
    t = compute_tstat([1.0, 1.0], [2.0, 2.0])
    assert math.isinf(t) and t < 0


def test_strict_rejects_degenerate_degrees_of_freedom():
    with pytest.raises(DomainError, match="degenerate degrees of freedom"):
        compute_tstat([1.0], [1.0, 2.0], strict=True)


def test_strict_rejects_zero_pooled_variance():
    with pytest.raises(DomainError, match="non-positive pooled variance"):
        compute_tstat([1.0, 1.0], [2.0, 2.0], strict=True)


def test_domain_error_is_a_value_error():
    with pytest.raises(ValueError):
        compute_tstat([3.0, 3.0], [3.0, 3.0], strict=True)


def test_empty_sample_raises():
    with pytest.raises(ValueError, match="at least one observation"):
        compute_tstat([], [1.0, 2.0])


def test_sample_variance_uses_n_minus_one():
    assert math.isclose(sample_variance(np.array([1.0, 2.0, 3.0, 4.0])), 5.0 / 3.0)
