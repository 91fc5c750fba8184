import numpy as np
import pandas as pd
import pytest

from bayespost.data_processing import as_dataset, as_theta, check_finite, is_binary
from bayespost.errors import DomainError
from bayespost.schema import TransplantColumns, WeibullColumns


def test_one_dimensional_theta_is_a_single_draw():
    arr, single = as_theta([0.1, 0.2, 0.3], n_params=3)
    assert single
    assert arr.shape == (1, 3)


def test_theta_with_three_dimensions_raises():
    with pytest.raises(ValueError, match="1-D or 2-D"):
        as_theta(np.zeros((2, 2, 2)))


def test_empty_theta_raises():
    with pytest.raises(ValueError, match="at least one parameter draw"):
        as_theta(np.zeros((0, 3)), n_params=3)


def test_unnamed_dataframe_is_read_positionally():
    df = pd.DataFrame({"a": [1.0, 2.0], "b": [0, 1], "c": [0.0, 5.0], "d": [1, 0]})
    arr = as_dataset(df, TransplantColumns().ordered())
    np.testing.assert_array_equal(arr, df.to_numpy(dtype=float))


def test_named_covariates_keep_their_order():
    df = pd.DataFrame(
        {"x2": [3.0], "status": [1], "x1": [4.0], "time": [2.0]}
    )
    arr = as_dataset(df, WeibullColumns().ordered(), min_columns=3)
    np.testing.assert_array_equal(arr, [[2.0, 1.0, 3.0, 4.0]])


def test_non_numeric_cells_become_nan():
    df = pd.DataFrame({"time": ["1.5", "n/a"], "status": [1, 0], "x": [0.0, 1.0]})
    arr = as_dataset(df, WeibullColumns().ordered())
    assert arr[0, 0] == 1.5
    assert np.isnan(arr[1, 0])


def test_one_dimensional_dataset_raises():
    with pytest.raises(ValueError, match="two-dimensional"):
        as_dataset([1.0, 2.0, 3.0], WeibullColumns().ordered())


def test_is_binary():
    assert is_binary([0, 1, 1, 0])
    assert not is_binary([0, 1, 2])
    assert not is_binary([0.5])


def test_check_finite_only_raises_in_strict_mode():
    values = np.array([1.0, np.inf])
    check_finite(values, strict=False, label="x")
    with pytest.raises(DomainError, match="1 parameter draw"):
        check_finite(values, strict=True, label="x")
