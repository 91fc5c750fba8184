"""
Coerces parameter draws and datasets into the arrays the posteriors expect.
"""

# Parameter matrices are N x K with one draw per row. Datasets may arrive as
# bare arrays (columns taken positionally) or as DataFrames, which are
# reordered by the names in ``bayespost.schema`` when those names are present.

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import DomainError


def as_sample(x, name="sample"):
    """Return a float array for a sample, rejecting empty input.

    Args:
        x: Observations (any array-like). Values are copied, never modified
            in place.
        name: Label used in error messages.

    Returns:
        numpy.ndarray: Float array with at least one dimension.
    """
    arr = np.array(x, dtype=float, ndmin=1)
    if arr.shape[-1] == 0:
        raise ValueError(f"{name} must contain at least one observation.")
    return arr


def as_theta(theta, n_params=None) -> Tuple[np.ndarray, bool]:
    """Return parameter draws as an N x K matrix.

    A 1-D ``theta`` is treated as a single draw.

    Args:
        theta: Array-like of shape ``(N, K)`` or ``(K,)``.
        n_params: Required number of columns ``K``; ``None`` skips the check.

    Returns:
        tuple[numpy.ndarray, bool]: The 2-D matrix and a flag telling whether
        the input was a single 1-D draw.

    Raises:
        ValueError: If ``theta`` has more than two dimensions, no rows, or the
            wrong number of columns.
    """
    arr = np.asarray(theta, dtype=float)
    single = arr.ndim == 1
    if single:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ValueError(f"theta must be 1-D or 2-D, got {arr.ndim} dimensions.")
    if arr.shape[0] == 0:
        raise ValueError("theta must contain at least one parameter draw.")
    if n_params is not None and arr.shape[1] != n_params:
        raise ValueError(
            f"theta must have {n_params} columns, got {arr.shape[1]}."
        )
    return arr, single


def as_dataset(data, columns: Sequence[str], min_columns=None) -> np.ndarray:
    """Return a dataset as a 2-D float array in contract column order.

    Args:
        data: 2-D array-like, or a :class:`pandas.DataFrame`. When every name
            in ``columns`` is present in the DataFrame those columns are moved
            to the front in that order and any remaining columns keep their
            relative order; otherwise the DataFrame is read positionally.
        columns: Leading column names from :mod:`bayespost.schema`.
        min_columns: Minimum number of columns; defaults to ``len(columns)``.

    Returns:
        numpy.ndarray: Float array of shape ``(n_records, n_columns)``.

    Raises:
        ValueError: If the data is not two-dimensional or has too few columns.
    """
    if isinstance(data, pd.DataFrame):
        if all(col in data.columns for col in columns):
            rest = [col for col in data.columns if col not in columns]
            data = data[list(columns) + rest]
        arr = data.apply(pd.to_numeric, errors="coerce").to_numpy(dtype=float)
    else:
        arr = np.asarray(data, dtype=float)

    if arr.ndim != 2:
        raise ValueError(f"Dataset must be two-dimensional, got {arr.ndim} dimensions.")

    required = len(columns) if min_columns is None else int(min_columns)
    if arr.shape[1] < required:
        raise ValueError(
            f"Dataset must have at least {required} columns, got {arr.shape[1]}."
        )
    return arr


def is_binary(values: np.ndarray) -> bool:
    """Return ``True`` when every entry is exactly 0 or 1."""
    values = np.asarray(values, dtype=float)
    return bool(np.all((values == 0.0) | (values == 1.0)))


def finish(values: np.ndarray, single: bool):
    """Return a scalar for single-draw input, the array otherwise."""
    if single:
        return float(values[0])
    return values


def check_finite(values: np.ndarray, strict: bool, label: str) -> None:
    """Raise :class:`DomainError` in strict mode when any value is non-finite."""
    if strict and not np.all(np.isfinite(values)):
        bad = int(np.count_nonzero(~np.isfinite(values)))
        raise DomainError(f"{label} is not finite for {bad} parameter draw(s)")
