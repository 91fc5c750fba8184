"""Two-sample pooled-variance t-statistic.

The statistic is evaluated along the last axis so that a batch of simulated
trials, stored one trial per row, is handled in a single call.
"""

from __future__ import annotations

import math

import numpy as np

from ..data_processing import as_sample
from ..errors import DomainError


def sample_variance(x: np.ndarray) -> np.ndarray:
    """Unbiased (``n - 1`` denominator) variance along the last axis.

    A single observation gives ``0 / 0``, i.e. NaN, matching the undefined
    sample variance instead of raising or warning.
    """
    n = x.shape[-1]
    dev = x - x.mean(axis=-1, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.sum(dev**2, axis=-1) / np.float64(n - 1)


def compute_tstat(x1, x2, strict: bool = False):
    r"""Compute the two-sample t-statistic with a pooled standard deviation.

    .. math::

        s_p = \sqrt{\frac{(a-1)s_1^2 + (b-1)s_2^2}{a+b-2}}, \qquad
        t = \frac{\bar{x}_1 - \bar{x}_2}{s_p\sqrt{1/a + 1/b}}

    Args:
        x1: First sample, length ``a``. A 2-D array holds one sample per row.
        x2: Second sample, length ``b``. Leading dimensions must broadcast
            against those of ``x1``.
        strict (bool, optional): Raise :class:`DomainError` instead of
            returning a non-finite statistic. Defaults to ``False``.

    Returns:
        float | numpy.ndarray: The statistic; a Python float when both inputs
        are 1-D, otherwise one value per row.

    Raises:
        ValueError: If either sample is empty.
        DomainError: In strict mode, if the degrees of freedom are degenerate
            (a sample with fewer than two values) or the pooled variance is
            not positive.

    Note:
        Without ``strict`` degenerate samples yield NaN or ``±inf`` (for
        example a single-element sample, or two constant samples with
        different means) and no warning is emitted.
    """
    x1_arr = as_sample(x1, "x1")
    x2_arr = as_sample(x2, "x2")
    a = x1_arr.shape[-1]
    b = x2_arr.shape[-1]

    if strict and (a < 2 or b < 2):
        raise DomainError(
            f"degenerate degrees of freedom: each sample needs at least two "
            f"values, got a={a}, b={b}"
        )

    var1 = sample_variance(x1_arr)
    var2 = sample_variance(x2_arr)
    with np.errstate(divide="ignore", invalid="ignore"):
        pooled = ((a - 1) * var1 + (b - 1) * var2) / np.float64(a + b - 2)
        sp = np.sqrt(pooled)
        t = (x1_arr.mean(axis=-1) - x2_arr.mean(axis=-1)) / (
            sp * math.sqrt(1.0 / a + 1.0 / b)
        )

    if strict:
        if np.any(~(pooled > 0)):
            raise DomainError("non-positive pooled variance")
        if not np.all(np.isfinite(t)):
            raise DomainError("t-statistic is not finite")

    if np.ndim(t) == 0:
        return float(t)
    return t
