"""Log-posterior of the Cauchy location-scale error model."""

from __future__ import annotations

import numpy as np
from scipy.stats import cauchy

from ..data_processing import as_sample, as_theta, check_finite, finish


def cauchy_error_post(theta, y, strict: bool = False):
    """Unnormalized log-posterior for Cauchy errors with location and log-scale.

    Each observation contributes ``log(t_1((y - mu) / sigma) / sigma)``,
    where ``t_1`` is the Student-t density with one degree of freedom (the
    standard Cauchy density) and ``sigma = exp(lambda)``. The prior is flat on
    ``(mu, log sigma)`` so no prior term is added.

    Args:
        theta: Parameter draws of shape ``(N, 2)`` with columns ``mu`` and
            ``lambda = log sigma``; a single 1-D draw is also accepted.
        y: Observations (1-D).
        strict (bool, optional): Raise :class:`DomainError` for non-finite
            results. Defaults to ``False``.

    Returns:
        numpy.ndarray | float: One log-posterior value per draw; a float for
        a 1-D ``theta``.
    """
    theta_arr, single = as_theta(theta, n_params=2)
    y_arr = as_sample(y, "y").ravel()

    mu = theta_arr[:, [0]]
    log_sigma = theta_arr[:, [1]]
    sigma = np.exp(log_sigma)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        z = (y_arr - mu) / sigma
        val = np.sum(cauchy.logpdf(z) - log_sigma, axis=1)

    check_finite(val, strict, "Cauchy log-posterior")
    return finish(val, single)
