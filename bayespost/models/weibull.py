"""Log-posterior of a Weibull proportional-hazards regression model.

On the log-time scale the Weibull model is a location-scale model with an
extreme-value (Gumbel minimum) error:

    log t_i = mu + x_i' beta + sigma * eps_i

With the standardized residual ``z_i = (log t_i - mu - x_i' beta) / sigma``
the density and survival function of the error are

    f_i = (1 / sigma) exp(z_i - exp(z_i)),   S_i = exp(-exp(z_i))

Observed failures contribute ``log f_i`` and right-censored records
contribute ``log S_i``. Both are evaluated in closed form on the log scale
(``log f_i = -log sigma + z_i - exp(z_i)``, ``log S_i = -exp(z_i)``), which
avoids the underflow of exponentiating and taking the log again.
"""

from __future__ import annotations

import numpy as np

from ..data_processing import as_dataset, as_theta, check_finite, finish, is_binary
from ..errors import DomainError
from ..schema import WeibullColumns


def weibull_reg_post(theta, data, strict: bool = False):
    """Unnormalized log-posterior of the Weibull regression model.

    Args:
        theta: Parameter draws of shape ``(N, p + 2)`` with columns
            ``log sigma``, ``mu`` and ``beta_1 .. beta_p``; a single 1-D draw
            is also accepted.
        data: Dataset of shape ``(n, p + 2)`` with columns time, status and
            ``p`` covariates, as an array or a DataFrame whose leading columns
            are named by :class:`bayespost.schema.WeibullColumns`.
        strict (bool, optional): Raise :class:`DomainError` for non-positive
            times, non-binary status values or non-finite results. Defaults to
            ``False``.

    Returns:
        numpy.ndarray | float: One log-posterior value per draw; a float for
        a 1-D ``theta``.

    Raises:
        ValueError: If ``data`` has fewer than three columns or the number of
            columns of ``theta`` does not match ``data``.

    Note:
        ``status == 1`` selects the density term and ``status == 0`` the
        survival term, the literal mapping of
        ``status * log f + (1 - status) * log S``. Callers whose data codes
        censoring as ``1`` must recode it first.

        ``log f`` and ``log S`` are evaluated in closed form, so large
        residuals (roughly ``z > 6.5``) give a finite value where computing
        ``f`` and ``S`` first and then taking logs would underflow to
        ``-inf`` (and ``0 * -inf`` to NaN).
    """
    data_arr = as_dataset(data, WeibullColumns().ordered(), min_columns=3)
    theta_arr, single = as_theta(theta, n_params=data_arr.shape[1])

    time = data_arr[:, 0]
    status = data_arr[:, 1]
    covariates = data_arr[:, 2:]

    if strict:
        if np.any(~(time > 0)):
            raise DomainError("survival times must be positive")
        if not is_binary(status):
            raise DomainError("status must be 0 (censored) or 1 (failure)")

    log_sigma = theta_arr[:, [0]]
    sigma = np.exp(log_sigma)
    mu = theta_arr[:, [1]]
    beta = theta_arr[:, 2:]

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        linear_predictor = beta @ covariates.T
        z = (np.log(time) - mu - linear_predictor) / sigma
        log_surv = -np.exp(z)
        log_dens = -log_sigma + z + log_surv
        val = np.select(
            [status == 1, status == 0],
            [log_dens, log_surv],
            default=status * log_dens + (1.0 - status) * log_surv,
        ).sum(axis=1)

    check_finite(val, strict, "Weibull log-posterior")
    return finish(val, single)
