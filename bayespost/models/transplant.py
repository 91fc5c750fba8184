"""Log-posterior of the Stanford heart-transplant survival model.

Model:
    Survival times of patients who did not receive a heart follow a Pareto
    (Lomax) distribution with density

        f(x) = p λ^p / (λ + x)^(p + 1)

    For a patient transplanted after waiting ``w`` days who then survived
    ``s`` days, the transplant multiplies the hazard by τ, which stretches the
    post-transplant clock:

        g(s | w) = p τ λ^p / (λ + w + τ s)^(p + 1)

    Censored patients (alive at the end of follow-up) contribute the survival
    function instead of the density.

Parametrization:
    ``theta = (log τ, log λ, log p)``. A flat prior on the log scale gives the
    log-Jacobian ``log τ + log λ + log p``, which is added to the
    log-likelihood.
"""

from __future__ import annotations

import numpy as np

from ..data_processing import as_dataset, as_theta, check_finite, finish, is_binary
from ..errors import DomainError
from ..schema import TransplantColumns


def _pareto_terms(clock, state, log_scale, p, lam):
    """Per-record log-likelihood, choosing density or survival by ``state``.

    ``log_scale`` is ``log p`` for untreated patients and ``log(p τ)`` for
    transplanted ones. Records with a finite state other than 0 or 1
    contribute 0; a missing (NaN) state makes the record NaN.
    """
    died = p * np.log(lam) + log_scale - (p + 1.0) * np.log(clock)
    censored = p * np.log(lam / clock)
    return np.select(
        [state == 0, state == 1],
        [died, censored],
        default=np.where(np.isnan(state), np.nan, 0.0),
    )


def transplant_post(theta, data, strict: bool = False):
    """Unnormalized log-posterior of the heart-transplant model.

    Args:
        theta: Parameter draws of shape ``(N, 3)`` with columns ``log τ``,
            ``log λ`` and ``log p``; a single 1-D draw is also accepted.
        data: Dataset with columns survival time, transplant indicator, time
            to transplant and censoring state (``0`` died, ``1`` censored),
            as an array or a DataFrame named by
            :class:`bayespost.schema.TransplantColumns`.
        strict (bool, optional): Raise :class:`DomainError` for non-binary
            indicators or non-finite results. Defaults to ``False``.

    Returns:
        numpy.ndarray | float: One log-posterior value per draw, in the order
        of the rows of ``theta``; a float for a 1-D ``theta``.

    Raises:
        ValueError: If ``theta`` does not have three columns or ``data`` has
            fewer than four.
    """
    theta_arr, single = as_theta(theta, n_params=3)
    data_arr = as_dataset(data, TransplantColumns().ordered())

    survtime = data_arr[:, 0]
    transplant = data_arr[:, 1]
    wait = data_arr[:, 2]
    state = data_arr[:, 3]

    if strict and not (is_binary(transplant) and is_binary(state)):
        raise DomainError("transplant and state indicators must be 0 or 1")

    tau = np.exp(theta_arr[:, [0]])
    lam = np.exp(theta_arr[:, [1]])
    p = np.exp(theta_arr[:, [2]])

    untreated = transplant == 0
    treated = transplant == 1

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        x = survtime[untreated]
        val = _pareto_terms(lam + x, state[untreated], np.log(p), p, lam).sum(axis=1)

        s = survtime[treated]
        w = wait[treated]
        val = val + _pareto_terms(
            lam + w + tau * s, state[treated], np.log(p * tau), p, lam
        ).sum(axis=1)

    val = val + theta_arr[:, 0] + theta_arr[:, 1] + theta_arr[:, 2]
    # A record with a missing transplant indicator belongs to neither group.
    if np.any(np.isnan(transplant)):
        val = np.full_like(val, np.nan)

    check_finite(val, strict, "transplant log-posterior")
    return finish(val, single)
