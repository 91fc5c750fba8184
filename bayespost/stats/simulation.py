"""Monte Carlo estimate of the true significance level of the two-sample t-test.

Each trial draws two samples from populations with equal means, so every
rejection is a false rejection and the rejection rate estimates the realized
Type-I error rate. With both populations normal the estimate should match the
nominal ``alpha``; the other named populations show how the test behaves when
its normality or equal-spread assumptions are violated.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Callable, Dict, Iterable, Mapping, Tuple, Union

import numpy as np
import pandas as pd
from scipy.stats import t as student_t

from ..schema import SimulationColumns
from .ttest import compute_tstat

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 0.05
DEFAULT_N_SIMS = 10_000
DEFAULT_BATCH_SIZE = 10_000

Sampler = Callable[[np.random.Generator, Tuple[int, int]], np.ndarray]
PopulationSpec = Union[str, Tuple[Sampler, Sampler]]


def _standard_normal(rng, shape):
    return rng.standard_normal(shape)


def _normal(loc, scale) -> Sampler:
    def draw(rng, shape):
        return rng.normal(loc, scale, size=shape)

    return draw


def _student(df) -> Sampler:
    def draw(rng, shape):
        return rng.standard_t(df, size=shape)

    return draw


def _exponential(mean) -> Sampler:
    def draw(rng, shape):
        return rng.exponential(mean, size=shape)

    return draw


# All pairs share a common population mean.
POPULATIONS: Dict[str, Tuple[Sampler, Sampler]] = {
    "normal": (_standard_normal, _standard_normal),
    "normal_unequal_spread": (_normal(0.0, 1.0), _normal(0.0, 10.0)),
    "t4": (_student(4), _student(4)),
    "exponential": (_exponential(1.0), _exponential(1.0)),
    "normal_vs_exponential": (_normal(10.0, 2.0), _exponential(10.0)),
}


def resolve_population(population: PopulationSpec) -> Tuple[Sampler, Sampler]:
    """Return the ``(x1, x2)`` sampler pair for a name or a custom pair.

    Raises:
        KeyError: If a population name is not registered.
        TypeError: If a custom population is not a pair of callables.
    """
    if isinstance(population, str):
        try:
            return POPULATIONS[population]
        except KeyError:
            raise KeyError(
                f"Unknown population '{population}'. "
                f"Available: {', '.join(sorted(POPULATIONS))}"
            ) from None
    if (
        not isinstance(population, (tuple, list))
        or len(population) != 2
        or not all(callable(s) for s in population)
    ):
        raise TypeError(
            "population must be a registered name or a pair of callables "
            "(rng, shape) -> ndarray"
        )
    return population[0], population[1]


def critical_value(alpha: float, dof: int) -> float:
    """Two-sided Student-t critical value ``t*`` with ``P(T <= t*) = 1 - alpha/2``."""
    return float(student_t.ppf(1.0 - alpha / 2.0, dof))


def _check_design(a, b, alpha, n_sims, batch_size, stacklevel):
    """Validate the arguments and warn when too few rejections are expected.

    ``stacklevel`` is counted from this helper, so public callers pass 3.
    """
    for label, n in (("a", a), ("b", b)):
        if not isinstance(n, (int, np.integer)):
            raise TypeError(f"sample size {label} must be an integer, got {type(n)}")
        if n < 2:
            raise ValueError(f"sample size {label} must be at least 2, got {n}")
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")
    if int(n_sims) < 1:
        raise ValueError(f"n_sims must be a positive integer, got {n_sims}")
    if int(batch_size) < 1:
        raise ValueError(f"batch_size must be a positive integer, got {batch_size}")
    if int(n_sims) * alpha < 10:
        warnings.warn(
            f"n_sims={int(n_sims)} gives fewer than 10 expected rejections at "
            f"alpha={alpha}; the estimate will be very noisy.",
            UserWarning,
            stacklevel=stacklevel,
        )


def _count_rejections(a, b, alpha, n_sims, rng, population, batch_size):
    n_sims = int(n_sims)
    batch_size = int(batch_size)
    draw_x1, draw_x2 = resolve_population(population)
    gen = np.random.default_rng(rng)

    dof = int(a) + int(b) - 2
    tcrit = critical_value(alpha, dof)
    logger.debug("Critical value t*=%.6f for alpha=%s, dof=%d", tcrit, alpha, dof)

    rejections = 0
    remaining = n_sims
    while remaining > 0:
        size = min(batch_size, remaining)
        x1 = draw_x1(gen, (size, int(a)))
        x2 = draw_x2(gen, (size, int(b)))
        tstat = compute_tstat(x1, x2)
        rejections += int(np.count_nonzero(np.abs(tstat) > tcrit))
        remaining -= size

    logger.debug(
        "Simulated %d trials (a=%d, b=%d): %d rejections", n_sims, a, b, rejections
    )
    return rejections


def simulate_rejections(
    a: int,
    b: int,
    alpha: float = DEFAULT_ALPHA,
    n_sims: int = DEFAULT_N_SIMS,
    rng=None,
    population: PopulationSpec = "normal",
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> int:
    """Count false rejections of the two-sided t-test over simulated trials.

    Args:
        a (int): Size of the first sample (at least 2).
        b (int): Size of the second sample (at least 2).
        alpha (float, optional): Nominal significance level in ``(0, 1)``.
        n_sims (int, optional): Number of simulated trials.
        rng (numpy.random.Generator | int | None, optional): Random generator
            or seed. ``None`` draws fresh OS entropy.
        population (str | tuple, optional): Registered name from
            :data:`POPULATIONS` or a pair of samplers ``(rng, shape) ->
            ndarray`` for ``x1`` and ``x2``.
        batch_size (int, optional): Trials drawn per vectorized batch; only
            affects memory use and speed.

    Returns:
        int: Number of trials with ``|t| > t*``.

    Raises:
        TypeError: If a sample size is not an integer or ``population`` is
            malformed.
        ValueError: If a sample size is below 2, ``alpha`` is outside
            ``(0, 1)``, or ``n_sims``/``batch_size`` is not positive.
        KeyError: If ``population`` names an unknown population.
    """
    _check_design(a, b, alpha, n_sims, batch_size, stacklevel=3)
    return _count_rejections(a, b, alpha, n_sims, rng, population, batch_size)


def estimate_significance(
    a: int,
    b: int,
    alpha: float = DEFAULT_ALPHA,
    n_sims: int = DEFAULT_N_SIMS,
    rng=None,
    population: PopulationSpec = "normal",
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> float:
    """Estimate the true significance level of the two-sample t-test.

    Draws ``n_sims`` pairs of samples under a true null hypothesis, applies
    the two-sided test at level ``alpha`` on ``a + b - 2`` degrees of freedom
    and returns the proportion of rejections. Its sampling error is of order
    ``sqrt(alpha * (1 - alpha) / n_sims)``.

    See :func:`simulate_rejections` for the arguments and raised errors.

    Returns:
        float: Rejection proportion in ``[0, 1]``.
    """
    _check_design(a, b, alpha, n_sims, batch_size, stacklevel=3)
    rejections = _count_rejections(a, b, alpha, n_sims, rng, population, batch_size)
    return rejections / int(n_sims)


def significance_table(
    designs: Iterable[Tuple[int, int]],
    alpha: float = DEFAULT_ALPHA,
    n_sims: int = DEFAULT_N_SIMS,
    populations: Union[Iterable[str], Mapping[str, PopulationSpec]] = ("normal",),
    rng=None,
) -> pd.DataFrame:
    """Tabulate estimated significance levels over designs and populations.

    Args:
        designs: ``(a, b)`` sample-size pairs.
        alpha (float, optional): Nominal significance level.
        n_sims (int, optional): Trials per table cell.
        populations: Registered population names, or a mapping from a row
            label to a population name or sampler pair.
        rng (numpy.random.Generator | int | None, optional): A single
            generator is shared by every cell so the whole table is
            reproducible from one seed.

    Returns:
        pandas.DataFrame: One row per population and design, with columns
        named by :class:`bayespost.schema.SimulationColumns`.
    """
    cols = SimulationColumns()
    gen = np.random.default_rng(rng)
    if isinstance(populations, Mapping):
        items = list(populations.items())
    else:
        items = [(name, name) for name in populations]
    designs = list(designs)

    records = []
    for label, spec in items:
        for a, b in designs:
            rate = estimate_significance(
                a, b, alpha=alpha, n_sims=n_sims, rng=gen, population=spec
            )
            se = math.sqrt(rate * (1.0 - rate) / int(n_sims))
            logger.info(
                "%s a=%d b=%d: true significance %.4f (SE %.4f)", label, a, b, rate, se
            )
            records.append(
                {
                    cols.population: label,
                    cols.a: int(a),
                    cols.b: int(b),
                    cols.alpha: float(alpha),
                    cols.n_sims: int(n_sims),
                    cols.rate: rate,
                    cols.se: se,
                }
            )

    return pd.DataFrame.from_records(
        records,
        columns=[
            cols.population,
            cols.a,
            cols.b,
            cols.alpha,
            cols.n_sims,
            cols.rate,
            cols.se,
        ],
    )
