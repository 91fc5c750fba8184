"""
Frequentist sampling utilities used alongside the posterior models.

Modules:
    ttest:
        Two-sample pooled-variance t-statistic, vectorized over trials.

    simulation:
        Monte Carlo estimate of the true significance level of the
        two-sample t-test, with named population scenarios for robustness
        studies and a tabulation helper returning a DataFrame.

Design Principle:
    This subpackage has no dependencies on models/. Randomness is always
    drawn from a generator passed in by the caller.
"""

from .simulation import (
    POPULATIONS,
    critical_value,
    estimate_significance,
    significance_table,
    simulate_rejections,
)
from .ttest import compute_tstat, sample_variance

__all__ = [
    "compute_tstat",
    "sample_variance",
    "POPULATIONS",
    "critical_value",
    "estimate_significance",
    "significance_table",
    "simulate_rejections",
]
