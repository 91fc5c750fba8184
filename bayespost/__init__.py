"""
A Python package of statistical functions for teaching Bayesian computation.

Provides the two-sample t-statistic, a Monte Carlo study of the t-test's true
significance level, and log-posterior densities to be explored with external
Laplace and Metropolis samplers.

Modules:
    - stats: t-statistic and significance simulation.
    - models: heart-transplant, Cauchy and Weibull regression log-posteriors.
    - data_processing: Coerces parameter draws and datasets to arrays.
    - schema: Column names for datasets and result tables.
    - errors: Strict-mode exception.
"""

__version__ = "1.0.0"

from .errors import DomainError
from .models import cauchy_error_post, transplant_post, weibull_reg_post
from .schema import SimulationColumns, TransplantColumns, WeibullColumns
from .stats import (
    POPULATIONS,
    compute_tstat,
    estimate_significance,
    significance_table,
    simulate_rejections,
)

__all__ = [
    # Statistics
    "compute_tstat",
    "estimate_significance",
    "simulate_rejections",
    "significance_table",
    "POPULATIONS",
    # Posteriors
    "transplant_post",
    "cauchy_error_post",
    "weibull_reg_post",
    # Schema and errors
    "TransplantColumns",
    "WeibullColumns",
    "SimulationColumns",
    "DomainError",
]
