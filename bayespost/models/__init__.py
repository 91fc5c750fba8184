"""
Unnormalized log-posterior densities for Bayesian teaching examples.

Every function takes a matrix of parameter draws (one draw per row) and a
dataset, and returns one log-posterior value per row. The signature
``(theta, data) -> ndarray`` is what mode finders and random-walk Metropolis
samplers expect of their objective.

Modules:
    transplant:
        Pareto survival model for the Stanford heart-transplant data, with a
        multiplicative transplant effect on the hazard.

    cauchy:
        Cauchy location-scale model, flat prior on (mu, log sigma).

    weibull:
        Weibull proportional-hazards regression with right censoring.

Design Principle:
    Numerical failures propagate as NaN or -inf without warnings. Pass
    ``strict=True`` to turn them into :class:`bayespost.errors.DomainError`.
"""

from .cauchy import cauchy_error_post
from .transplant import transplant_post
from .weibull import weibull_reg_post

__all__ = ["cauchy_error_post", "transplant_post", "weibull_reg_post"]
