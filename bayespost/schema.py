"""Define standardized column names for datasets and result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TransplantColumns:
    """Column labels of the heart-transplant survival dataset.

    The order of the fields is the positional contract used when the dataset
    is passed as a bare array.

    Attributes:
        survtime: Recorded survival time (days). For transplanted patients
            this is the time survived after the transplant.
        transplant: Transplant indicator, ``1`` when the patient received a
            heart, ``0`` otherwise.
        wait: Time from acceptance into the study to the transplant (days).
            Ignored for non-transplanted patients.
        state: Censoring indicator, ``0`` when the patient died, ``1`` when
            the patient was alive at the end of follow-up.
    """

    survtime: str = "survtime"
    transplant: str = "transplant"
    wait: str = "wait"
    state: str = "state"

    def ordered(self) -> Tuple[str, ...]:
        return (self.survtime, self.transplant, self.wait, self.state)


@dataclass(frozen=True)
class WeibullColumns:
    """Leading column labels of a Weibull regression dataset.

    Covariate columns follow ``status`` in the order of the regression
    coefficients and are not named here.

    Attributes:
        time: Failure or censoring time; must be positive.
        status: ``1`` for an observed failure, ``0`` for a right-censored
            record.
    """

    time: str = "time"
    status: str = "status"

    def ordered(self) -> Tuple[str, ...]:
        return (self.time, self.status)


@dataclass(frozen=True)
class SimulationColumns:
    """Column labels of the significance robustness table."""

    population: str = "Population"
    a: str = "n1"
    b: str = "n2"
    alpha: str = "Nominal alpha"
    n_sims: str = "Simulations"
    rate: str = "True significance level"
    se: str = "Monte Carlo SE"
