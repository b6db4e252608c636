"""
Tail Risk Analysis

Two-sided quantile Value-at-Risk and Conditional VaR on a simulated
distribution. ``confidence_level`` is the total tail probability, split
evenly between both tails: 0.05 gives the 2.5th and 97.5th percentiles.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from .exceptions import EmptyDistributionError, InvalidConfidenceLevelError
from .simulation import ResultDistribution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TailRiskReport:
    """
    Quantile VaR and tail means for both tails.

    A CVaR is None when no value lies strictly beyond its VaR, which happens
    for degenerate distributions or small samples at extreme levels.
    """
    confidence_level: float
    lower_var: float
    upper_var: float
    lower_cvar: Optional[float]
    upper_cvar: Optional[float]

    @property
    def lower_probability(self) -> float:
        return self.confidence_level / 2

    @property
    def upper_probability(self) -> float:
        return 1 - self.confidence_level / 2

    def to_dict(self) -> dict:
        return {
            "confidence_level": self.confidence_level,
            "lower_var": self.lower_var,
            "upper_var": self.upper_var,
            "lower_cvar": self.lower_cvar,
            "upper_cvar": self.upper_cvar,
        }


def _tail_mean(tail: np.ndarray) -> Optional[float]:
    if tail.size == 0:
        return None
    return float(np.mean(tail))


def analyze(results: Union[ResultDistribution, Sequence[float], np.ndarray],
            confidence_level: float = 0.05) -> TailRiskReport:
    """
    Compute lower/upper VaR and CVaR.

    VaR uses linear-interpolation empirical quantiles (Hyndman-Fan type 7).
    CVaR is the mean of values strictly below the lower VaR, or strictly
    above the upper VaR.

    Raises:
        InvalidConfidenceLevelError: If confidence_level is not in (0, 1)
        EmptyDistributionError: If results is empty
    """
    if (isinstance(confidence_level, bool) or not isinstance(confidence_level, numbers.Real)
            or not 0 < confidence_level < 1):
        raise InvalidConfidenceLevelError(
            f"confidence_level must lie strictly between 0 and 1, got {confidence_level!r}"
        )

    if isinstance(results, ResultDistribution):
        values = results.values
    else:
        values = np.asarray(results, dtype=float)
    if values.size == 0:
        raise EmptyDistributionError("Cannot analyze tail risk of an empty distribution")

    lower_q = confidence_level / 2
    upper_q = 1 - confidence_level / 2
    lower_var, upper_var = np.quantile(values, [lower_q, upper_q])

    lower_cvar = _tail_mean(values[values < lower_var])
    upper_cvar = _tail_mean(values[values > upper_var])

    if lower_cvar is None or upper_cvar is None:
        logger.warning(
            f"Empty tail beyond VaR at confidence level {confidence_level} "
            f"({values.size} values); CVaR undefined"
        )

    return TailRiskReport(
        confidence_level=float(confidence_level),
        lower_var=float(lower_var),
        upper_var=float(upper_var),
        lower_cvar=lower_cvar,
        upper_cvar=upper_cvar,
    )
