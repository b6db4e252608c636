"""
Historical Moment Estimator

Derives the normal-distribution parameters used by the scenario sampler from
a historical panel. Baseline and stressed scenarios share the policy rate and
potential GDP moments; they differ only in the log real GDP moments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from .exceptions import InsufficientDataError
from .panel import HistoricalPanel

logger = logging.getLogger(__name__)

MIN_OBSERVATIONS = 2

# Fixed stress policy applied to log real GDP: halve the mean, double the spread.
# This is a scenario convention, not an estimated shock.
STRESS_MEAN_FACTOR = 0.5
STRESS_SD_FACTOR = 2.0


class ScenarioKind(Enum):
    """Scenario whose moments drive a simulation run."""
    BASELINE = "baseline"
    STRESSED = "stressed"


@dataclass(frozen=True)
class ScenarioMoments:
    """Means and standard deviations of the three sampled variables."""
    rate_mean: float
    rate_sd: float
    log_real_gdp_mean: float
    log_real_gdp_sd: float
    log_potential_gdp_mean: float
    log_potential_gdp_sd: float
    kind: ScenarioKind = ScenarioKind.BASELINE

    def __post_init__(self):
        for name in ("rate_sd", "log_real_gdp_sd", "log_potential_gdp_sd"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def to_dict(self) -> dict:
        return {
            "rate_mean": self.rate_mean,
            "rate_sd": self.rate_sd,
            "log_real_gdp_mean": self.log_real_gdp_mean,
            "log_real_gdp_sd": self.log_real_gdp_sd,
            "log_potential_gdp_mean": self.log_potential_gdp_mean,
            "log_potential_gdp_sd": self.log_potential_gdp_sd,
        }


def _sample_moments(values: np.ndarray) -> tuple[float, float]:
    # Sample standard deviation (n - 1 denominator)
    return float(np.mean(values)), float(np.std(values, ddof=1))


def stress_moments(baseline: ScenarioMoments) -> ScenarioMoments:
    """Apply the fixed log real GDP stress transform to baseline moments."""
    return replace(
        baseline,
        log_real_gdp_mean=baseline.log_real_gdp_mean * STRESS_MEAN_FACTOR,
        log_real_gdp_sd=baseline.log_real_gdp_sd * STRESS_SD_FACTOR,
        kind=ScenarioKind.STRESSED,
    )


def estimate_moments(panel: HistoricalPanel,
                     kind: ScenarioKind | str = ScenarioKind.BASELINE) -> ScenarioMoments:
    """
    Estimate scenario moments from a historical panel.

    Args:
        panel: Aligned quarterly panel
        kind: ``baseline`` or ``stressed``

    Returns:
        ScenarioMoments for the requested scenario

    Raises:
        InsufficientDataError: If the panel has fewer than 2 records or any
            real/potential GDP value is not strictly positive
    """
    kind = ScenarioKind(kind)

    if len(panel) < MIN_OBSERVATIONS:
        raise InsufficientDataError(
            f"Need at least {MIN_OBSERVATIONS} observations to estimate moments, got {len(panel)}"
        )

    real_gdp = panel.real_gdp
    potential_gdp = panel.potential_gdp
    if np.any(real_gdp <= 0) or np.any(potential_gdp <= 0):
        raise InsufficientDataError("Real and potential GDP must be strictly positive to take logs")

    rate_mean, rate_sd = _sample_moments(panel.nominal_rate)
    real_mean, real_sd = _sample_moments(np.log(real_gdp))
    potential_mean, potential_sd = _sample_moments(np.log(potential_gdp))

    moments = ScenarioMoments(
        rate_mean=rate_mean,
        rate_sd=rate_sd,
        log_real_gdp_mean=real_mean,
        log_real_gdp_sd=real_sd,
        log_potential_gdp_mean=potential_mean,
        log_potential_gdp_sd=potential_sd,
    )
    if kind is ScenarioKind.STRESSED:
        moments = stress_moments(moments)

    logger.info(
        f"Estimated {kind.value} moments from {len(panel)} quarters: "
        f"rate {moments.rate_mean:.3f} ({moments.rate_sd:.3f}), "
        f"log real GDP {moments.log_real_gdp_mean:.4f} ({moments.log_real_gdp_sd:.4f})"
    )
    return moments
