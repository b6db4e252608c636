"""
Monte Carlo Simulation

Runs repeated draws through the inverted Taylor rule to build a distribution
of implied inflation rates for one scenario.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
import pandas as pd

from .exceptions import InvalidIterationCountError
from .moments import ScenarioMoments
from .sampler import ScenarioSampler
from .taylor_rule import TaylorRuleConstants, calculate_inflation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ResultDistribution:
    """
    Simulated implied inflation rates, one per iteration, in draw order.

    The underlying array is read-only.
    """
    values: np.ndarray
    scenario: str = "baseline"
    seed: Optional[int] = None

    def __post_init__(self):
        values = np.array(self.values, dtype=float)
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values.tolist())

    def __getitem__(self, index):
        return self.values[index]

    @property
    def mean(self) -> float:
        return float(np.mean(self.values))

    @property
    def std(self) -> float:
        return float(np.std(self.values, ddof=1)) if len(self.values) > 1 else 0.0

    def to_series(self) -> pd.Series:
        """Convert to a pandas Series indexed by iteration (1-based)."""
        return pd.Series(
            self.values,
            index=pd.RangeIndex(1, len(self.values) + 1, name="iteration"),
            name=f"{self.scenario}_inflation",
        )


class MonteCarloSimulator:
    """
    Monte Carlo driver for the implied-inflation transform.

    Each call to ``run`` builds its own generator from the seed it is given,
    so separate scenario runs never share random state and can execute in
    any order.
    """

    def __init__(self, constants: Optional[TaylorRuleConstants] = None):
        self.constants = constants or TaylorRuleConstants()

    def run(self,
            iterations: int,
            moments: ScenarioMoments,
            seed: int,
            constants: Optional[TaylorRuleConstants] = None) -> ResultDistribution:
        """
        Simulate ``iterations`` implied inflation rates.

        Args:
            iterations: Number of draws (must be positive)
            moments: Scenario moments for the sampler
            seed: Seed for a fresh numpy Generator created at entry
            constants: Overrides the simulator's Taylor rule constants

        Returns:
            ResultDistribution of exactly ``iterations`` values

        Raises:
            InvalidIterationCountError: If iterations is not a positive integer
        """
        if (isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral)
                or iterations <= 0):
            raise InvalidIterationCountError(
                f"iterations must be a positive integer, got {iterations!r}"
            )

        constants = constants or self.constants
        rng = np.random.default_rng(seed)
        sampler = ScenarioSampler(moments, rng)

        results = np.zeros(iterations)
        for i in range(iterations):
            draw = sampler.draw()
            results[i] = calculate_inflation(
                draw.nominal_rate,
                constants.r_star,
                constants.pi_star,
                draw.log_real_gdp,
                draw.log_potential_gdp,
            )

        logger.info(
            f"Simulated {iterations:,} {moments.kind.value} draws (seed={seed}): "
            f"mean inflation {np.mean(results):.3f}"
        )
        return ResultDistribution(values=results, scenario=moments.kind.value, seed=seed)


def run(iterations: int,
        constants: TaylorRuleConstants,
        moments: ScenarioMoments,
        seed: int) -> ResultDistribution:
    """Run one Monte Carlo simulation with explicit constants and seed."""
    return MonteCarloSimulator(constants).run(iterations, moments, seed)
