"""
Scenario Sampler

Draws one realization of (nominal rate, log real GDP, log potential GDP) per
call from independent normal distributions.

Draw order is part of the reproducibility contract: each call consumes
exactly three standard normals from the generator, in the order rate, log
real GDP, log potential GDP. Changing the order changes every seeded result.
"""

from dataclasses import dataclass

import numpy as np

from .moments import ScenarioMoments


@dataclass(frozen=True)
class SimulationDraw:
    """A single sampled state, consumed immediately by the Taylor rule inverter."""
    nominal_rate: float
    log_real_gdp: float
    log_potential_gdp: float


class ScenarioSampler:
    """
    Samples simulation draws under one scenario's moments.

    The generator is passed in explicitly; the sampler never seeds it.
    A standard deviation of zero yields the mean every time.
    """

    def __init__(self, moments: ScenarioMoments, rng: np.random.Generator):
        self.moments = moments
        self.rng = rng

    def draw(self) -> SimulationDraw:
        m = self.moments
        nominal_rate = self.rng.normal(m.rate_mean, m.rate_sd)
        log_real_gdp = self.rng.normal(m.log_real_gdp_mean, m.log_real_gdp_sd)
        log_potential_gdp = self.rng.normal(m.log_potential_gdp_mean, m.log_potential_gdp_sd)
        return SimulationDraw(
            nominal_rate=float(nominal_rate),
            log_real_gdp=float(log_real_gdp),
            log_potential_gdp=float(log_potential_gdp),
        )
