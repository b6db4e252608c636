"""
Default settings for scenario simulations.
"""

from dataclasses import dataclass, field

from .taylor_rule import TaylorRuleConstants


@dataclass
class SimulationSettings:
    """
    Parameters shared by the baseline and stressed runs.
    """
    iterations: int = 10_000
    seed: int = 2
    # Total two-sided tail probability (0.05 -> 2.5th / 97.5th percentiles)
    confidence_level: float = 0.05
    constants: TaylorRuleConstants = field(default_factory=TaylorRuleConstants)

    # Reporting
    density_points: int = 512
