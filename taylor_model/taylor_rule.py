"""
Taylor Rule

Standard Taylor (1993) rule with weight 1.5 on inflation and 0.5 on the
output gap measured in log points:

    i = r* + 1.5 * pi - 0.5 * pi* + 0.5 * (y - y*)

Solving for pi gives the implied inflation rate consistent with an observed
policy rate, which is what the Monte Carlo simulation transforms each draw
through.
"""

from dataclasses import dataclass

INFLATION_WEIGHT = 1.5
TARGET_WEIGHT = 0.5
OUTPUT_GAP_WEIGHT = 0.5


@dataclass(frozen=True)
class TaylorRuleConstants:
    """Exogenous constants held fixed across every iteration of a run."""
    r_star: float = 2.0   # Real equilibrium rate (percent)
    pi_star: float = 2.0  # Inflation target (percent)


def calculate_inflation(nominal_rate, r_star, pi_star, log_real_gdp, log_potential_gdp):
    """
    Implied inflation rate from the inverted Taylor rule.

    Works element-wise when given numpy arrays.

    Example:
        >>> round(calculate_inflation(5, 2, 2, 10, 10), 4)
        2.6667
    """
    return (
        nominal_rate
        - r_star
        + TARGET_WEIGHT * pi_star
        - OUTPUT_GAP_WEIGHT * (log_real_gdp - log_potential_gdp)
    ) / INFLATION_WEIGHT


def calculate_policy_rate(inflation, r_star, pi_star, log_real_gdp, log_potential_gdp):
    """Nominal policy rate prescribed by the forward Taylor rule."""
    return (
        r_star
        + INFLATION_WEIGHT * inflation
        - TARGET_WEIGHT * pi_star
        + OUTPUT_GAP_WEIGHT * (log_real_gdp - log_potential_gdp)
    )
