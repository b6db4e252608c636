"""
Scenario Analysis

Runs the full pipeline for both scenarios from a single historical panel:
moment estimation, Monte Carlo simulation, tail risk and comparison.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .config import SimulationSettings
from .moments import ScenarioKind, ScenarioMoments, estimate_moments
from .panel import HistoricalPanel
from .reporting import ScenarioComparison, compare_scenarios
from .risk import TailRiskReport, analyze
from .simulation import MonteCarloSimulator, ResultDistribution

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ScenarioAnalysisResult:
    """Outputs of a baseline vs. stressed analysis."""
    settings: SimulationSettings
    panel_size: int

    baseline_moments: ScenarioMoments
    stressed_moments: ScenarioMoments

    baseline: ResultDistribution
    stressed: ResultDistribution

    baseline_risk: TailRiskReport
    stressed_risk: TailRiskReport

    comparison: ScenarioComparison

    def risk_table(self) -> pd.DataFrame:
        """Tail risk for both scenarios as a DataFrame (CVaR NaN when undefined)."""
        return pd.DataFrame(
            [self.baseline_risk.to_dict(), self.stressed_risk.to_dict()],
            index=pd.Index(["baseline", "stressed"], name="scenario"),
        ).astype(float)

    def moments_table(self) -> pd.DataFrame:
        return pd.DataFrame(
            [self.baseline_moments.to_dict(), self.stressed_moments.to_dict()],
            index=pd.Index(["baseline", "stressed"], name="scenario"),
        )


class ScenarioAnalysis:
    """
    Baseline vs. stressed implied-inflation risk analysis.

    Example:
        >>> analysis = ScenarioAnalysis(panel)
        >>> result = analysis.run()
        >>> print(analysis.format_summary(result))
    """

    def __init__(self, panel: HistoricalPanel, settings: Optional[SimulationSettings] = None):
        self.panel = panel
        self.settings = settings or SimulationSettings()
        self.simulator = MonteCarloSimulator(self.settings.constants)

    def run_scenario(self, kind: ScenarioKind) -> tuple[ScenarioMoments, ResultDistribution, TailRiskReport]:
        """
        Estimate moments, simulate and analyze tail risk for one scenario.

        The simulator reseeds from ``settings.seed`` on every call, so the
        result does not depend on which scenario ran first.
        """
        moments = estimate_moments(self.panel, kind)
        distribution = self.simulator.run(self.settings.iterations, moments, self.settings.seed)
        risk = analyze(distribution, self.settings.confidence_level)
        return moments, distribution, risk

    def run(self) -> ScenarioAnalysisResult:
        logger.info(
            f"Running scenario analysis on {len(self.panel)} quarters "
            f"({self.settings.iterations:,} iterations, seed={self.settings.seed})"
        )
        base_moments, base_dist, base_risk = self.run_scenario(ScenarioKind.BASELINE)
        stress_moments, stress_dist, stress_risk = self.run_scenario(ScenarioKind.STRESSED)

        comparison = compare_scenarios(base_dist, stress_dist, n_points=self.settings.density_points)

        return ScenarioAnalysisResult(
            settings=self.settings,
            panel_size=len(self.panel),
            baseline_moments=base_moments,
            stressed_moments=stress_moments,
            baseline=base_dist,
            stressed=stress_dist,
            baseline_risk=base_risk,
            stressed_risk=stress_risk,
            comparison=comparison,
        )

    def format_summary(self, result: ScenarioAnalysisResult) -> str:
        """Format headline results as readable text."""
        lines = ["Scenario Risk Summary", "=" * 40]

        for name, dist, risk in (
            ("Baseline", result.baseline, result.baseline_risk),
            ("Stressed", result.stressed, result.stressed_risk),
        ):
            lines.append(f"\n{name} implied inflation:")
            lines.append(f"  Mean:        {dist.mean:8.3f}%")
            lines.append(f"  Std:         {dist.std:8.3f}%")
            lines.append(f"  Lower VaR:   {risk.lower_var:8.3f}%")
            lines.append(f"  Upper VaR:   {risk.upper_var:8.3f}%")
            if risk.lower_cvar is not None:
                lines.append(f"  Lower CVaR:  {risk.lower_cvar:8.3f}%")
            if risk.upper_cvar is not None:
                lines.append(f"  Upper CVaR:  {risk.upper_cvar:8.3f}%")

        lines.append(f"\nMean shift (stressed - baseline): {result.comparison.mean_shift:.3f}pp")
        return "\n".join(lines)
