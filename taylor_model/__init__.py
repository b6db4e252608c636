"""
Taylor Rule Implied-Inflation Risk Model

Monte Carlo scenario analysis of the inflation rate implied by an inverted
Taylor rule, with quantile VaR/CVaR for baseline and stressed assumptions.
"""

from .exceptions import (
    TaylorModelError,
    PanelFormatError,
    InsufficientDataError,
    InvalidIterationCountError,
    InvalidConfidenceLevelError,
    EmptyDistributionError,
)
from .panel import HistoricalPanel
from .taylor_rule import TaylorRuleConstants, calculate_inflation, calculate_policy_rate
from .moments import ScenarioKind, ScenarioMoments, estimate_moments, stress_moments
from .sampler import ScenarioSampler, SimulationDraw
from .simulation import MonteCarloSimulator, ResultDistribution, run
from .risk import TailRiskReport, analyze
from .reporting import (
    SummaryStatistics,
    DensityEstimate,
    ScenarioComparison,
    ScenarioReport,
    summarize,
    density_estimate,
    compare_scenarios,
)
from .config import SimulationSettings
from .analysis import ScenarioAnalysis, ScenarioAnalysisResult

__version__ = "1.0.0"
__all__ = [
    "TaylorModelError",
    "PanelFormatError",
    "InsufficientDataError",
    "InvalidIterationCountError",
    "InvalidConfidenceLevelError",
    "EmptyDistributionError",
    "HistoricalPanel",
    "TaylorRuleConstants",
    "calculate_inflation",
    "calculate_policy_rate",
    "ScenarioKind",
    "ScenarioMoments",
    "estimate_moments",
    "stress_moments",
    "ScenarioSampler",
    "SimulationDraw",
    "MonteCarloSimulator",
    "ResultDistribution",
    "run",
    "TailRiskReport",
    "analyze",
    "SummaryStatistics",
    "DensityEstimate",
    "ScenarioComparison",
    "ScenarioReport",
    "summarize",
    "density_estimate",
    "compare_scenarios",
    "SimulationSettings",
    "ScenarioAnalysis",
    "ScenarioAnalysisResult",
]
