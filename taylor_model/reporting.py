"""
Reporting and Comparison Module

Descriptive statistics, kernel density estimates and formatted output for
baseline vs. stressed inflation distributions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy import stats

from .exceptions import EmptyDistributionError
from .simulation import ResultDistribution

if TYPE_CHECKING:
    from .analysis import ScenarioAnalysisResult

logger = logging.getLogger(__name__)

DistributionLike = Union[ResultDistribution, Sequence[float], np.ndarray]


def _as_array(results: DistributionLike) -> np.ndarray:
    if isinstance(results, ResultDistribution):
        return results.values
    return np.asarray(results, dtype=float)


@dataclass(frozen=True)
class SummaryStatistics:
    """Min, quartiles, median and mean, in the usual five-number-summary order."""
    minimum: float
    first_quartile: float
    median: float
    mean: float
    third_quartile: float
    maximum: float
    std: float
    count: int

    def to_dict(self) -> dict:
        return {
            "Min": self.minimum,
            "1st Qu.": self.first_quartile,
            "Median": self.median,
            "Mean": self.mean,
            "3rd Qu.": self.third_quartile,
            "Max": self.maximum,
        }


@dataclass(frozen=True)
class DensityEstimate:
    """Kernel density evaluated on a grid."""
    grid: np.ndarray
    density: np.ndarray

    @property
    def mode(self) -> float:
        return float(self.grid[np.argmax(self.density)])


def summarize(results: DistributionLike) -> SummaryStatistics:
    """
    Summary statistics of a distribution.

    Quartiles use the same type-7 linear interpolation as tail VaR so the
    tables agree with the risk report.
    """
    values = _as_array(results)
    if values.size == 0:
        raise EmptyDistributionError("Cannot summarize an empty distribution")

    q1, median, q3 = np.quantile(values, [0.25, 0.5, 0.75])
    return SummaryStatistics(
        minimum=float(np.min(values)),
        first_quartile=float(q1),
        median=float(median),
        mean=float(np.mean(values)),
        third_quartile=float(q3),
        maximum=float(np.max(values)),
        std=float(np.std(values, ddof=1)) if values.size > 1 else 0.0,
        count=int(values.size),
    )


def density_grid(*distributions: DistributionLike, n_points: int = 512,
                 pad_fraction: float = 0.1) -> np.ndarray:
    """Evaluation grid spanning all distributions with a small margin."""
    arrays = [_as_array(d) for d in distributions]
    lo = min(float(np.min(a)) for a in arrays)
    hi = max(float(np.max(a)) for a in arrays)
    pad = (hi - lo) * pad_fraction or 1.0
    return np.linspace(lo - pad, hi + pad, n_points)


def density_estimate(results: DistributionLike,
                     grid: Optional[np.ndarray] = None,
                     n_points: int = 512) -> Optional[DensityEstimate]:
    """
    Gaussian kernel density estimate with Silverman's bandwidth.

    Returns None for distributions with zero spread, where a KDE is undefined.
    """
    values = _as_array(results)
    if values.size < 2 or np.ptp(values) == 0:
        logger.warning("Distribution has no spread; skipping kernel density estimate")
        return None

    if grid is None:
        grid = density_grid(values, n_points=n_points)

    kde = stats.gaussian_kde(values, bw_method="silverman")
    return DensityEstimate(grid=grid, density=kde(grid))


@dataclass(frozen=True, eq=False)
class ScenarioComparison:
    """Side-by-side statistics for the baseline and stressed distributions."""
    baseline: SummaryStatistics
    stressed: SummaryStatistics
    baseline_density: Optional[DensityEstimate]
    stressed_density: Optional[DensityEstimate]

    @property
    def mean_shift(self) -> float:
        """Stressed mean minus baseline mean."""
        return self.stressed.mean - self.baseline.mean

    @property
    def spread_ratio(self) -> Optional[float]:
        if self.baseline.std == 0:
            return None
        return self.stressed.std / self.baseline.std

    def to_dataframe(self) -> pd.DataFrame:
        """Summary table with one column per scenario."""
        return pd.DataFrame({
            "Baseline": self.baseline.to_dict(),
            "Stressed": self.stressed.to_dict(),
        })


def compare_scenarios(baseline: DistributionLike,
                      stressed: DistributionLike,
                      n_points: int = 512) -> ScenarioComparison:
    """Summaries and densities on a shared grid for both scenarios."""
    grid = density_grid(baseline, stressed, n_points=n_points)
    return ScenarioComparison(
        baseline=summarize(baseline),
        stressed=summarize(stressed),
        baseline_density=density_estimate(baseline, grid),
        stressed_density=density_estimate(stressed, grid),
    )


def _fmt_optional(value: Optional[float], width: int = 10) -> str:
    if value is None:
        return f"{'n/a':>{width}}"
    return f"{value:>{width}.3f}"


class ScenarioReport:
    """
    Text and chart output for a completed scenario analysis.
    """

    def __init__(self, result: ScenarioAnalysisResult):
        self.result = result

    def generate_text_report(self) -> str:
        """Generate a detailed text report."""
        res = self.result
        comparison = res.comparison
        lines = []

        lines.append("=" * 60)
        lines.append("TAYLOR RULE IMPLIED INFLATION: SCENARIO RISK REPORT")
        lines.append("=" * 60)
        lines.append("")

        lines.append("SIMULATION SETTINGS")
        lines.append("-" * 40)
        lines.append(f"Iterations:        {res.settings.iterations:>10,}")
        lines.append(f"Seed:              {res.settings.seed:>10}")
        lines.append(f"r*:                {res.settings.constants.r_star:>10.2f}")
        lines.append(f"pi*:               {res.settings.constants.pi_star:>10.2f}")
        lines.append(f"Historical panel:  {res.panel_size:>10} quarters")
        lines.append("")

        lines.append("SUMMARY STATISTICS (implied inflation, %)")
        lines.append("-" * 40)
        lines.append(f"{'':>10} {'Baseline':>12} {'Stressed':>12}")
        base = comparison.baseline.to_dict()
        stressed = comparison.stressed.to_dict()
        for label in base:
            lines.append(f"{label:>10} {base[label]:>12.3f} {stressed[label]:>12.3f}")
        lines.append(f"{'Mean shift':>10} {comparison.mean_shift:>25.3f}")
        lines.append("")

        level = res.settings.confidence_level
        lines.append(f"TAIL RISK ({(1 - level) * 100:.0f}% two-sided)")
        lines.append("-" * 60)
        lines.append(f"{'Scenario':>10} {'Lower VaR':>10} {'Lower CVaR':>10} "
                     f"{'Upper VaR':>10} {'Upper CVaR':>10}")
        for name, report in (("Baseline", res.baseline_risk), ("Stressed", res.stressed_risk)):
            lines.append(
                f"{name:>10} {report.lower_var:>10.3f} {_fmt_optional(report.lower_cvar)} "
                f"{report.upper_var:>10.3f} {_fmt_optional(report.upper_cvar)}"
            )
        lines.append("")

        lines.append("NOTES")
        lines.append("-" * 40)
        lines.append("- Stressed scenario halves the mean and doubles the sd of log real GDP")
        lines.append("- Missing CVaR: no draw lies strictly beyond the VaR")
        lines.append("")

        return "\n".join(lines)

    def plot_distributions(self,
                           save_path: Optional[str] = None,
                           show: bool = True,
                           bins: int = 60) -> plt.Figure:
        """
        Histogram and kernel density of both scenarios with VaR markers.
        """
        res = self.result
        fig, ax = plt.subplots(figsize=(10, 6))

        for dist, density, risk, color, label in (
            (res.baseline, res.comparison.baseline_density, res.baseline_risk, "tab:blue", "Baseline"),
            (res.stressed, res.comparison.stressed_density, res.stressed_risk, "tab:red", "Stressed"),
        ):
            ax.hist(dist.values, bins=bins, density=True, alpha=0.3, color=color,
                    label=f"{label} draws")
            if density is not None:
                ax.plot(density.grid, density.density, color=color, linewidth=2,
                        label=f"{label} density")
            ax.axvline(risk.lower_var, color=color, linestyle="--", linewidth=1)
            ax.axvline(risk.upper_var, color=color, linestyle="--", linewidth=1)

        ax.set_xlabel("Implied inflation (%)")
        ax.set_ylabel("Density")
        ax.set_title("Implied Inflation: Baseline vs Stressed")
        ax.legend(loc="best")
        ax.grid(True, alpha=0.3)
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches="tight")
            logger.info(f"Saved distribution chart to {save_path}")
        if show:
            plt.show()

        return fig
