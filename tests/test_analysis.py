"""
Tests for the end-to-end scenario analysis.
"""

import numpy as np
import pytest

from taylor_model.analysis import ScenarioAnalysis, ScenarioAnalysisResult
from taylor_model.config import SimulationSettings
from taylor_model.moments import ScenarioKind
from taylor_model.simulation import run


@pytest.fixture
def settings():
    return SimulationSettings(iterations=2_000, seed=2, confidence_level=0.05)


@pytest.fixture
def result(historical_panel, settings):
    return ScenarioAnalysis(historical_panel, settings).run()


class TestSettings:

    def test_defaults(self):
        s = SimulationSettings()
        assert s.iterations == 10_000
        assert s.seed == 2
        assert s.confidence_level == 0.05
        assert s.constants.r_star == 2.0
        assert s.constants.pi_star == 2.0


class TestScenarioAnalysis:

    def test_result_structure(self, result, settings, historical_panel):
        assert isinstance(result, ScenarioAnalysisResult)
        assert result.panel_size == len(historical_panel)
        assert len(result.baseline) == settings.iterations
        assert len(result.stressed) == settings.iterations
        assert result.baseline.scenario == "baseline"
        assert result.stressed.scenario == "stressed"

    def test_stressed_moments(self, result):
        assert result.stressed_moments.log_real_gdp_sd == result.baseline_moments.log_real_gdp_sd * 2
        assert result.stressed_moments.log_real_gdp_mean == result.baseline_moments.log_real_gdp_mean * 0.5

    def test_matches_direct_runs(self, result, settings, baseline_moments, stressed_moments):
        """Each scenario reseeds, so both equal standalone runs with the same seed."""
        base = run(settings.iterations, settings.constants, baseline_moments, settings.seed)
        stressed = run(settings.iterations, settings.constants, stressed_moments, settings.seed)
        assert np.array_equal(result.baseline.values, base.values)
        assert np.array_equal(result.stressed.values, stressed.values)

    def test_scenario_order_independent(self, historical_panel, settings, result):
        analysis = ScenarioAnalysis(historical_panel, settings)
        _, stressed_first, _ = analysis.run_scenario(ScenarioKind.STRESSED)
        _, baseline_second, _ = analysis.run_scenario(ScenarioKind.BASELINE)
        assert np.array_equal(stressed_first.values, result.stressed.values)
        assert np.array_equal(baseline_second.values, result.baseline.values)

    def test_stressed_raises_implied_inflation(self, result):
        assert result.comparison.mean_shift > 0
        assert result.stressed_risk.upper_var > result.baseline_risk.upper_var

    def test_risk_consistent(self, result):
        for risk in (result.baseline_risk, result.stressed_risk):
            assert risk.confidence_level == 0.05
            assert risk.lower_cvar <= risk.lower_var <= risk.upper_var <= risk.upper_cvar

    def test_tables(self, result):
        risk = result.risk_table()
        assert list(risk.index) == ["baseline", "stressed"]
        assert risk.loc["baseline", "lower_var"] == pytest.approx(result.baseline_risk.lower_var)

        moments = result.moments_table()
        assert moments.loc["stressed", "log_real_gdp_sd"] == pytest.approx(
            2 * moments.loc["baseline", "log_real_gdp_sd"]
        )

    def test_format_summary(self, historical_panel, settings, result):
        text = ScenarioAnalysis(historical_panel, settings).format_summary(result)
        assert "Scenario Risk Summary" in text
        assert "Lower CVaR" in text
        assert "Mean shift" in text


class TestDegenerateAnalysis:

    def test_flat_panel(self, flat_panel):
        result = ScenarioAnalysis(flat_panel, SimulationSettings(iterations=100)).run()

        assert np.all(result.baseline.values == result.baseline.values[0])
        assert result.baseline_risk.lower_cvar is None
        assert result.baseline_risk.upper_cvar is None
        assert result.comparison.baseline_density is None
        assert np.isnan(result.risk_table().loc["baseline", "lower_cvar"])

        text = ScenarioAnalysis(flat_panel).format_summary(result)
        assert "Lower CVaR" not in text
