"""
Pytest fixtures for Taylor rule scenario analysis tests.
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from taylor_model.panel import HistoricalPanel
from taylor_model.moments import ScenarioKind, estimate_moments
from taylor_model.taylor_rule import TaylorRuleConstants


# =============================================================================
# PANEL FIXTURES
# =============================================================================

@pytest.fixture
def panel_frame():
    """Deterministic 12-year quarterly panel (2012Q1-2023Q4)."""
    t = np.arange(48)
    return pd.DataFrame({
        "date": pd.date_range("2012-01-01", periods=48, freq="QS"),
        "nominal_rate": 1.0 + 2.0 * np.sin(t / 6.0) + 0.05 * t,
        "real_gdp": 17_000.0 * 1.006 ** t * (1 + 0.01 * np.cos(t / 3.0)),
        "potential_gdp": 17_100.0 * 1.0058 ** t,
    })


@pytest.fixture
def historical_panel(panel_frame):
    """Historical panel built from the fixture frame."""
    return HistoricalPanel.from_dataframe(panel_frame)


@pytest.fixture
def flat_panel():
    """Two identical quarters: every standard deviation is zero."""
    return HistoricalPanel.from_records([
        {"date": "2020-01-01", "nominal_rate": 3.0, "real_gdp": 100.0, "potential_gdp": 100.0},
        {"date": "2020-04-01", "nominal_rate": 3.0, "real_gdp": 100.0, "potential_gdp": 100.0},
    ])


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def constants():
    """Standard Taylor rule constants (r* = 2%, pi* = 2%)."""
    return TaylorRuleConstants(r_star=2.0, pi_star=2.0)


@pytest.fixture
def baseline_moments(historical_panel):
    return estimate_moments(historical_panel, ScenarioKind.BASELINE)


@pytest.fixture
def stressed_moments(historical_panel):
    return estimate_moments(historical_panel, ScenarioKind.STRESSED)
