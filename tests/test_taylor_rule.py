"""
Tests for the Taylor rule and its inversion.
"""

import numpy as np
import pytest

from taylor_model.taylor_rule import (
    TaylorRuleConstants,
    calculate_inflation,
    calculate_policy_rate,
)


class TestCalculateInflation:
    """Test the implied inflation formula."""

    def test_reference_value(self):
        """Zero output gap: (5 - 2 + 1 - 0) / 1.5."""
        result = calculate_inflation(5, 2, 2, 10, 10)
        assert result == pytest.approx((5 - 2 + 1 - 0) / 1.5)
        assert result == pytest.approx(2.6667, abs=1e-4)

    def test_output_gap_weight(self):
        """A one-unit positive output gap lowers implied inflation by 0.5 / 1.5."""
        closed = calculate_inflation(4.0, 2.0, 2.0, 10.0, 10.0)
        positive_gap = calculate_inflation(4.0, 2.0, 2.0, 11.0, 10.0)
        assert closed - positive_gap == pytest.approx(0.5 / 1.5)

    def test_rate_weight(self):
        """A one-point higher policy rate raises implied inflation by 1 / 1.5."""
        low = calculate_inflation(3.0, 2.0, 2.0, 9.8, 9.81)
        high = calculate_inflation(4.0, 2.0, 2.0, 9.8, 9.81)
        assert high - low == pytest.approx(1 / 1.5)

    def test_target_weight(self):
        base = calculate_inflation(4.0, 2.0, 2.0, 9.8, 9.8)
        higher_target = calculate_inflation(4.0, 2.0, 3.0, 9.8, 9.8)
        assert higher_target - base == pytest.approx(0.5 / 1.5)

    def test_only_gap_matters_for_gdp(self):
        """Shifting both GDP levels by the same amount leaves inflation unchanged."""
        a = calculate_inflation(5.0, 2.0, 2.0, 9.7, 9.75)
        b = calculate_inflation(5.0, 2.0, 2.0, 4.7, 4.75)
        assert a == pytest.approx(b)

    def test_vectorized(self):
        rates = np.array([1.0, 2.0, 3.0])
        result = calculate_inflation(rates, 2.0, 2.0, np.zeros(3), np.zeros(3))
        expected = (rates - 2.0 + 1.0) / 1.5
        assert np.allclose(result, expected)


class TestPolicyRate:
    """Test the forward Taylor rule."""

    def test_inverse_round_trip(self):
        i = 4.25
        pi = calculate_inflation(i, 1.5, 2.0, 9.81, 9.79)
        assert calculate_policy_rate(pi, 1.5, 2.0, 9.81, 9.79) == pytest.approx(i)

    def test_on_target(self):
        """At target inflation and zero gap the rule prescribes r* + pi*."""
        assert calculate_policy_rate(2.0, 2.0, 2.0, 10.0, 10.0) == pytest.approx(4.0)


class TestConstants:

    def test_defaults(self):
        c = TaylorRuleConstants()
        assert c.r_star == 2.0
        assert c.pi_star == 2.0

    def test_frozen(self):
        c = TaylorRuleConstants(r_star=1.0, pi_star=2.0)
        with pytest.raises(AttributeError):
            c.r_star = 3.0
