"""Tests for simple and discounted payback periods."""

import math

import pytest

from roi_engine.engine.payback import (
    calculate_discounted_payback,
    calculate_payback_period,
)


class TestPaybackPeriod:
    def test_basic_calculation(self):
        # $100K / ($50K / 12) = 24 months
        assert calculate_payback_period(100_000, 50_000 / 12) == pytest.approx(24.0)

    @pytest.mark.parametrize("monthly", [0, -50])
    def test_never_pays_back(self, monthly):
        assert calculate_payback_period(1000, monthly) == math.inf

    def test_no_investment_pays_back_immediately(self):
        assert calculate_payback_period(0, 100) == 0.0


class TestDiscountedPayback:
    def test_zero_rate_matches_simple_payback(self):
        flows = [-1200] + [100] * 24
        assert calculate_discounted_payback(flows, 0) == pytest.approx(12.0)

    def test_interpolates_crossing_period(self):
        # Cumulative: -150, -50, +50 -> crosses halfway through period 2
        assert calculate_discounted_payback([-150, 100, 100], 0) == pytest.approx(1.5)

    def test_discounting_delays_payback(self):
        flows = [-1200] + [100] * 36
        assert calculate_discounted_payback(flows, 12) > 12.0

    def test_never_pays_back_within_horizon(self):
        flows = [-1000] + [10] * 12
        assert calculate_discounted_payback(flows, 10) == math.inf

    def test_no_investment_is_zero(self):
        assert calculate_discounted_payback([0, 10, 10], 10) == 0.0

    def test_positive_first_flow_is_zero(self):
        assert calculate_discounted_payback([500, 10], 10) == 0.0

    def test_empty_flows_never_pay_back(self):
        assert calculate_discounted_payback([], 10) == math.inf

    def test_reference_project_between_two_and_three_years(self):
        flows = [-100_000] + [50_000 / 12] * 36
        months = calculate_discounted_payback(flows, 10)
        assert 24 < months < 36


class TestLongSeriesPayback:
    def test_vanishing_discount_factors_never_pay_back(self):
        # 1000% a year: monthly factors underflow to 0 long before the end
        assert calculate_discounted_payback([-1e9] + [1] * 1300, 1000) == math.inf
