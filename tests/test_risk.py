"""Tests for the weighted-average risk adjustment model."""

import itertools

import pytest

from roi_engine.engine.risk import (
    DEFAULT_RISK_WEIGHTS,
    RiskInputs,
    RiskWeights,
    calculate_risk_adjustment,
    risk_level_for,
)
from roi_engine.models.enums import RiskLevel


class TestFixedPoints:
    @pytest.mark.parametrize(
        "score,expected_multiplier,expected_rate",
        [(20, 0.90, 14.0), (50, 0.75, 20.0), (80, 0.60, 26.0)],
    )
    def test_uniform_risk_multiplier(
        self, uniform_risk, score, expected_multiplier, expected_rate
    ):
        result = calculate_risk_adjustment(uniform_risk(score))
        assert result.risk_multiplier == pytest.approx(expected_multiplier, abs=1e-3)
        assert result.risk_adjusted_discount_rate == pytest.approx(expected_rate, abs=1e-3)

    def test_mixed_realistic_profile(self):
        # 30*0.30 + 40*0.25 + 25*0.25 + 35*0.20 = 32.25
        result = calculate_risk_adjustment(
            RiskInputs(
                implementation_risk=30,
                adoption_risk=40,
                technical_risk=25,
                market_risk=35,
            )
        )
        assert result.average_risk == pytest.approx(32.5)
        assert result.weighted_average_risk == pytest.approx(32.25)
        assert result.risk_multiplier == pytest.approx(0.83875)
        assert result.risk_adjusted_discount_rate == pytest.approx(16.45)
        assert result.risk_level == RiskLevel.MODERATE

    def test_zero_risk_is_no_haircut(self, uniform_risk):
        result = calculate_risk_adjustment(uniform_risk(0))
        assert result.risk_multiplier == 1.0
        assert result.risk_adjusted_discount_rate == 10.0
        assert result.confidence_interval.lower == 1.0
        assert result.confidence_interval.upper == 1.0


class TestWeights:
    def test_default_weights_sum_to_one(self):
        assert DEFAULT_RISK_WEIGHTS.total() == pytest.approx(1.0)

    def test_weighted_average_uses_weights(self):
        # Only implementation risk is non-zero: 100 * 0.30
        result = calculate_risk_adjustment(
            RiskInputs(
                implementation_risk=100,
                adoption_risk=0,
                technical_risk=0,
                market_risk=0,
            )
        )
        assert result.average_risk == pytest.approx(25.0)
        assert result.weighted_average_risk == pytest.approx(30.0)
        assert result.risk_multiplier == pytest.approx(0.85)

    def test_custom_weights_are_not_renormalized(self):
        """Weights summing to 2.0 double the weighted risk rather than being rescaled."""
        weights = RiskWeights(implementation=0.5, adoption=0.5, technical=0.5, market=0.5)
        assert weights.total() == pytest.approx(2.0)

        result = calculate_risk_adjustment(
            RiskInputs(
                implementation_risk=50,
                adoption_risk=50,
                technical_risk=50,
                market_risk=50,
                weights=weights,
            )
        )
        assert result.weighted_average_risk == pytest.approx(100.0)
        assert result.risk_multiplier == pytest.approx(0.5)

    def test_base_discount_rate_is_caller_supplied(self, uniform_risk):
        result = calculate_risk_adjustment(uniform_risk(50, base_discount_rate=8))
        assert result.risk_adjusted_discount_rate == pytest.approx(18.0)


class TestBoundsAndScenarios:
    def test_multiplier_stays_between_half_and_one(self):
        grid = [0, 25, 50, 75, 100]
        for scores in itertools.product(grid, repeat=4):
            result = calculate_risk_adjustment(RiskInputs(*scores))
            assert 0.5 <= result.risk_multiplier <= 1.0

    def test_scenarios_are_ordered(self):
        grid = [0, 10, 35, 60, 90, 100]
        for scores in itertools.product(grid, repeat=4):
            scenarios = calculate_risk_adjustment(RiskInputs(*scores)).scenario_analysis
            assert scenarios.pessimistic <= scenarios.baseline <= scenarios.optimistic
            assert scenarios.optimistic <= 1.0

    def test_scenario_values_at_medium_risk(self, uniform_risk):
        scenarios = calculate_risk_adjustment(uniform_risk(50)).scenario_analysis
        assert scenarios.pessimistic == pytest.approx(0.525)
        assert scenarios.baseline == pytest.approx(0.75)
        assert scenarios.optimistic == pytest.approx(0.975)

    def test_optimistic_clamped_at_one(self, uniform_risk):
        scenarios = calculate_risk_adjustment(uniform_risk(10)).scenario_analysis
        # 0.95 * 1.3 would be 1.235
        assert scenarios.optimistic == 1.0

    def test_confidence_interval_at_medium_risk(self, uniform_risk):
        # spread = 0.5 * 0.4 = 0.2
        interval = calculate_risk_adjustment(uniform_risk(50)).confidence_interval
        assert interval.lower == pytest.approx(0.6)
        assert interval.upper == pytest.approx(0.9)

    def test_confidence_interval_upper_clamped(self, uniform_risk):
        interval = calculate_risk_adjustment(uniform_risk(20)).confidence_interval
        assert interval.upper <= 1.0
        assert interval.lower < 0.9

    def test_out_of_range_scores_do_not_raise(self, uniform_risk):
        result = calculate_risk_adjustment(uniform_risk(150))
        assert result.risk_multiplier == pytest.approx(0.25)
        assert result.risk_level == RiskLevel.HIGH


class TestRiskLevel:
    @pytest.mark.parametrize(
        "weighted,expected",
        [
            (0, RiskLevel.LOW),
            (25, RiskLevel.LOW),
            (25.01, RiskLevel.MODERATE),
            (45, RiskLevel.MODERATE),
            (45.5, RiskLevel.ELEVATED),
            (65, RiskLevel.ELEVATED),
            (65.01, RiskLevel.HIGH),
            (100, RiskLevel.HIGH),
        ],
    )
    def test_thresholds(self, weighted, expected):
        assert risk_level_for(weighted) == expected


class TestDeterminism:
    def test_repeated_calls_are_identical(self):
        config = RiskInputs(
            implementation_risk=33.3,
            adoption_risk=47.1,
            technical_risk=12.9,
            market_risk=71.4,
        )
        assert calculate_risk_adjustment(config) == calculate_risk_adjustment(config)
