"""Risk adjustment model.

Converts four independent 0-100 risk scores into a single multiplier, a
risk-adjusted discount rate, a confidence band and three named scenarios.

The aggregation is a weighted average with a floor, not a product of
survival probabilities: (1-r1)*(1-r2)*(1-r3)*(1-r4) collapses to near zero
for a handful of moderate risks, which over-penalizes projects whose risks
behave as friction rather than independent failure events. A weighted risk
of 100 halves the expected value; it never zeroes it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from roi_engine.models.enums import RiskLevel

# Reference base rate used when the caller does not provide one.
REFERENCE_DISCOUNT_RATE = 10.0


@dataclass(frozen=True)
class RiskWeights:
    """Relative weight of each risk dimension. Expected to sum to 1.0."""

    implementation: float = 0.30
    adoption: float = 0.25
    technical: float = 0.25
    market: float = 0.20

    def total(self) -> float:
        return self.implementation + self.adoption + self.technical + self.market


DEFAULT_RISK_WEIGHTS = RiskWeights()


@dataclass(frozen=True)
class RiskInputs:
    """Four risk scores in percent (0-100), clamped upstream by the caller."""

    implementation_risk: float
    adoption_risk: float
    technical_risk: float
    market_risk: float
    weights: RiskWeights = field(default=DEFAULT_RISK_WEIGHTS)
    base_discount_rate: float = REFERENCE_DISCOUNT_RATE


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float


@dataclass(frozen=True)
class ScenarioAnalysis:
    pessimistic: float
    baseline: float
    optimistic: float


@dataclass(frozen=True)
class RiskAdjustedOutput:
    """Derived risk figures for a single set of risk inputs."""

    average_risk: float
    weighted_average_risk: float
    risk_multiplier: float
    risk_adjusted_discount_rate: float
    confidence_interval: ConfidenceInterval
    scenario_analysis: ScenarioAnalysis
    risk_level: RiskLevel


def risk_level_for(weighted_average_risk: float) -> RiskLevel:
    """Bucket a weighted risk score.

    <= 25 -> LOW
    <= 45 -> MODERATE
    <= 65 -> ELEVATED
    >  65 -> HIGH
    """
    if weighted_average_risk <= 25:
        return RiskLevel.LOW
    if weighted_average_risk <= 45:
        return RiskLevel.MODERATE
    if weighted_average_risk <= 65:
        return RiskLevel.ELEVATED
    return RiskLevel.HIGH


def calculate_risk_adjustment(config: RiskInputs) -> RiskAdjustedOutput:
    """Run the weighted-average risk model.

    Custom weights are used as given and are not renormalized when they do
    not sum to 1.0. Scores outside 0-100 are not rejected either; the result
    is still arithmetically defined.
    """
    weights = config.weights

    average_risk = (
        config.implementation_risk
        + config.adoption_risk
        + config.technical_risk
        + config.market_risk
    ) / 4

    weighted_average_risk = (
        config.implementation_risk * weights.implementation
        + config.adoption_risk * weights.adoption
        + config.technical_risk * weights.technical
        + config.market_risk * weights.market
    )

    # 100% weighted risk maps to a 0.5 multiplier
    risk_multiplier = 1 - weighted_average_risk / 200

    risk_adjusted_discount_rate = config.base_discount_rate + weighted_average_risk / 5

    spread = (weighted_average_risk / 100) * 0.4
    confidence_interval = ConfidenceInterval(
        lower=risk_multiplier * (1 - spread),
        upper=min(risk_multiplier * (1 + spread), 1.0),
    )

    scenario_analysis = ScenarioAnalysis(
        pessimistic=risk_multiplier * 0.7,
        baseline=risk_multiplier,
        optimistic=min(risk_multiplier * 1.3, 1.0),
    )

    return RiskAdjustedOutput(
        average_risk=average_risk,
        weighted_average_risk=weighted_average_risk,
        risk_multiplier=risk_multiplier,
        risk_adjusted_discount_rate=risk_adjusted_discount_rate,
        confidence_interval=confidence_interval,
        scenario_analysis=scenario_analysis,
        risk_level=risk_level_for(weighted_average_risk),
    )
