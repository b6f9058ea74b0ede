"""Immutable value records produced by the financial engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MetricInputs:
    """Pre-aggregated totals handed to the engine by the caller.

    Rates are in percent; ``years`` is the analysis horizon.
    """

    total_costs: float
    total_benefits: float
    initial_investment: float
    annual_costs: float
    annual_benefits: float
    years: int
    discount_rate: float

    def net_annual_cash_flow(self) -> float:
        return self.annual_benefits - self.annual_costs


@dataclass(frozen=True)
class CashFlowPeriod:
    """One period of the cash-flow projection. Period 0 is the investment."""

    period: int
    costs: float
    benefits: float
    net_cash_flow: float
    cumulative_cash_flow: float
    discounted_cash_flow: float
    cumulative_discounted_cash_flow: float


@dataclass(frozen=True)
class FinancialMetrics:
    """Complete metric bundle for one calculation.

    ``irr`` is None when it cannot be determined, and the payback fields are
    ``math.inf`` when the investment never pays back within the horizon.
    """

    simple_roi: float
    annualized_roi: float
    npv: float
    irr: Optional[float]
    payback_period_months: float
    discounted_payback_months: float
    benefit_cost_ratio: float
    profitability_index: float
    risk_adjusted_roi: float
    risk_adjusted_npv: float
