"""Aggregate metric orchestration.

Composes the risk model and the individual metric functions into one
FinancialMetrics bundle. No branching of its own beyond delegation.
"""

from __future__ import annotations

import logging

from roi_engine.engine.irr import calculate_irr
from roi_engine.engine.metrics import (
    calculate_annualized_roi,
    calculate_benefit_cost_ratio,
    calculate_npv,
    calculate_profitability_index,
    calculate_simple_roi,
)
from roi_engine.engine.payback import (
    calculate_discounted_payback,
    calculate_payback_period,
)
from roi_engine.engine.result import FinancialMetrics, MetricInputs
from roi_engine.engine.risk import RiskInputs, calculate_risk_adjustment

logger = logging.getLogger(__name__)


def build_annual_cash_flows(inputs: MetricInputs) -> list[float]:
    """[-investment, net_year_1, ..., net_year_n]"""
    return [-inputs.initial_investment] + [inputs.net_annual_cash_flow()] * inputs.years


def build_monthly_cash_flows(inputs: MetricInputs) -> list[float]:
    """[-investment, net_month_1, ..., net_month_(12n)]"""
    monthly = inputs.net_annual_cash_flow() / 12
    return [-inputs.initial_investment] + [monthly] * (inputs.years * 12)


def calculate_all_metrics(inputs: MetricInputs, risk: RiskInputs) -> FinancialMetrics:
    """Run every metric over one set of totals and risk inputs."""
    cash_flows = build_annual_cash_flows(inputs)
    risk_adjustment = calculate_risk_adjustment(risk)

    simple_roi = calculate_simple_roi(inputs.total_benefits, inputs.total_costs)
    annualized_roi = calculate_annualized_roi(simple_roi, inputs.years)
    npv = calculate_npv(cash_flows, inputs.discount_rate)
    irr = calculate_irr(cash_flows)

    monthly_net_benefit = inputs.net_annual_cash_flow() / 12
    payback_months = calculate_payback_period(inputs.initial_investment, monthly_net_benefit)
    discounted_payback_months = calculate_discounted_payback(
        build_monthly_cash_flows(inputs), inputs.discount_rate
    )

    metrics = FinancialMetrics(
        simple_roi=simple_roi,
        annualized_roi=annualized_roi,
        npv=npv,
        irr=irr,
        payback_period_months=payback_months,
        discounted_payback_months=discounted_payback_months,
        benefit_cost_ratio=calculate_benefit_cost_ratio(
            inputs.total_benefits, inputs.total_costs
        ),
        profitability_index=calculate_profitability_index(npv, inputs.initial_investment),
        risk_adjusted_roi=simple_roi * risk_adjustment.risk_multiplier,
        risk_adjusted_npv=calculate_npv(
            cash_flows, risk_adjustment.risk_adjusted_discount_rate
        ),
    )
    logger.debug(
        "Metrics computed: roi=%.2f npv=%.2f irr=%s", simple_roi, npv, irr
    )
    return metrics
