"""Closed-form ROI, NPV and ratio metrics.

Each function is a pure calculation with no side effects. Rates and ROI
values are expressed in percent (10 means 10%). Mathematically undefined
inputs fall back to a neutral value instead of raising.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def calculate_simple_roi(total_benefits: float, total_costs: float) -> float:
    """ROI = (Total_Benefits - Total_Costs) / Total_Costs x 100"""
    if total_costs <= 0:
        return 0.0
    return (total_benefits - total_costs) / total_costs * 100


def calculate_annualized_roi(simple_roi: float, years: float) -> float:
    """Annualized_ROI = ((1 + ROI)^(1/years) - 1) x 100

    Capped at -100 when the total loss is 100% or more, since the root of a
    non-positive base has no real value.
    """
    if years <= 0:
        return 0.0
    roi_decimal = simple_roi / 100
    if roi_decimal <= -1:
        return -100.0
    return ((1 + roi_decimal) ** (1 / years) - 1) * 100


def discounted_cash_flows(cash_flows: Iterable[float], rate: float) -> Iterator[float]:
    """Yield CF_t / (1 + rate)^t for a decimal periodic rate (0.1 = 10%).

    The factor is built one period at a time, so long series saturate to 0
    or +/-inf instead of raising OverflowError. Zero flows stay 0.
    """
    if rate == -1.0:
        # (1 + r) must be non-zero
        rate = -0.999999
    step = 1 / (1 + rate)
    factor = 1.0
    for cf in cash_flows:
        yield cf * factor if cf else 0.0
        factor *= step


def calculate_npv(cash_flows: Sequence[float], discount_rate: float) -> float:
    """NPV = sum(CF_t / (1 + r)^t) for t = 0..n

    Period 0 is "now" and is not discounted.
    """
    return sum(discounted_cash_flows(cash_flows, discount_rate / 100))


def calculate_benefit_cost_ratio(total_benefits: float, total_costs: float) -> float:
    """BCR = Total_Benefits / Total_Costs"""
    if total_costs <= 0:
        return 0.0
    return total_benefits / total_costs


def calculate_profitability_index(npv: float, initial_investment: float) -> float:
    """PI = (NPV + Initial_Investment) / Initial_Investment"""
    if initial_investment <= 0:
        return 0.0
    return (npv + initial_investment) / initial_investment
