"""Year-by-year cash-flow projection."""

from __future__ import annotations

from roi_engine.engine.result import CashFlowPeriod


def generate_cash_flow_projection(
    initial_investment: float,
    annual_costs: float,
    annual_benefits: float,
    years: int,
    discount_rate: float,
) -> list[CashFlowPeriod]:
    """Project constant annual flows over ``years`` after an upfront outlay.

    Period 0 carries the investment only. Benefit ramp-up is not modelled
    here; the project totals layer applies it to its yearly view.
    """
    rate = discount_rate / 100

    projections: list[CashFlowPeriod] = [
        CashFlowPeriod(
            period=0,
            costs=initial_investment,
            benefits=0.0,
            net_cash_flow=-initial_investment,
            cumulative_cash_flow=-initial_investment,
            discounted_cash_flow=-initial_investment,
            cumulative_discounted_cash_flow=-initial_investment,
        )
    ]

    cumulative = -initial_investment
    cumulative_discounted = -initial_investment
    net_cash_flow = annual_benefits - annual_costs

    for year in range(1, years + 1):
        discounted = net_cash_flow / (1 + rate) ** year
        cumulative += net_cash_flow
        cumulative_discounted += discounted
        projections.append(
            CashFlowPeriod(
                period=year,
                costs=annual_costs,
                benefits=annual_benefits,
                net_cash_flow=net_cash_flow,
                cumulative_cash_flow=cumulative,
                discounted_cash_flow=discounted,
                cumulative_discounted_cash_flow=cumulative_discounted,
            )
        )

    return projections
