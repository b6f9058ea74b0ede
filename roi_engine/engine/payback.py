"""Simple and discounted payback periods.

``math.inf`` is returned whenever the investment never pays back.
"""

from __future__ import annotations

import math
from typing import Sequence

from roi_engine.engine.metrics import discounted_cash_flows


def calculate_payback_period(initial_investment: float, monthly_net_benefit: float) -> float:
    """Payback_Months = Initial_Investment / Monthly_Net_Benefit"""
    if monthly_net_benefit <= 0:
        return math.inf
    return initial_investment / monthly_net_benefit


def calculate_discounted_payback(cash_flows: Sequence[float], discount_rate: float) -> float:
    """Months until the discounted cumulative cash flow turns non-negative.

    ``cash_flows`` is a monthly series with the investment at index 0 and
    ``discount_rate`` is an annual percentage. The crossing month is linearly
    interpolated between the two cumulative values that straddle zero.
    """
    monthly_rate = discount_rate / 100 / 12
    cumulative = 0.0

    for t, discounted in enumerate(discounted_cash_flows(cash_flows, monthly_rate)):
        previous = cumulative
        cumulative += discounted
        if cumulative >= 0:
            if previous >= 0 or cumulative == previous:
                return float(t)
            fraction = -previous / (cumulative - previous)
            return t - 1 + fraction

    return math.inf
