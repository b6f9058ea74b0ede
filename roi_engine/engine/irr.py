"""Internal rate of return solver.

Newton-Raphson on NPV(r) = 0 with a bisection fallback. Pure Newton can
diverge or oscillate on cash flows with several sign changes or a flat NPV
curve; the bracket keeps every iterate between -99% and +1000% per period.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from roi_engine.engine.metrics import discounted_cash_flows

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 1000
TOLERANCE = 1e-5
MIN_DERIVATIVE = 1e-10
LOWER_BOUND = -0.99
UPPER_BOUND = 10.0


def _npv_at(cash_flows: Sequence[float], rate: float) -> float:
    """NPV at a decimal periodic rate (0.1 = 10%)."""
    return sum(discounted_cash_flows(cash_flows, rate))


def _npv_and_derivative(cash_flows: Sequence[float], rate: float) -> tuple[float, float]:
    npv = 0.0
    derivative = 0.0
    step = 1 / (1 + rate)
    for t, discounted in enumerate(discounted_cash_flows(cash_flows, rate)):
        npv += discounted
        if t > 0 and discounted:
            derivative -= t * discounted * step
    return npv, derivative


def calculate_irr(cash_flows: Sequence[float], guess: float = 0.1) -> Optional[float]:
    """Return the IRR in percent, or None when it cannot be determined.

    None is returned when the flows lack either a strictly positive or a
    strictly negative value (a monotonic stream has no root), and when the
    search does not converge within MAX_ITERATIONS. Callers should render
    None as "N/A".
    """
    has_positive = any(cf > 0 for cf in cash_flows)
    has_negative = any(cf < 0 for cf in cash_flows)
    if not has_positive or not has_negative:
        return None

    lower_bound = LOWER_BOUND
    upper_bound = UPPER_BOUND
    rate = min(max(guess, lower_bound), upper_bound)

    for _ in range(MAX_ITERATIONS):
        npv, derivative = _npv_and_derivative(cash_flows, rate)

        if not (math.isfinite(npv) and math.isfinite(derivative)):
            # Discount factors saturated on a long series; back away from that end
            if rate < 0:
                rate = (rate + upper_bound) / 2
            else:
                rate = (rate + lower_bound) / 2
            continue

        if abs(npv) < TOLERANCE:
            return rate * 100

        if abs(derivative) < MIN_DERIVATIVE:
            # Flat slope: take one bisection step on the bracket instead
            mid = (lower_bound + upper_bound) / 2
            if _npv_at(cash_flows, mid) > 0:
                lower_bound = mid
            else:
                upper_bound = mid
            rate = mid
            continue

        new_rate = rate - npv / derivative

        if new_rate < lower_bound:
            rate = (rate + lower_bound) / 2
        elif new_rate > upper_bound:
            rate = (rate + upper_bound) / 2
        else:
            if abs(new_rate - rate) < TOLERANCE:
                return new_rate * 100
            rate = new_rate

    logger.debug(
        "IRR did not converge after %d iterations (last rate %.6f)",
        MAX_ITERATIONS,
        rate,
    )
    return None
