from .calculator import calculate_all_metrics
from .irr import calculate_irr
from .metrics import (
    calculate_annualized_roi,
    calculate_benefit_cost_ratio,
    calculate_npv,
    calculate_profitability_index,
    calculate_simple_roi,
)
from .payback import calculate_discounted_payback, calculate_payback_period
from .projection import generate_cash_flow_projection
from .result import CashFlowPeriod, FinancialMetrics, MetricInputs
from .risk import (
    DEFAULT_RISK_WEIGHTS,
    RiskAdjustedOutput,
    RiskInputs,
    RiskWeights,
    calculate_risk_adjustment,
)

__all__ = [
    "calculate_all_metrics",
    "calculate_irr",
    "calculate_annualized_roi",
    "calculate_benefit_cost_ratio",
    "calculate_npv",
    "calculate_profitability_index",
    "calculate_simple_roi",
    "calculate_discounted_payback",
    "calculate_payback_period",
    "generate_cash_flow_projection",
    "CashFlowPeriod",
    "FinancialMetrics",
    "MetricInputs",
    "DEFAULT_RISK_WEIGHTS",
    "RiskAdjustedOutput",
    "RiskInputs",
    "RiskWeights",
    "calculate_risk_adjustment",
]
