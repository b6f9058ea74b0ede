"""Project-level calculation service.

Takes validated ProjectData -> produces CalculationResult with totals, risk
adjustment, metrics, cash-flow projection and a recommendation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from roi_engine.config.settings import Settings
from roi_engine.engine.calculator import calculate_all_metrics
from roi_engine.engine.projection import generate_cash_flow_projection
from roi_engine.engine.recommendation import (
    Recommendation,
    RecommendationConfig,
    generate_recommendation,
)
from roi_engine.engine.result import CashFlowPeriod, FinancialMetrics
from roi_engine.engine.risk import RiskAdjustedOutput, RiskWeights, calculate_risk_adjustment
from roi_engine.engine.totals import ProjectTotals, compute_project_totals
from roi_engine.models.project import ProjectData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    """Top-level result object for a complete project calculation."""

    project_name: str
    totals: ProjectTotals
    risk: RiskAdjustedOutput
    metrics: FinancialMetrics
    cash_flow_projection: list[CashFlowPeriod]
    recommendation: Recommendation


class CalculationEngine:
    """Stateless engine that runs the full project calculation."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()

    def calculate(
        self,
        project: ProjectData,
        weights: Optional[RiskWeights] = None,
    ) -> CalculationResult:
        """Run totals, risk, metrics, projection and recommendation for a project."""
        totals = compute_project_totals(project)
        inputs = totals.to_metric_inputs()
        risk_inputs = project.risk_inputs(weights)

        risk = calculate_risk_adjustment(risk_inputs)
        metrics = calculate_all_metrics(inputs, risk_inputs)
        projection = generate_cash_flow_projection(
            initial_investment=inputs.initial_investment,
            annual_costs=inputs.annual_costs,
            annual_benefits=inputs.annual_benefits,
            years=inputs.years,
            discount_rate=inputs.discount_rate,
        )

        recommendation = generate_recommendation(
            RecommendationConfig(
                risk_adjusted_roi=metrics.risk_adjusted_roi,
                npv=metrics.npv,
                irr=metrics.irr,
                payback_months=metrics.payback_period_months,
                hurdle_rate=self._settings.hurdle_rate,
                max_acceptable_payback=self._settings.max_acceptable_payback_months,
                total_investment=totals.tco,
                risk_level=risk.risk_level,
            )
        )

        logger.info(
            "Calculated project %r: roi=%.1f%% risk=%s recommendation=%s",
            project.project_name,
            metrics.simple_roi,
            risk.risk_level.value,
            recommendation.status.value,
        )

        return CalculationResult(
            project_name=project.project_name,
            totals=totals,
            risk=risk,
            metrics=metrics,
            cash_flow_projection=projection,
            recommendation=recommendation,
        )
