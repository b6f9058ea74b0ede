"""Roll raw cost and benefit entries up into the totals the engine consumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from roi_engine.engine.result import MetricInputs
from roi_engine.models.project import (
    CostEntry,
    IntangibleBenefit,
    ProjectData,
    TangibleBenefit,
)


@dataclass(frozen=True)
class YearProjection:
    """Single year of the ramp-aware yearly view."""

    year: int
    costs: float
    benefits: float
    net_cash_flow: float
    cumulative: float
    roi: float


@dataclass(frozen=True)
class ProjectTotals:
    """Aggregated figures for a project over its horizon."""

    years: int
    discount_rate: float
    tco: float
    one_time_costs: float
    annual_costs: float
    annual_benefits: float
    total_tangible_benefits: float
    total_intangible_value: float
    soft_roi_score: float
    overall_confidence: float
    yearly_projections: list[YearProjection] = field(default_factory=list)

    def to_metric_inputs(self) -> MetricInputs:
        return MetricInputs(
            total_costs=self.tco,
            total_benefits=self.total_tangible_benefits,
            initial_investment=self.one_time_costs,
            annual_costs=self.annual_costs,
            annual_benefits=self.annual_benefits,
            years=self.years,
            discount_rate=self.discount_rate,
        )


def calculate_tco(costs: Sequence[CostEntry], years: int) -> float:
    """TCO = sum(one_time + annual_recurring * years + monthly_recurring * 12 * years)"""
    return sum(
        c.one_time_cost + c.annual_recurring * years + c.monthly_recurring * 12 * years
        for c in costs
    )


def calculate_soft_roi(intangible_benefits: Sequence[IntangibleBenefit]) -> float:
    """Weighted mean qualitative score, scaled from 0-10 to 0-100."""
    total_weight = sum(b.weight for b in intangible_benefits)
    if total_weight == 0:
        return 0.0
    weighted = sum(b.qualitative_score * b.weight for b in intangible_benefits)
    return weighted / total_weight * 10


def calculate_overall_confidence(
    costs: Sequence[CostEntry],
    benefits: Sequence[TangibleBenefit],
) -> float:
    levels = [c.confidence_level for c in costs] + [b.confidence_level for b in benefits]
    if not levels:
        return 0.0
    return sum(levels) / len(levels)


def ramp_factor(benefit: TangibleBenefit, month: int) -> float:
    """Share of a benefit realized in ``month`` (1-based).

    Nothing before ``realization_start_month``, then a linear climb to 100%
    over ``ramp_up_months``.
    """
    elapsed = month - benefit.realization_start_month
    if elapsed <= 0:
        return 0.0
    if benefit.ramp_up_months == 0:
        return 1.0
    return min(1.0, elapsed / benefit.ramp_up_months)


def realized_benefits_for_year(benefits: Sequence[TangibleBenefit], year: int) -> float:
    total = 0.0
    for month in range((year - 1) * 12 + 1, year * 12 + 1):
        for b in benefits:
            total += b.confidence_weighted_value() / 12 * ramp_factor(b, month)
    return total


def project_years(
    benefits: Sequence[TangibleBenefit],
    one_time_costs: float,
    annual_costs: float,
    years: int,
) -> list[YearProjection]:
    """Yearly costs vs. ramped benefits; one-time costs land in year 1."""
    projections: list[YearProjection] = []
    cumulative = 0.0

    for year in range(1, years + 1):
        year_costs = annual_costs + (one_time_costs if year == 1 else 0.0)
        year_benefits = realized_benefits_for_year(benefits, year)
        net = year_benefits - year_costs
        cumulative += net
        roi = (year_benefits - year_costs) / year_costs * 100 if year_costs > 0 else 0.0
        projections.append(
            YearProjection(
                year=year,
                costs=year_costs,
                benefits=year_benefits,
                net_cash_flow=net,
                cumulative=cumulative,
                roi=roi,
            )
        )

    return projections


def compute_project_totals(project: ProjectData) -> ProjectTotals:
    """Aggregate a project's entries into engine-ready totals."""
    years = project.time_horizon_years

    one_time_costs = sum(c.one_time_cost for c in project.costs)
    annual_costs = sum(c.annual_recurring_total() for c in project.costs)
    annual_benefits = sum(b.confidence_weighted_value() for b in project.tangible_benefits)

    return ProjectTotals(
        years=years,
        discount_rate=project.discount_rate,
        tco=calculate_tco(project.costs, years),
        one_time_costs=one_time_costs,
        annual_costs=annual_costs,
        annual_benefits=annual_benefits,
        total_tangible_benefits=annual_benefits * years,
        total_intangible_value=sum(
            b.estimated_monetary_value for b in project.intangible_benefits
        ),
        soft_roi_score=calculate_soft_roi(project.intangible_benefits),
        overall_confidence=calculate_overall_confidence(
            project.costs, project.tangible_benefits
        ),
        yearly_projections=project_years(
            project.tangible_benefits, one_time_costs, annual_costs, years
        ),
    )
