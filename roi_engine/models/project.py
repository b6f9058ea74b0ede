"""Pydantic models for calculator inputs.

These models are the validation boundary: everything that reaches the
financial engine has already been checked here.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from roi_engine.engine.risk import DEFAULT_RISK_WEIGHTS, RiskInputs, RiskWeights
from roi_engine.models.enums import (
    BenefitCategory,
    CompanySize,
    CostCategory,
    ProjectStage,
)


class CostEntry(BaseModel):
    """A single one-time and/or recurring cost line."""

    id: str = Field(min_length=1)
    category: CostCategory
    type: str = Field(min_length=1)
    name: str = Field(min_length=2, max_length=100)
    one_time_cost: float = Field(default=0.0, ge=0)
    monthly_recurring: float = Field(default=0.0, ge=0)
    annual_recurring: float = Field(default=0.0, ge=0)
    years_applicable: list[int] = Field(default_factory=list)
    confidence_level: float = Field(default=70.0, ge=10, le=100)

    @model_validator(mode="after")
    def at_least_one_cost(self) -> CostEntry:
        if not (
            self.one_time_cost > 0
            or self.monthly_recurring > 0
            or self.annual_recurring > 0
        ):
            raise ValueError("At least one cost field must be greater than 0")
        return self

    def annual_recurring_total(self) -> float:
        return self.annual_recurring + self.monthly_recurring * 12


class TangibleBenefit(BaseModel):
    """A measurable benefit, weighted by the user's confidence in it."""

    id: str = Field(min_length=1)
    category: BenefitCategory
    name: str = Field(min_length=2, max_length=100)
    current_baseline_value: float = Field(default=0.0, ge=0)
    expected_improvement_percent: float = Field(default=0.0, ge=0, le=1000)
    expected_annual_value: float = Field(gt=0)
    realization_start_month: int = Field(default=0, ge=0, le=36)
    ramp_up_months: int = Field(default=0, ge=0, le=36)
    confidence_level: float = Field(default=70.0, ge=10, le=100)

    def confidence_weighted_value(self) -> float:
        return self.expected_annual_value * (self.confidence_level / 100)


class ProxyMetrics(BaseModel):
    current: float = 0.0
    target: float = 0.0
    benchmark: float = 0.0


class IntangibleBenefit(BaseModel):
    """A qualitative benefit scored 0-10 with an optional monetary proxy."""

    id: str = Field(min_length=1)
    category: str
    name: str = Field(min_length=2, max_length=100)
    qualitative_score: float = Field(ge=0, le=10)
    weight: float = Field(default=1.0, ge=0)
    estimated_monetary_value: float = Field(default=0.0, ge=0)
    proxy_metrics: ProxyMetrics = Field(default_factory=ProxyMetrics)


class ProjectData(BaseModel):
    """Everything the user enters across the calculator steps."""

    # Business profile
    company_name: Optional[str] = Field(default="", max_length=100)
    industry: str = ""
    company_size: CompanySize = CompanySize.SMALL
    annual_revenue: Optional[str] = ""

    # Project details
    project_name: str = Field(default="", max_length=200)
    project_description: Optional[str] = Field(default="", max_length=1000)
    project_stage: ProjectStage = ProjectStage.PRE
    use_cases: list[str] = Field(default_factory=list)
    primary_goal: Optional[str] = ""
    time_horizon_years: int = Field(default=3, ge=1, le=10)
    discount_rate: float = Field(default=10.0, ge=0, le=100)

    # Investment
    costs: list[CostEntry] = Field(default_factory=list)
    tangible_benefits: list[TangibleBenefit] = Field(default_factory=list)
    intangible_benefits: list[IntangibleBenefit] = Field(default_factory=list)

    # Risk assessment (percent)
    implementation_risk: float = Field(default=20.0, ge=0, le=100)
    adoption_risk: float = Field(default=25.0, ge=0, le=100)
    technical_risk: float = Field(default=15.0, ge=0, le=100)
    market_risk: float = Field(default=10.0, ge=0, le=100)

    def risk_inputs(self, weights: Optional[RiskWeights] = None) -> RiskInputs:
        """Risk inputs for the engine, using this project's discount rate as base."""
        return RiskInputs(
            implementation_risk=self.implementation_risk,
            adoption_risk=self.adoption_risk,
            technical_risk=self.technical_risk,
            market_risk=self.market_risk,
            weights=weights or DEFAULT_RISK_WEIGHTS,
            base_discount_rate=self.discount_rate,
        )
