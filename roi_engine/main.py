"""FastAPI application for the AI ROI calculator."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from roi_engine.config.settings import Settings
from roi_engine.engine.calculator import calculate_all_metrics
from roi_engine.engine.projection import generate_cash_flow_projection
from roi_engine.engine.result import MetricInputs
from roi_engine.engine.risk import (
    REFERENCE_DISCOUNT_RATE,
    RiskInputs,
    RiskWeights,
    calculate_risk_adjustment,
)
from roi_engine.engine.service import CalculationEngine
from roi_engine.models.project import ProjectData
from roi_engine.serialization import calculation_result_to_dict, json_safe

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI ROI Calculator API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = CalculationEngine(settings=settings)


class RiskWeightsBody(BaseModel):
    implementation: float = Field(default=0.30, ge=0)
    adoption: float = Field(default=0.25, ge=0)
    technical: float = Field(default=0.25, ge=0)
    market: float = Field(default=0.20, ge=0)


class RiskRequest(BaseModel):
    implementation_risk: float = Field(ge=0, le=100)
    adoption_risk: float = Field(ge=0, le=100)
    technical_risk: float = Field(ge=0, le=100)
    market_risk: float = Field(ge=0, le=100)
    weights: Optional[RiskWeightsBody] = None
    base_discount_rate: float = Field(default=REFERENCE_DISCOUNT_RATE, ge=0, le=100)

    def to_risk_inputs(self) -> RiskInputs:
        weights = RiskWeights(**self.weights.model_dump()) if self.weights else RiskWeights()
        return RiskInputs(
            implementation_risk=self.implementation_risk,
            adoption_risk=self.adoption_risk,
            technical_risk=self.technical_risk,
            market_risk=self.market_risk,
            weights=weights,
            base_discount_rate=self.base_discount_rate,
        )


class MetricsRequest(BaseModel):
    total_costs: float = Field(ge=0)
    total_benefits: float = Field(ge=0)
    initial_investment: float = Field(ge=0)
    annual_costs: float = Field(ge=0)
    annual_benefits: float = Field(ge=0)
    years: int = Field(ge=1, le=10)
    discount_rate: float = Field(default=settings.default_discount_rate, ge=0, le=100)
    risk: RiskRequest

    def to_metric_inputs(self) -> MetricInputs:
        return MetricInputs(
            total_costs=self.total_costs,
            total_benefits=self.total_benefits,
            initial_investment=self.initial_investment,
            annual_costs=self.annual_costs,
            annual_benefits=self.annual_benefits,
            years=self.years,
            discount_rate=self.discount_rate,
        )


class ProjectionRequest(BaseModel):
    initial_investment: float = Field(ge=0)
    annual_costs: float = Field(ge=0)
    annual_benefits: float = Field(ge=0)
    years: int = Field(ge=1, le=10)
    discount_rate: float = Field(default=settings.default_discount_rate, ge=0, le=100)


@app.post("/api/risk-adjustment")
async def risk_adjustment(body: RiskRequest):
    """Risk multiplier, adjusted discount rate and scenarios for four scores."""
    return json_safe(calculate_risk_adjustment(body.to_risk_inputs()))


@app.post("/api/metrics")
async def metrics(body: MetricsRequest):
    """Full metric bundle for pre-aggregated totals."""
    return json_safe(calculate_all_metrics(body.to_metric_inputs(), body.risk.to_risk_inputs()))


@app.post("/api/projection")
async def projection(body: ProjectionRequest):
    """Year-by-year cash-flow projection."""
    return json_safe(
        generate_cash_flow_projection(
            initial_investment=body.initial_investment,
            annual_costs=body.annual_costs,
            annual_benefits=body.annual_benefits,
            years=body.years,
            discount_rate=body.discount_rate,
        )
    )


@app.post("/api/calculate")
async def calculate(project: ProjectData):
    """Run the complete calculation for a project."""
    result = engine.calculate(project)
    return calculation_result_to_dict(result)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
