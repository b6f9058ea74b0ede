"""Caller-owned calculator state.

The engine is stateless; a CalculatorSession holds what the user has entered
so far and the last result, and is passed explicitly to whatever needs it.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from roi_engine.engine.risk import RiskWeights
from roi_engine.engine.service import CalculationEngine, CalculationResult
from roi_engine.models.project import (
    CostEntry,
    IntangibleBenefit,
    ProjectData,
    TangibleBenefit,
)
from roi_engine.models.validation import RESULTS_STEP, StepValidation, validate_step


class CalculatorSession(BaseModel):
    """In-progress calculator state for one user."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    current_step: int = Field(default=0, ge=0)
    project_data: ProjectData = Field(default_factory=ProjectData)
    results: Optional[CalculationResult] = Field(default=None, exclude=True)

    def set_current_step(self, step: int) -> None:
        """Jump back to a step already reached; use next_step() to move forward."""
        if not 0 <= step <= self.current_step:
            raise ValueError(f"Cannot jump to step {step} from step {self.current_step}")
        self.current_step = step

    def can_advance(self) -> StepValidation:
        return validate_step(self.current_step, self.project_data)

    def next_step(self) -> StepValidation:
        """Advance one step if the current one is complete, stopping at results."""
        check = self.can_advance()
        if check.valid and self.current_step < RESULTS_STEP:
            self.current_step += 1
        return check

    def previous_step(self) -> None:
        self.current_step = max(0, self.current_step - 1)

    def update_project_data(self, **changes: Any) -> None:
        """Merge ``changes`` into the project data, re-validating the result."""
        merged = {**self.project_data.model_dump(), **changes}
        self.project_data = ProjectData.model_validate(merged)

    def add_cost(self, cost: CostEntry) -> None:
        self.project_data.costs.append(cost)

    def remove_cost(self, cost_id: str) -> None:
        self.project_data.costs = [c for c in self.project_data.costs if c.id != cost_id]

    def add_tangible_benefit(self, benefit: TangibleBenefit) -> None:
        self.project_data.tangible_benefits.append(benefit)

    def remove_tangible_benefit(self, benefit_id: str) -> None:
        self.project_data.tangible_benefits = [
            b for b in self.project_data.tangible_benefits if b.id != benefit_id
        ]

    def add_intangible_benefit(self, benefit: IntangibleBenefit) -> None:
        self.project_data.intangible_benefits.append(benefit)

    def remove_intangible_benefit(self, benefit_id: str) -> None:
        self.project_data.intangible_benefits = [
            b for b in self.project_data.intangible_benefits if b.id != benefit_id
        ]

    def calculate_results(
        self,
        engine: Optional[CalculationEngine] = None,
        weights: Optional[RiskWeights] = None,
    ) -> CalculationResult:
        engine = engine or CalculationEngine()
        self.results = engine.calculate(self.project_data, weights)
        return self.results

    def reset(self) -> None:
        self.current_step = 0
        self.project_data = ProjectData()
        self.results = None
