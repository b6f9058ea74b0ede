"""Per-step completeness checks for the guided calculator."""

from __future__ import annotations

from dataclasses import dataclass, field

from roi_engine.models.project import ProjectData

QUICK_SETUP_STEP = 0
INVESTMENT_STEP = 1
RESULTS_STEP = 2


@dataclass(frozen=True)
class StepValidation:
    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_step(step: int, project: ProjectData) -> StepValidation:
    """Check whether the user can move past ``step``.

    Field-level rules live on the pydantic models; this only checks that the
    step has enough content to proceed.
    """
    if step == QUICK_SETUP_STEP:
        errors: list[str] = []
        if len(project.project_name) < 2:
            errors.append("Project name is required")
        if not project.industry:
            errors.append("Industry is required")
        if not project.use_cases:
            errors.append("At least one use case is required")
        return StepValidation(valid=not errors, errors=errors)

    if step == INVESTMENT_STEP:
        if project.costs or project.tangible_benefits:
            return StepValidation(valid=True)
        return StepValidation(
            valid=False, errors=["Add at least one cost or benefit to continue"]
        )

    return StepValidation(valid=True)
