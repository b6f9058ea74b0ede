"""Shared test fixtures for the ROI engine test suite."""

import pytest

from roi_engine.engine.result import MetricInputs
from roi_engine.engine.risk import RiskInputs
from roi_engine.models.project import (
    CostEntry,
    IntangibleBenefit,
    ProjectData,
    TangibleBenefit,
)


def _uniform_risk(score: float, base_discount_rate: float = 10.0) -> RiskInputs:
    return RiskInputs(
        implementation_risk=score,
        adoption_risk=score,
        technical_risk=score,
        market_risk=score,
        base_discount_rate=base_discount_rate,
    )


@pytest.fixture
def uniform_risk():
    """Factory for RiskInputs with the same score on all four dimensions."""
    return _uniform_risk


@pytest.fixture
def reference_inputs() -> MetricInputs:
    """$100K investment returning $50K a year for 3 years at 10%."""
    return MetricInputs(
        total_costs=100_000,
        total_benefits=150_000,
        initial_investment=100_000,
        annual_costs=0,
        annual_benefits=50_000,
        years=3,
        discount_rate=10,
    )


@pytest.fixture
def reference_risk() -> RiskInputs:
    return _uniform_risk(30)


@pytest.fixture
def sample_project() -> ProjectData:
    """Support-automation project used across totals and service tests.

    one-time costs   $60K
    annual costs     $18K  ($6K annual + $1K/month)
    annual benefits  $110K ($100K @ 80% + $50K @ 60%, second ramps in)
    """
    return ProjectData(
        company_name="Acme Support Co",
        industry="saas",
        project_name="Support Copilot",
        use_cases=["customer_support"],
        time_horizon_years=3,
        discount_rate=10,
        costs=[
            CostEntry(
                id="c1",
                category="implementation",
                type="software",
                name="Platform license",
                one_time_cost=50_000,
                monthly_recurring=1_000,
                annual_recurring=6_000,
                confidence_level=80,
            ),
            CostEntry(
                id="c2",
                category="training",
                type="staff",
                name="Staff training",
                one_time_cost=10_000,
                confidence_level=90,
            ),
        ],
        tangible_benefits=[
            TangibleBenefit(
                id="b1",
                category="cost_reduction",
                name="Ticket deflection",
                expected_annual_value=100_000,
                confidence_level=80,
            ),
            TangibleBenefit(
                id="b2",
                category="revenue",
                name="Upsell assist",
                expected_annual_value=50_000,
                realization_start_month=6,
                ramp_up_months=6,
                confidence_level=60,
            ),
        ],
        intangible_benefits=[
            IntangibleBenefit(
                id="i1",
                category="brand",
                name="Brand perception",
                qualitative_score=8,
                weight=2,
                estimated_monetary_value=20_000,
            ),
            IntangibleBenefit(
                id="i2",
                category="employee",
                name="Agent satisfaction",
                qualitative_score=5,
                weight=1,
                estimated_monetary_value=5_000,
            ),
        ],
    )


@pytest.fixture
def losing_project() -> ProjectData:
    """Costs outrun benefits every year; never pays back."""
    return ProjectData(
        project_name="Moonshot",
        industry="retail",
        use_cases=["forecasting"],
        time_horizon_years=5,
        costs=[
            CostEntry(
                id="c1",
                category="infrastructure",
                type="compute",
                name="GPU cluster",
                one_time_cost=100_000,
                annual_recurring=50_000,
            ),
        ],
        tangible_benefits=[
            TangibleBenefit(
                id="b1",
                category="efficiency",
                name="Forecast accuracy",
                expected_annual_value=20_000,
                confidence_level=100,
            ),
        ],
    )
