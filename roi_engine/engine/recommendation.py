"""Investment recommendation engine.

Scores a metric bundle out of 100 and maps the score to a traffic-light
recommendation with supporting strengths, risks and next steps.

Score components:
    risk-adjusted ROI   max 30
    NPV vs. investment  max 25
    IRR vs. hurdle      max 25 (5 when IRR is undefined)
    payback period      max 20
    risk level          -10 .. +5
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from roi_engine.models.enums import (
    RecommendationConfidence,
    RecommendationStatus,
    RiskLevel,
)


@dataclass(frozen=True)
class RecommendationConfig:
    risk_adjusted_roi: float
    npv: float
    irr: Optional[float]
    payback_months: float
    hurdle_rate: float
    max_acceptable_payback: float  # months
    total_investment: float
    risk_level: RiskLevel


@dataclass(frozen=True)
class Recommendation:
    status: RecommendationStatus
    color: str
    headline: str
    summary: str
    key_strengths: list[str] = field(default_factory=list)
    key_risks: list[str] = field(default_factory=list)
    action_items: list[str] = field(default_factory=list)
    confidence: RecommendationConfidence = RecommendationConfidence.MEDIUM
    score: int = 0


@dataclass(frozen=True)
class _Verdict:
    min_score: int
    status: RecommendationStatus
    color: str
    headline: str
    summary: str
    action_items: tuple[str, ...]
    confidence: RecommendationConfidence


# Ordered from the highest threshold down; the first match wins.
_VERDICTS: tuple[_Verdict, ...] = (
    _Verdict(
        min_score=80,
        status=RecommendationStatus.STRONG,
        color="emerald",
        headline="Strong Investment Case",
        summary=(
            "This AI initiative demonstrates compelling financial returns with "
            "acceptable risk. The analysis supports moving forward with full investment."
        ),
        action_items=(
            "Secure budget approval and resource allocation",
            "Establish baseline metrics for ROI tracking",
            "Identify quick wins to demonstrate early value",
            "Develop detailed implementation roadmap",
        ),
        confidence=RecommendationConfidence.HIGH,
    ),
    _Verdict(
        min_score=60,
        status=RecommendationStatus.FAVORABLE,
        color="cyan",
        headline="Favorable With Considerations",
        summary=(
            "Financial projections support the investment, though a phased approach "
            "is recommended to validate assumptions and manage risk."
        ),
        action_items=(
            "Consider a pilot phase to validate key assumptions",
            "Develop risk mitigation strategies for identified concerns",
            "Set clear go/no-go decision gates",
            "Plan for iterative implementation",
        ),
        confidence=RecommendationConfidence.MEDIUM,
    ),
    _Verdict(
        min_score=40,
        status=RecommendationStatus.MARGINAL,
        color="amber",
        headline="Marginal Returns - Scope Review Recommended",
        summary=(
            "Current projections show limited upside. Consider reducing scope, "
            "renegotiating vendor terms, or identifying additional benefit drivers."
        ),
        action_items=(
            "Challenge and validate cost assumptions",
            "Identify additional measurable benefits",
            "Consider a reduced-scope pilot program",
            "Explore alternative implementation approaches",
        ),
        confidence=RecommendationConfidence.MEDIUM,
    ),
    _Verdict(
        min_score=20,
        status=RecommendationStatus.WEAK,
        color="orange",
        headline="Weak Case - Significant Concerns",
        summary=(
            "Current projections do not support the investment. A fundamental "
            "reassessment of scope, approach, or timing is recommended."
        ),
        action_items=(
            "Reassess project scope and objectives",
            "Explore alternative solutions or vendors",
            "Consider postponing until conditions improve",
            "Document findings for future reference",
        ),
        confidence=RecommendationConfidence.LOW,
    ),
    _Verdict(
        min_score=0,
        status=RecommendationStatus.NEGATIVE,
        color="red",
        headline="Not Recommended - Value Destruction Risk",
        summary=(
            "This investment would likely destroy value under current assumptions. "
            "Proceeding is not recommended without fundamental changes to the "
            "project scope or approach."
        ),
        action_items=(
            "Do not proceed with current proposal",
            "Document rejection rationale for stakeholders",
            "Redirect resources to higher-value initiatives",
            "Revisit if conditions change significantly",
        ),
        confidence=RecommendationConfidence.HIGH,
    ),
)


def _score_roi(roi: float, strengths: list[str], risks: list[str]) -> int:
    if roi > 100:
        strengths.append("Exceptional risk-adjusted returns exceeding 100%")
        return 30
    if roi > 50:
        strengths.append("Strong risk-adjusted returns above 50%")
        return 25
    if roi > 25:
        strengths.append("Solid risk-adjusted returns above 25%")
        return 20
    if roi > 10:
        strengths.append("Positive returns above cost of capital")
        return 10
    if roi > 0:
        risks.append("Marginal returns may not justify implementation effort")
        return 5
    risks.append("Negative ROI indicates potential value destruction")
    return 0


def _score_npv(
    npv: float, total_investment: float, strengths: list[str], risks: list[str]
) -> int:
    if npv <= 0:
        risks.append("Negative NPV at current discount rate")
        return 0
    ratio = npv / total_investment if total_investment > 0 else 0.0
    if ratio > 2:
        strengths.append(f"NPV equals {round(ratio * 100)}% of investment")
        return 25
    if ratio > 1:
        strengths.append("Positive NPV indicates significant value creation")
        return 20
    if ratio > 0.5:
        strengths.append("Positive NPV indicates value creation")
        return 15
    return 10


def _score_irr(
    irr: Optional[float], hurdle_rate: float, strengths: list[str], risks: list[str]
) -> int:
    if irr is None:
        # Undefined IRR scores neutral
        return 5
    if irr > hurdle_rate * 2:
        strengths.append(f"IRR of {irr:.1f}% significantly exceeds hurdle rate")
        return 25
    if irr > hurdle_rate * 1.5:
        strengths.append(f"IRR of {irr:.1f}% comfortably exceeds hurdle rate")
        return 20
    if irr > hurdle_rate:
        strengths.append(f"IRR of {irr:.1f}% exceeds hurdle rate")
        return 15
    if irr > 0:
        risks.append(f"IRR of {irr:.1f}% below hurdle rate of {hurdle_rate:g}%")
        return 5
    risks.append("Negative IRR indicates fundamental project issues")
    return 0


def _score_payback(
    months: float, max_acceptable: float, strengths: list[str], risks: list[str]
) -> int:
    if months <= max_acceptable * 0.5:
        strengths.append(f"Rapid {months:.0f}-month payback period")
        return 20
    if months <= max_acceptable * 0.75:
        strengths.append(f"Reasonable {months:.0f}-month payback period")
        return 15
    if months <= max_acceptable:
        return 10
    if not math.isinf(months):
        risks.append(f"Extended {months:.0f}-month payback period exceeds target")
        return 5
    risks.append("Investment may never achieve payback")
    return 0


def _score_risk_level(level: RiskLevel, strengths: list[str], risks: list[str]) -> int:
    if level == RiskLevel.HIGH:
        risks.append("High overall risk profile requires careful monitoring")
        return -10
    if level == RiskLevel.ELEVATED:
        risks.append("Elevated risk profile warrants risk mitigation planning")
        return -5
    if level == RiskLevel.LOW:
        strengths.append("Low risk profile supports investment confidence")
        return 5
    return 0


def generate_recommendation(config: RecommendationConfig) -> Recommendation:
    """Score the metrics and pick the matching recommendation."""
    strengths: list[str] = []
    risks: list[str] = []

    score = (
        _score_roi(config.risk_adjusted_roi, strengths, risks)
        + _score_npv(config.npv, config.total_investment, strengths, risks)
        + _score_irr(config.irr, config.hurdle_rate, strengths, risks)
        + _score_payback(
            config.payback_months, config.max_acceptable_payback, strengths, risks
        )
        + _score_risk_level(config.risk_level, strengths, risks)
    )
    score = max(0, min(100, score))

    verdict = next(v for v in _VERDICTS if score >= v.min_score)
    return Recommendation(
        status=verdict.status,
        color=verdict.color,
        headline=verdict.headline,
        summary=verdict.summary,
        key_strengths=strengths,
        key_risks=risks,
        action_items=list(verdict.action_items),
        confidence=verdict.confidence,
        score=score,
    )
