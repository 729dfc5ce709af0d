"""Main broker readiness computation.

This module orchestrates scoring by:
1. Validating the questionnaire answers
2. Running each dimension scorer
3. Combining the scores into a success probability
4. Evaluating risk flags
5. Classifying the band and sales angle

Everything here is a pure function of the onboarding response: no I/O,
no clock and no shared mutable state, so it is safe to call concurrently.
"""

from collections.abc import Mapping
from typing import Any

from broker_scoring.core.logging import get_logger
from broker_scoring.core.scoring.classifier import classify_band, select_sales_angle
from broker_scoring.core.scoring.composite import compute_success_probability
from broker_scoring.core.scoring.dimensions import (
    score_budget,
    score_growth,
    score_intent,
    score_operational,
)
from broker_scoring.core.scoring.explanation import build_explanation
from broker_scoring.core.scoring.flags import evaluate_risk_flags
from broker_scoring.core.scoring.types import (
    AnalysisResult,
    Dimension,
    DimensionScore,
    OnboardingResponse,
    ScoreBreakdown,
    ScoringReport,
)
from broker_scoring.core.scoring.validation import validate_response

logger = get_logger(__name__)


def score_dimensions(response: OnboardingResponse) -> dict[Dimension, DimensionScore]:
    """
    Score all four dimensions with their factor detail.

    Args:
        response: Validated onboarding response

    Returns:
        DimensionScore per dimension, in tie-break priority order
    """
    return {
        Dimension.OPERATIONAL: score_operational(response),
        Dimension.BUDGET: score_budget(response),
        Dimension.GROWTH: score_growth(response),
        Dimension.INTENT: score_intent(response),
    }


def score_breakdown(response: OnboardingResponse | Mapping[str, Any]) -> ScoreBreakdown:
    """Compute only the four dimension scores."""
    response = validate_response(response)
    return _to_breakdown(score_dimensions(response))


def compute_scores(response: OnboardingResponse | Mapping[str, Any]) -> AnalysisResult:
    """
    Compute the readiness assessment for one onboarding response.

    This is the main entry point for broker scoring.

    Args:
        response: OnboardingResponse, or a raw form payload to validate first

    Returns:
        AnalysisResult with scores, probability, flags, band and sales angle

    Raises:
        InvalidInputError: If the raw payload fails validation
    """
    response = validate_response(response)
    return _assess(response, score_dimensions(response))


def analyze_response(
    response: OnboardingResponse | Mapping[str, Any],
    include_explanation: bool = True,
) -> ScoringReport:
    """
    Compute the assessment together with the consultant briefing material.

    Args:
        response: OnboardingResponse or raw form payload
        include_explanation: Attach the rule-based plain-English explanation

    Returns:
        ScoringReport with result, per-dimension breakdown and explanation
    """
    response = validate_response(response)
    dimensions = score_dimensions(response)
    result = _assess(response, dimensions)

    return ScoringReport(
        result=result,
        breakdown=dimensions,
        explanation=build_explanation(response, result) if include_explanation else None,
    )


def _assess(
    response: OnboardingResponse,
    dimensions: dict[Dimension, DimensionScore],
) -> AnalysisResult:
    breakdown = _to_breakdown(dimensions)
    probability = compute_success_probability(breakdown)

    result = AnalysisResult(
        operational_score=breakdown.operational_score,
        budget_score=breakdown.budget_score,
        growth_score=breakdown.growth_score,
        intent_score=breakdown.intent_score,
        success_probability=probability,
        risk_flags=evaluate_risk_flags(response, breakdown),
        primary_sales_angle=select_sales_angle(breakdown),
        success_band=classify_band(probability),
    )

    logger.debug(
        f"Scored onboarding response: probability={result.success_probability} "
        f"band={result.success_band.value} flags={len(result.risk_flags)}"
    )
    return result


def _to_breakdown(dimensions: dict[Dimension, DimensionScore]) -> ScoreBreakdown:
    return ScoreBreakdown(
        operational_score=dimensions[Dimension.OPERATIONAL].score,
        budget_score=dimensions[Dimension.BUDGET].score,
        growth_score=dimensions[Dimension.GROWTH].score,
        intent_score=dimensions[Dimension.INTENT].score,
    )
