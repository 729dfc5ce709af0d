"""Broker readiness scoring.

Scores a broker's onboarding questionnaire across 4 dimensions:
- Operational (35%): CRM, contact speed, team, follow-up
- Budget (30%): Spend, cost-per-lead awareness, pricing comfort
- Growth (20%): Product/geographic focus, goals, timeline
- Intent (15%): Desired volume vs stated capacity

Usage:
    from broker_scoring.core.scoring import compute_scores

    result = compute_scores(form_payload)
    print(f"{result.success_band.value} ({result.success_probability}%)")
"""

from broker_scoring.core.scoring.engine import (
    analyze_response,
    compute_scores,
    score_breakdown,
)
from broker_scoring.core.scoring.explanation import build_explanation
from broker_scoring.core.scoring.records import response_from_record, to_analysis_record
from broker_scoring.core.scoring.types import (
    DIMENSION_WEIGHTS,
    AnalysisResult,
    Dimension,
    DimensionScore,
    InvalidInputError,
    OnboardingResponse,
    RiskFlag,
    SalesAngle,
    ScoreBreakdown,
    ScoringReport,
    SuccessBand,
)
from broker_scoring.core.scoring.validation import validate_response

__all__ = [
    "compute_scores",
    "analyze_response",
    "score_breakdown",
    "validate_response",
    "build_explanation",
    "response_from_record",
    "to_analysis_record",
    "AnalysisResult",
    "Dimension",
    "DimensionScore",
    "InvalidInputError",
    "OnboardingResponse",
    "RiskFlag",
    "SalesAngle",
    "ScoreBreakdown",
    "ScoringReport",
    "SuccessBand",
    "DIMENSION_WEIGHTS",
]
