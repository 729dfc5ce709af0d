"""Mapping between scoring models and stored table rows.

The engine never reads or writes storage itself. These helpers let the
submission handler load a stored broker_onboarding_responses row and
build the broker_analysis row it will insert.
"""

from collections.abc import Mapping
from typing import Any

from broker_scoring.core.scoring.types import AnalysisResult, OnboardingResponse
from broker_scoring.core.scoring.validation import validate_response

# broker_onboarding_responses column -> OnboardingResponse attribute
RESPONSE_COLUMNS = {
    "crm_usage": "crm_usage",
    "speed_to_contact": "speed_to_contact",
    "team_size": "team_size",
    "follow_up_process": "follow_up_clarity",
    "monthly_lead_spend": "monthly_spend",
    "cpl_awareness": "cpl_awareness",
    "pricing_comfort": "pricing_comfort",
    "desired_leads_weekly": "desired_leads_weekly",
    "max_capacity_weekly": "max_capacity_weekly",
    "product_focus_clarity": "product_focus_clarity",
    "geographic_focus_clarity": "geographic_focus_clarity",
    "growth_goal_clarity": "growth_goal_clarity",
    "timeline_to_start": "timeline",
}


def response_from_record(row: Mapping[str, Any]) -> OnboardingResponse:
    """
    Build an OnboardingResponse from a stored response row.

    Columns that are not scoring inputs (contact details, ids) are ignored.

    Raises:
        InvalidInputError: If the stored answers are not scoreable
    """
    payload = {attr: row[col] for col, attr in RESPONSE_COLUMNS.items() if col in row}
    return validate_response(payload)


def to_analysis_record(
    result: AnalysisResult,
    response_id: str | None = None,
    broker_id: str | None = None,
    explanation: str | None = None,
) -> dict[str, Any]:
    """
    Build the broker_analysis row for a result.

    Args:
        result: Computed AnalysisResult
        response_id: Id of the stored onboarding response
        broker_id: Id of the broker, if signed in
        explanation: Optional explanation text for ai_explanation

    Returns:
        Dict ready for insertion
    """
    return {
        "response_id": response_id,
        "broker_id": broker_id,
        "operational_score": result.operational_score,
        "budget_score": result.budget_score,
        "growth_score": result.growth_score,
        "intent_score": result.intent_score,
        "success_probability": result.success_probability,
        "risk_flags": [flag.value for flag in result.risk_flags],
        "primary_sales_angle": result.primary_sales_angle.value,
        "success_band": result.success_band.value,
        "ai_explanation": explanation,
    }
