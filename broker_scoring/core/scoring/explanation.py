"""Rule-based plain-English explanation of a broker's scores.

Used for the consultant briefing when no AI summary is available. The
text only restates deterministic results; it never adds new judgements.
"""

from broker_scoring.core.scoring.flags import RULES_BY_FLAG
from broker_scoring.core.scoring.types import (
    AnalysisResult,
    CrmUsage,
    OnboardingResponse,
    PricingComfort,
    SpeedToContact,
)

STRONG_OPERATIONAL_SCORE = 80
OPTIMAL_BUDGET_SCORE = 70

BAND_MEANINGS = {
    "Low": "a low likelihood of success without significant changes",
    "Medium": "a moderate likelihood of success with some coaching",
    "High": "a high likelihood of success",
    "Excellent": "an excellent fit for immediate onboarding",
}


def build_explanation(response: OnboardingResponse, result: AnalysisResult) -> str:
    """
    Explain a result in a few short paragraphs.

    Args:
        response: The validated onboarding response
        result: The AnalysisResult computed from it

    Returns:
        Paragraphs separated by blank lines
    """
    paragraphs = [
        _operational_paragraph(response, result),
        _budget_paragraph(response, result),
        _overall_paragraph(result),
    ]
    return "\n\n".join(paragraphs)


def _operational_paragraph(response: OnboardingResponse, result: AnalysisResult) -> str:
    strength = (
        "strong" if result.operational_score >= STRONG_OPERATIONAL_SCORE else "limited"
    )
    text = f"Operational readiness is {strength} ({result.operational_score}/100)."
    if response.crm_usage == CrmUsage.NONE:
        text += " The lack of a CRM system typically lowers conversion efficiency."
    if response.speed_to_contact == SpeedToContact.NEXT_DAY:
        text += " Delayed lead contact is a significant barrier to success."
    return text


def _budget_paragraph(response: OnboardingResponse, result: AnalysisResult) -> str:
    alignment = "optimal" if result.budget_score >= OPTIMAL_BUDGET_SCORE else "a concern"
    text = f"Budget alignment is {alignment} ({result.budget_score}/100)."
    if response.pricing_comfort == PricingComfort.SENSITIVE:
        text += (
            " High price sensitivity suggests a need for education on"
            " cost-per-acquisition vs lead cost."
        )
    return text


def _overall_paragraph(result: AnalysisResult) -> str:
    band = result.success_band.value
    text = (
        f"Overall, the {result.success_probability}% success probability ({band})"
        f" indicates {BAND_MEANINGS[band]}."
        f" Suggested focus for the call: {result.primary_sales_angle.value}."
    )
    for flag in result.risk_flags:
        text += f" Risk ({flag.value}): {RULES_BY_FLAG[flag].reason}."
    return text
