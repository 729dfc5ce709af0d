"""Risk flags for broker readiness.

Flags are independent signals a consultant should raise on the call even
when the composite score looks healthy. Every rule is evaluated; none
excludes another.
"""

from dataclasses import dataclass
from typing import Callable

from broker_scoring.core.scoring.types import (
    FollowUpClarity,
    GeographicFocusClarity,
    GrowthGoalClarity,
    OnboardingResponse,
    PricingComfort,
    ProductFocusClarity,
    RiskFlag,
    ScoreBreakdown,
    Timeline,
)

HIGH_VOLUME_LEADS_WEEKLY = 20
LOW_OPERATIONAL_SCORE = 30


@dataclass(frozen=True)
class RiskRule:
    """Definition of a risk flag rule."""

    flag: RiskFlag
    reason: str
    check: Callable[[OnboardingResponse, ScoreBreakdown], bool]


# =============================================================================
# Rule Definitions
# =============================================================================

RISK_RULES = [
    RiskRule(
        flag=RiskFlag.CAPACITY_UNDEFINED,
        reason="No weekly lead capacity was stated, so volume cannot be planned",
        check=lambda r, s: r.max_capacity_weekly == 0,
    ),
    RiskRule(
        flag=RiskFlag.CAPACITY_MISMATCH,
        reason="Requested lead volume exceeds the stated weekly capacity",
        check=lambda r, s: (
            r.max_capacity_weekly > 0 and r.desired_leads_weekly > r.max_capacity_weekly
        ),
    ),
    RiskRule(
        flag=RiskFlag.PRICE_SENSITIVE_HIGH_VOLUME,
        reason="Price-sensitive broker asking for high weekly volume",
        check=lambda r, s: (
            r.pricing_comfort == PricingComfort.SENSITIVE
            and r.desired_leads_weekly >= HIGH_VOLUME_LEADS_WEEKLY
        ),
    ),
    RiskRule(
        flag=RiskFlag.LOW_OPERATIONAL_READINESS,
        reason="Operational setup is unlikely to convert delivered leads",
        check=lambda r, s: s.operational_score < LOW_OPERATIONAL_SCORE,
    ),
    RiskRule(
        flag=RiskFlag.NO_FOLLOW_UP_PROCESS,
        reason="No follow-up process for leads that don't answer first time",
        check=lambda r, s: r.follow_up_clarity == FollowUpClarity.NONE,
    ),
    RiskRule(
        flag=RiskFlag.UNCLEAR_TARGETING,
        reason="Neither product nor geographic focus is defined",
        check=lambda r, s: (
            r.product_focus_clarity == ProductFocusClarity.UNCLEAR
            and r.geographic_focus_clarity == GeographicFocusClarity.UNDEFINED
        ),
    ),
    RiskRule(
        flag=RiskFlag.EXPLORATORY_ONLY,
        reason="Only exploring, with no concrete growth goal",
        check=lambda r, s: (
            r.timeline == Timeline.EXPLORING
            and r.growth_goal_clarity == GrowthGoalClarity.VAGUE
        ),
    ),
]

RULES_BY_FLAG = {rule.flag: rule for rule in RISK_RULES}


def evaluate_risk_flags(
    response: OnboardingResponse,
    breakdown: ScoreBreakdown,
) -> tuple[RiskFlag, ...]:
    """
    Evaluate every risk rule.

    Args:
        response: Validated onboarding response
        breakdown: Dimension scores derived from the response

    Returns:
        Raised flags, in RISK_RULES order
    """
    return tuple(rule.flag for rule in RISK_RULES if rule.check(response, breakdown))
