"""Operational readiness dimension (35% weight).

Measures whether the broker can actually work the leads they buy: a CRM,
fast first contact, people to make the calls and a follow-up routine.

Key question: "Will a lead delivered today get called today?"
"""

from broker_scoring.core.scoring.dimensions.base import PointTable, score_answers
from broker_scoring.core.scoring.types import (
    CrmUsage,
    Dimension,
    DimensionScore,
    FollowUpClarity,
    OnboardingResponse,
    SpeedToContact,
    TeamSize,
)

POINTS: dict[str, PointTable] = {
    "crm_usage": {
        CrmUsage.FULL: 30,
        CrmUsage.BASIC: 15,
        CrmUsage.NONE: 0,
    },
    "speed_to_contact": {
        SpeedToContact.FIVE_MIN: 30,
        SpeedToContact.THIRTY_MIN: 20,
        SpeedToContact.SAME_DAY: 10,
        SpeedToContact.NEXT_DAY: 0,
    },
    "team_size": {
        TeamSize.DEDICATED: 20,
        TeamSize.SMALL: 14,
        TeamSize.SOLO: 8,
        TeamSize.UNCLEAR: 0,
    },
    "follow_up_clarity": {
        FollowUpClarity.CLEAR: 20,
        FollowUpClarity.BASIC: 10,
        FollowUpClarity.NONE: 0,
    },
}


def score_operational(response: OnboardingResponse) -> DimensionScore:
    """Score the Operational dimension."""
    return score_answers(
        Dimension.OPERATIONAL,
        {
            "crm_usage": response.crm_usage,
            "speed_to_contact": response.speed_to_contact,
            "team_size": response.team_size,
            "follow_up_clarity": response.follow_up_clarity,
        },
        POINTS,
    )
