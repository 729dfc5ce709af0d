"""Intent / capacity dimension (15% weight).

Compares the weekly lead volume a broker asks for with what they say they
can handle. Asking for close to full capacity signals engaged intent;
asking for more than capacity is penalized at 50 points per 100% overshoot.
A broker with no stated capacity scores 0.
"""

from broker_scoring.core.scoring.rounding import clamp_score, round_half_up
from broker_scoring.core.scoring.types import (
    Dimension,
    DimensionScore,
    FactorScore,
    OnboardingResponse,
)

OVERSHOOT_PENALTY = 50


def score_intent(response: OnboardingResponse) -> DimensionScore:
    """Score the Intent dimension."""
    desired = response.desired_leads_weekly
    capacity = response.max_capacity_weekly

    score = capacity_score(desired, capacity)

    if capacity == 0:
        summary = "No weekly capacity stated"
    elif desired > capacity:
        summary = f"Wants {desired} leads/week against capacity of {capacity}"
    elif desired == 0:
        summary = "No weekly lead volume requested"
    else:
        summary = f"Wants {desired} of {capacity} leads/week capacity"

    return DimensionScore(
        dimension=Dimension.INTENT,
        score=score,
        factors={
            "capacity_ratio": FactorScore(
                answer=f"{desired}/{capacity}",
                points=score,
                max_points=100,
            ),
        },
        summary=summary,
    )


def capacity_score(desired: int, capacity: int) -> int:
    """
    Score desired weekly volume against stated capacity.

    Args:
        desired: desiredLeadsWeekly (>= 0)
        capacity: maxCapacityWeekly (>= 0)

    Returns:
        Integer score 0-100
    """
    if capacity == 0 or desired == 0:
        return 0

    if desired <= capacity:
        return round_half_up(100 * desired, capacity)

    # 50 * (r - 1) == 50 * (desired - capacity) / capacity
    penalty = round_half_up(OVERSHOOT_PENALTY * (desired - capacity), capacity)
    return clamp_score(100 - penalty)
