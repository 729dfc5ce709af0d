"""Budget alignment dimension (30% weight).

Measures whether the broker already spends on leads, knows what a lead
should cost them and is comfortable with our pricing.
"""

from broker_scoring.core.scoring.dimensions.base import PointTable, score_answers
from broker_scoring.core.scoring.types import (
    CplAwareness,
    Dimension,
    DimensionScore,
    MonthlySpend,
    OnboardingResponse,
    PricingComfort,
)

POINTS: dict[str, PointTable] = {
    "monthly_spend": {
        MonthlySpend.OVER_30K: 40,
        MonthlySpend.FROM_15K_TO_30K: 30,
        MonthlySpend.FROM_5K_TO_15K: 20,
        MonthlySpend.UNDER_5K: 10,
        MonthlySpend.NONE: 0,
    },
    "cpl_awareness": {
        CplAwareness.YES: 30,
        CplAwareness.ROUGH: 15,
        CplAwareness.NO: 0,
    },
    "pricing_comfort": {
        PricingComfort.COMFORTABLE: 30,
        PricingComfort.FLEXIBLE: 18,
        PricingComfort.SENSITIVE: 0,
    },
}


def score_budget(response: OnboardingResponse) -> DimensionScore:
    """Score the Budget dimension."""
    return score_answers(
        Dimension.BUDGET,
        {
            "monthly_spend": response.monthly_spend,
            "cpl_awareness": response.cpl_awareness,
            "pricing_comfort": response.pricing_comfort,
        },
        POINTS,
    )
