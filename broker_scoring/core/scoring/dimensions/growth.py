"""Growth clarity dimension (20% weight)."""

from broker_scoring.core.scoring.dimensions.base import PointTable, score_answers
from broker_scoring.core.scoring.types import (
    Dimension,
    DimensionScore,
    GeographicFocusClarity,
    GrowthGoalClarity,
    OnboardingResponse,
    ProductFocusClarity,
    Timeline,
)

POINTS: dict[str, PointTable] = {
    "product_focus_clarity": {
        ProductFocusClarity.CLEAR: 25,
        ProductFocusClarity.MULTIPLE: 15,
        ProductFocusClarity.UNCLEAR: 0,
    },
    "geographic_focus_clarity": {
        GeographicFocusClarity.CLEAR: 25,
        GeographicFocusClarity.SEMI: 12,
        GeographicFocusClarity.UNDEFINED: 0,
    },
    "growth_goal_clarity": {
        GrowthGoalClarity.NUMERIC: 25,
        GrowthGoalClarity.GENERAL: 12,
        GrowthGoalClarity.VAGUE: 0,
    },
    "timeline": {
        Timeline.IMMEDIATE: 25,
        Timeline.THIRTY_DAYS: 15,
        Timeline.EXPLORING: 0,
    },
}


def score_growth(response: OnboardingResponse) -> DimensionScore:
    """Score the Growth dimension."""
    return score_answers(
        Dimension.GROWTH,
        {
            "product_focus_clarity": response.product_focus_clarity,
            "geographic_focus_clarity": response.geographic_focus_clarity,
            "growth_goal_clarity": response.growth_goal_clarity,
            "timeline": response.timeline,
        },
        POINTS,
    )
