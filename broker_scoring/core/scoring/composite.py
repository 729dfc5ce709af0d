"""Composite success probability.

Operational execution and budget fit most directly predict whether
delivered leads convert, so they carry 65% of the weight between them.
"""

from broker_scoring.core.scoring.rounding import clamp_score, round_half_up
from broker_scoring.core.scoring.types import DIMENSION_WEIGHTS, ScoreBreakdown


def compute_success_probability(breakdown: ScoreBreakdown) -> int:
    """
    Weighted aggregate of the four dimension scores.

    Args:
        breakdown: The four dimension scores

    Returns:
        Integer success probability 0-100
    """
    scores = breakdown.by_dimension()
    weighted = sum(scores[dim] * weight for dim, weight in DIMENSION_WEIGHTS.items())
    total_weight = sum(DIMENSION_WEIGHTS.values())
    return clamp_score(round_half_up(weighted, total_weight))
