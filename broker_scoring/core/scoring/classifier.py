"""Success band and sales angle classification."""

from broker_scoring.core.scoring.types import (
    SALES_ANGLES,
    SUCCESS_BANDS,
    Dimension,
    SalesAngle,
    ScoreBreakdown,
    SuccessBand,
)


def classify_band(success_probability: int) -> SuccessBand:
    """Map a 0-100 success probability to its band (inclusive lower bounds)."""
    for lower_bound, band in SUCCESS_BANDS:
        if success_probability >= lower_bound:
            return band
    return SuccessBand.LOW


def weakest_dimension(breakdown: ScoreBreakdown) -> Dimension | None:
    """
    Find the lowest-scoring dimension.

    Ties go to the earlier dimension in Dimension order, so execution risk
    (Operational) is addressed before Budget, Growth and Intent.

    Returns:
        The weakest dimension, or None when all four scores are equal
    """
    scores = breakdown.by_dimension()
    if len(set(scores.values())) == 1:
        return None
    return min(scores, key=lambda dim: scores[dim])


def select_sales_angle(breakdown: ScoreBreakdown) -> SalesAngle:
    """Pick the consultant's conversation focus from the weakest dimension."""
    weakest = weakest_dimension(breakdown)
    if weakest is None:
        return SalesAngle.BALANCED_PARTNERSHIP
    return SALES_ANGLES[weakest]
