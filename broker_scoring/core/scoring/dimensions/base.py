"""Shared table-driven scoring for the categorical dimensions."""

from enum import Enum

from broker_scoring.core.scoring.rounding import round_half_up
from broker_scoring.core.scoring.types import Dimension, DimensionScore, FactorScore

PointTable = dict[Enum, int]


def score_answers(
    dimension: Dimension,
    answers: dict[str, Enum],
    tables: dict[str, PointTable],
) -> DimensionScore:
    """
    Sum the points for each answer and normalize to 0-100.

    Args:
        dimension: Which dimension is being scored
        answers: Questionnaire field name -> answer
        tables: Questionnaire field name -> points per answer

    Returns:
        DimensionScore with per-answer factors
    """
    factors: dict[str, FactorScore] = {}
    for field, answer in answers.items():
        table = tables[field]
        factors[field] = FactorScore(
            answer=answer.value,
            points=table[answer],
            max_points=max(table.values()),
        )

    earned = sum(f.points for f in factors.values())
    attainable = sum(f.max_points for f in factors.values())
    score = round_half_up(100 * earned, attainable)

    return DimensionScore(
        dimension=dimension,
        score=score,
        factors=factors,
        summary=_summarize(dimension, score),
    )


def _summarize(dimension: Dimension, score: int) -> str:
    label = dimension.value.capitalize()
    if score >= 80:
        return f"{label} readiness is strong"
    elif score >= 50:
        return f"{label} readiness is workable but has gaps"
    else:
        return f"{label} readiness is weak"
