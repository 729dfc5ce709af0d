"""Broker readiness dimension scorers."""

from broker_scoring.core.scoring.dimensions.budget import score_budget
from broker_scoring.core.scoring.dimensions.growth import score_growth
from broker_scoring.core.scoring.dimensions.intent import score_intent
from broker_scoring.core.scoring.dimensions.operational import score_operational

__all__ = [
    "score_operational",
    "score_budget",
    "score_growth",
    "score_intent",
]
