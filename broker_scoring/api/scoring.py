"""API endpoint for broker onboarding scoring."""

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from broker_scoring.core.config import get_settings
from broker_scoring.core.logging import get_logger, log_with_context
from broker_scoring.core.scoring import InvalidInputError, ScoringReport, analyze_response

logger = get_logger(__name__)

router = APIRouter()


@router.post("/onboarding/score", response_model=ScoringReport)
async def score_onboarding_response(
    payload: dict[str, Any] = Body(..., description="Onboarding questionnaire answers"),  # noqa: B008
) -> ScoringReport:
    """
    Score a submitted broker onboarding questionnaire.

    Args:
        payload: Questionnaire answers (camelCase keys, as the form submits)

    Returns:
        ScoringReport with result, per-dimension breakdown and explanation

    Raises:
        HTTPException 422: If the answers are invalid
        HTTPException 500: If scoring fails unexpectedly
    """
    settings = get_settings()

    try:
        report = analyze_response(
            payload, include_explanation=settings.INCLUDE_EXPLANATION
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=e.errors) from e
    except Exception as e:
        logger.exception("Failed to score onboarding response")
        raise HTTPException(
            status_code=500,
            detail="Failed to score onboarding response",
        ) from e

    log_with_context(
        logger,
        logging.INFO,
        "Scored onboarding response",
        success_probability=report.result.success_probability,
        success_band=report.result.success_band.value,
        risk_flags=len(report.result.risk_flags),
    )

    return report
