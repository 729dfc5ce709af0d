"""Input validation for onboarding responses."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from broker_scoring.core.logging import get_logger
from broker_scoring.core.scoring.types import InvalidInputError, OnboardingResponse

logger = get_logger(__name__)


def validate_response(raw: OnboardingResponse | Mapping[str, Any]) -> OnboardingResponse:
    """
    Build a validated OnboardingResponse from a raw questionnaire record.

    Args:
        raw: Form payload (camelCase or snake_case keys) or an
            OnboardingResponse, which is re-checked

    Returns:
        Immutable OnboardingResponse

    Raises:
        InvalidInputError: If an answer is outside its allowed set, a field is
            missing, or a lead count is negative or not a whole number
    """
    if isinstance(raw, OnboardingResponse):
        # model_copy and model_construct skip validation, so check instances again
        raw = raw.model_dump()
    elif not isinstance(raw, Mapping):
        raise InvalidInputError(
            f"Onboarding response must be a mapping (got {type(raw).__name__})"
        )

    try:
        return OnboardingResponse.model_validate(dict(raw))
    except ValidationError as e:
        errors = format_validation_errors(e)
        logger.warning(f"Rejected onboarding response: {len(errors)} invalid field(s)")
        raise InvalidInputError("Invalid onboarding response", errors=errors) from e


def format_validation_errors(error: ValidationError) -> list[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    messages = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "response"
        messages.append(f"{field}: {err['msg']}")
    return messages
