"""Exact half-up rounding for score arithmetic.

Scores are built from whole-number points and weights, so every ratio is
rounded from integers rather than floats. Python's round() uses banker's
rounding and float products such as 0.35 * 70 can land a hair under .5.
"""


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator / denominator to the nearest integer, halves going up.

    Args:
        numerator: Non-negative integer
        denominator: Positive integer

    Returns:
        The rounded quotient
    """
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if numerator < 0:
        raise ValueError("numerator must be non-negative")
    return (2 * numerator + denominator) // (2 * denominator)


def clamp_score(value: int, low: int = 0, high: int = 100) -> int:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))
