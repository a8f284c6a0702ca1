"""
Decimal Utilities
blueprint/scoring/utils.py

Half-up rounding for percentages and slider scores. Python's round() is
banker's rounding, which would score 0.5 as 0.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percentage(earned: Number, maximum: Number) -> int:
    """
    Integer percentage of earned over maximum.

    Formula: round_half_up(earned / maximum × 100)
    Computed in Decimal so 45/60 gives exactly 75.
    """
    ratio = to_decimal(earned) * Decimal("100") / to_decimal(maximum)
    return round_half_up(ratio)
