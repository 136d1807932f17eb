"""
Number formatting for measure values.

Thousands grouping, fixed decimal places, and half-away-from-zero rounding
(2.5 -> "3", 0.125 -> "0.13"). The float is rounded from its shortest repr,
so 1.005 formats as "1.01" rather than the "1.00" that binary rounding gives.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from .config import settings


def format_number(value: float, decimals: Optional[int] = None,
                  decimal_point: Optional[str] = None,
                  thousands_separator: Optional[str] = None) -> str:
    """
    Format a number with grouped thousands and a fixed number of decimals.

    Args:
        value: the number to format
        decimals: places after the decimal point (settings.FORMAT_DECIMALS if None)
        decimal_point: settings.FORMAT_DECIMAL_POINT if None
        thousands_separator: settings.FORMAT_THOUSANDS_SEPARATOR if None

    Returns:
        e.g. format_number(1083.19052, 2) -> "1,083.19"
    """
    if decimals is None:
        decimals = settings.FORMAT_DECIMALS
    if decimal_point is None:
        decimal_point = settings.FORMAT_DECIMAL_POINT
    if thousands_separator is None:
        thousands_separator = settings.FORMAT_THOUSANDS_SEPARATOR

    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    if not math.isfinite(value):
        return str(value)

    with localcontext() as ctx:
        # Room for the largest float (~1e308) plus every requested decimal
        ctx.prec = 330 + decimals
        rounded = Decimal(repr(float(value))).quantize(
            Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP,
        )
    text = f"{rounded:,.{decimals}f}"

    # Swap via placeholder so "," -> "." and "." -> "," can't collide
    return (
        text.replace(",", "\0")
        .replace(".", decimal_point)
        .replace("\0", thousands_separator)
    )
