"""
Numeric helpers with IEEE-style behaviour.

The engine never sanitizes degenerate input: a zero denominator yields
inf or nan and a nan flows through rounding unchanged.  Python raises
ZeroDivisionError and ValueError in those cases, so every division and
rounding step in the engine goes through these helpers instead.

Rounding is half-up (toward +inf on exact ties), matching the way the
published tables were computed, rather than Python's half-even round().
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE semantics: x/0 -> +/-inf, 0/0 -> nan.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        Quotient, inf or nan
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def round_half_up(value: float) -> float:
    """
    Round to the nearest integer, ties toward +inf.

    Non-finite values are returned unchanged.  Finite results are ints.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def round_to_decimals(value: float, decimals: int) -> float:
    """Round half-up to a fixed number of decimals (nan/inf pass through)."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_increment(value: float, increment: float) -> float:
    """
    Round to the nearest multiple of increment (e.g. 2.5 kg plates).

    Args:
        value: Value to round
        increment: Step size, must be non-zero

    Returns:
        Nearest multiple, or nan/inf unchanged
    """
    return round_half_up(value / increment) * increment
