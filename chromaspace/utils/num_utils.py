"""Scalar helpers shared by every color space."""

import math
from decimal import Decimal, ROUND_HALF_UP
from boundednumbers.functions import clamp as _bounded_clamp

# Decimal places kept when a unit value is written as a percentage
PERCENT_PRECISION = 3


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Clamp a value to the closed range [min_value, max_value].

    Args:
        value: Value to clamp
        min_value: Returned if value < min_value
        max_value: Returned if value > max_value

    Returns:
        The clamped value, or value itself when already in range
    """
    return _bounded_clamp(value, min_value, max_value)


def round_to(value: float, precision: int) -> float:
    """
    Round a value to ``precision`` decimal places, halves away from zero.

    Rounding works on the shortest decimal representation of the float, so
    ``round_to(1.2345, 3)`` gives ``1.235`` even though ``1.2345 * 1000`` is
    ``1234.4999...`` in binary floating point.

    Args:
        value: Value to round
        precision: Number of decimal places (negative rounds to tens, hundreds, ...)

    Returns:
        The rounded value. NaN and infinities are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value

    exact = Decimal(repr(value))
    if exact.as_tuple().exponent >= -precision:
        # Already has no digits past the requested place
        return value

    quantum = Decimal(1).scaleb(-precision)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def as_percentage(value: float, precision: int = PERCENT_PRECISION) -> str:
    """
    Format a unit value (1.0 == 100%) as a CSS percentage.

    >>> as_percentage(0.5)
    '50%'
    >>> as_percentage(0.12345)
    '12.345%'
    """
    percent = round_to(value * 100, precision)
    if not math.isfinite(percent):
        raise ValueError(f"Cannot format {value!r} as a percentage")
    if is_close_to_int(percent):
        # int() also folds -0.0 into 0
        return f"{int(round(percent))}%"
    text = f"{percent:.{max(precision, 0)}f}".rstrip("0").rstrip(".")
    return f"{text}%"
