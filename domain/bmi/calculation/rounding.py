"""Decimal rounding used by BMI calculations."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    Works on the shortest decimal representation of the float, so
    2.675 rounds to 2.68 (builtin round() gives 2.67).

    Args:
        value: Finite number to round
        places: Number of decimal places (>= 0)

    Returns:
        float: Rounded value

    Example:
        >>> round_half_up(22.857142857142858, 2)
        22.86
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
