"""Rounding shared by every plan calculation."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity (106.5 -> 107).

    Compares the fractional part instead of adding 0.5, which would round
    0.49999999999999994 up.
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole
