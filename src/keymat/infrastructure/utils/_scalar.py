"""
Scalar floating-point helpers.

Python's `/` raises `ZeroDivisionError` for float division by zero. The
kernel must follow IEEE-754 instead, so divisions go through
:func:`ieee_divide`.
"""

from __future__ import annotations

import math


def ieee_divide(a: float, b: float) -> float:
    """
    Divide with IEEE-754 semantics.

    Returns
    -------
    float
        ``a / b``; ``+-inf`` for a non-zero numerator over a (signed) zero and
        ``nan`` for ``0/0`` or a ``nan`` numerator.
    """
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def almost_equal_in_decimal_places(a: float, b: float, decimal_places: int) -> bool:
    """
    Return True if `a` and `b` agree when rounded to `decimal_places` digits.

    The comparison is absolute: ``|a - b| < 0.5 * 10**-decimal_places``.
    Non-finite values compare equal only when identical.
    """
    if math.isnan(a) or math.isnan(b):
        return False
    if math.isinf(a) or math.isinf(b):
        return a == b
    return abs(a - b) < 0.5 * 10.0 ** (-decimal_places)
