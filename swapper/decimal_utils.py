"""Shared high-precision Decimal utilities for amount arithmetic.

All amount arithmetic must use a high-precision context to avoid
rounding artifacts with very large values (up to 10^77 for uint256).
"""

from __future__ import annotations

import decimal
from decimal import Decimal

# 78 digits of precision, enough for uint256 values (up to ~10^77)
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)

ZERO = Decimal(0)

Amount = Decimal | int | str


def to_decimal(value: Amount) -> Decimal:
    """Convert an int, string or Decimal amount to Decimal.

    Raises:
        TypeError: If value is a float (binary floats lose precision)
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (bool, float)):
        raise TypeError(f"Amount must be int, str or Decimal, got {type(value).__name__}")
    return Decimal(value)


def safe_div(a: Decimal, b: Decimal) -> Decimal:
    """Divide a by b, returning zero when b is zero."""
    if b == 0:
        return ZERO
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return a / b


__all__ = [
    "DECIMAL_HIGH_PREC_CONTEXT",
    "ZERO",
    "Amount",
    "to_decimal",
    "safe_div",
]
