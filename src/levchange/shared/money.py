# src/levchange/shared/money.py
"""
Money Helpers - Decimal Coercion and Rounding

All monetary arithmetic runs in ``decimal`` with a dedicated context so that
chained multiply/divide/subtract operations never pick up binary
floating-point error. Values only become strings at the formatting boundary.

Files that USE this module:
- levchange.shared.validators (ZERO for clamping parsed amounts)
- levchange.application.converter (to_decimal, round_to_cents, MONEY_CONTEXT)
- levchange.application.change_calculator (to_decimal, round_to_cents)
- levchange.adapters.formatting.formatter (to_decimal, MONEY_CONTEXT)

Files that this module USES:
- None (pure utility functions)
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Union

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
CENTS = Decimal("0.01")

# Wide enough for any realistic till amount; rounding is always half-up.
MONEY_CONTEXT = Context(prec=34, rounding=ROUND_HALF_UP)

# Amounts of 10**24 and above are treated like infinity. Keeps every
# multiply, divide and quantize well inside MONEY_CONTEXT.
MAX_AMOUNT_EXPONENT = 23


def is_in_range(value: Decimal) -> bool:
    """Return True if ``value`` is finite and below 10**24 in magnitude."""
    return value.is_finite() and (value.is_zero() or value.adjusted() <= MAX_AMOUNT_EXPONENT)


def to_decimal(value: Number) -> Decimal:
    """
    Convert a numeric value to a finite Decimal.

    Floats go through their shortest repr, so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        The value as a Decimal, or 0 if it is NaN, infinite, out of range
        or not numeric
    """
    if isinstance(value, bool):
        value = int(value)
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, (int, str)):
            result = Decimal(value)
        else:
            result = Decimal(repr(float(value)))
    except (ArithmeticError, TypeError, ValueError):
        logger.debug("Non-numeric amount %r normalized to 0", value)
        return ZERO

    if not is_in_range(result):
        logger.debug("Non-finite or out-of-range amount %r normalized to 0", value)
        return ZERO
    return result


def round_to_cents(value: Decimal) -> Decimal:
    """
    Round a Decimal half-up to 2 decimal places (10.125 -> 10.13).

    Args:
        value: Finite Decimal to round

    Returns:
        The value quantized to cents, or 0 if it is too large to represent
    """
    try:
        with localcontext(MONEY_CONTEXT):
            return value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        logger.warning("Amount %s exceeds supported precision, normalized to 0", value)
        return ZERO
