# src/levchange/application/converter.py
"""
Currency Converter - EUR/BGN Conversion at the Fixed Rate

Converts amounts between Euro and Bulgarian Lev using the legally fixed
rate (1 EUR = 1.95583 BGN). Every result is rounded half-up to the cent.
Non-finite or non-numeric input converts to 0; nothing here raises.

Files that USE this module:
- levchange.application.change_calculator (eur_to_bgn, bgn_to_eur, to_eur)
- levchange.application.calculator_state (to_eur for normalized amounts)
- levchange.app (to_eur, to_bgn for the convert command)
- tests.test_converter (unit tests)

Files that this module USES:
- levchange.domain.models (Currency, EXCHANGE_RATE)
- levchange.shared.money (Decimal coercion and rounding)
"""
from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from levchange.domain.models import EXCHANGE_RATE, Currency
from levchange.shared.money import MONEY_CONTEXT, ZERO, Number, round_to_cents, to_decimal

logger = logging.getLogger(__name__)


def _eur_decimal_to_bgn(eur: Decimal) -> Decimal:
    try:
        with localcontext(MONEY_CONTEXT):
            return round_to_cents(eur * EXCHANGE_RATE)
    except ArithmeticError:
        logger.warning("Cannot convert %s EUR, normalized to 0", eur)
        return ZERO


def _bgn_decimal_to_eur(bgn: Decimal) -> Decimal:
    try:
        with localcontext(MONEY_CONTEXT):
            return round_to_cents(bgn / EXCHANGE_RATE)
    except ArithmeticError:
        logger.warning("Cannot convert %s BGN, normalized to 0", bgn)
        return ZERO


def bgn_to_eur(amount: Number) -> Decimal:
    """
    Convert Bulgarian Lev to Euro.

    Args:
        amount: Amount in BGN

    Returns:
        Amount in EUR, rounded half-up to 2 decimal places
    """
    return _bgn_decimal_to_eur(to_decimal(amount))


def eur_to_bgn(amount: Number) -> Decimal:
    """
    Convert Euro to Bulgarian Lev.

    Args:
        amount: Amount in EUR

    Returns:
        Amount in BGN, rounded half-up to 2 decimal places
    """
    return _eur_decimal_to_bgn(to_decimal(amount))


def to_eur(amount: Number, from_currency: Currency) -> Decimal:
    """
    Express an amount in Euro.

    An amount already in EUR is only rounded to the cent, never converted.

    Args:
        amount: The amount to convert
        from_currency: Currency the amount is given in

    Returns:
        Amount in EUR, rounded to 2 decimal places
    """
    value = to_decimal(amount)
    if from_currency is Currency.EUR:
        return round_to_cents(value)
    return _bgn_decimal_to_eur(value)


def to_bgn(amount: Number, from_currency: Currency) -> Decimal:
    """
    Express an amount in Bulgarian Lev.

    An amount already in BGN is only rounded to the cent, never converted.

    Args:
        amount: The amount to convert
        from_currency: Currency the amount is given in

    Returns:
        Amount in BGN, rounded to 2 decimal places
    """
    value = to_decimal(amount)
    if from_currency is Currency.BGN:
        return round_to_cents(value)
    return _eur_decimal_to_bgn(value)
