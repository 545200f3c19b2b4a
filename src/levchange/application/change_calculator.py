# src/levchange/application/change_calculator.py
"""
Change Calculator - Change Owed in Both Currencies

Computes the change due for a purchase. Insufficient payment is reported
as ``None`` (never an exception); exact payment is a zero ChangeResult.

Two entry points:
- calculate_change: both amounts already normalized to EUR
- calculate_change_with_currencies: amounts in their original currencies;
  preferred, because same-currency payments are settled without any
  conversion round-trip (100 BGN - 10 BGN is exactly 90 BGN)

Files that USE this module:
- levchange.application.calculator_state (derive uses calculate_change_with_currencies)
- levchange.app (change command)
- tests.test_change_calculator (unit tests)

Files that this module USES:
- levchange.application.converter (conversions at the fixed rate)
- levchange.domain.models (ChangeResult, Currency)
- levchange.shared.money (Decimal coercion and rounding)
"""
from __future__ import annotations

import logging
from decimal import Decimal, localcontext
from typing import Optional

from levchange.application.converter import bgn_to_eur, eur_to_bgn, to_eur
from levchange.domain.models import ChangeResult, Currency
from levchange.shared.money import MONEY_CONTEXT, ZERO, Number, round_to_cents, to_decimal

logger = logging.getLogger(__name__)


def _difference(price: Decimal, paid: Decimal) -> Optional[Decimal]:
    """Return paid - price rounded to cents, or None if it is negative."""
    try:
        with localcontext(MONEY_CONTEXT):
            change = paid - price
    except ArithmeticError:
        logger.warning("Cannot subtract %s from %s, change normalized to 0", price, paid)
        change = ZERO
    if change < 0:
        logger.debug("Insufficient payment: paid=%s price=%s", paid, price)
        return None
    return round_to_cents(change)


def calculate_change(price_in_eur: Number, paid_in_eur: Number) -> Optional[ChangeResult]:
    """
    Calculate change from amounts already expressed in Euro.

    The BGN figure is derived from the rounded EUR change so the pair is
    always consistent.

    Args:
        price_in_eur: Total price in EUR
        paid_in_eur: Amount paid in EUR

    Returns:
        ChangeResult in both currencies, or None if payment is insufficient
    """
    eur_change = _difference(to_decimal(price_in_eur), to_decimal(paid_in_eur))
    if eur_change is None:
        return None
    return ChangeResult(eur=eur_change, bgn=eur_to_bgn(eur_change))


def calculate_change_with_currencies(
    price: Number,
    price_currency: Currency,
    paid: Number,
    paid_currency: Currency,
) -> Optional[ChangeResult]:
    """
    Calculate change from amounts in their original currencies.

    If both amounts share a currency, the difference is taken in that
    currency and the other currency is derived from the rounded result.
    Otherwise both operands are converted to EUR (each rounded to the
    cent) before subtracting.

    Args:
        price: The price amount
        price_currency: Currency of the price
        paid: The amount paid
        paid_currency: Currency of the paid amount

    Returns:
        ChangeResult in both currencies, or None if payment is insufficient
    """
    price_value = to_decimal(price)
    paid_value = to_decimal(paid)

    if price_currency is paid_currency:
        change = _difference(price_value, paid_value)
        if change is None:
            return None
        if price_currency is Currency.EUR:
            return ChangeResult(eur=change, bgn=eur_to_bgn(change))
        return ChangeResult(eur=bgn_to_eur(change), bgn=change)

    return calculate_change(
        to_eur(price_value, price_currency),
        to_eur(paid_value, paid_currency),
    )
