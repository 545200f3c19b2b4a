# src/levchange/adapters/formatting/formatter.py
"""
Result Formatter - Text Formatting and Presentation

This module renders amounts and calculator results as plain text: fixed
decimal amounts, amounts with their currency symbol, and the message block
for each display state (awaiting input, insufficient payment, exact
payment, change due). Messages are the Bulgarian texts shown at the till.

Files that USE this module:
- levchange.app (prints rendered results and conversions)
- tests.test_formatter (unit tests)

Files that this module USES:
- levchange.application.calculator_state (CalculatorSnapshot, DisplayState)
- levchange.domain.models (Currency, CURRENCY_SYMBOLS, CURRENCY_NAMES)
- levchange.shared.money (to_decimal, MONEY_CONTEXT)
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List

from levchange.application.calculator_state import CalculatorSnapshot, DisplayState
from levchange.domain.models import CURRENCY_NAMES, CURRENCY_SYMBOLS, Currency
from levchange.shared.money import MONEY_CONTEXT, Number, ZERO, to_decimal


MESSAGES = {
    "awaiting_input": "Въведете цена и платена сума, за да видите ресто",
    "insufficient_title": "Недостатъчно платено!",
    "insufficient_detail": "Платената сума е по-малка от цената",
    "exact_title": "Точно платено!",
    "exact_detail": "Няма нужда от ресто",
    "change_title": "Вашето ресто е:",
    "change_eur_caption": "Евро (ще получите)",
    "change_separator": "или равностойно на",
    "change_bgn_caption": "Лева (за справка)",
}


def format_amount(amount: Number, decimals: int = 2) -> str:
    """
    Format an amount with a fixed number of decimal places.

    Args:
        amount: The amount to format
        decimals: Number of decimal places (default: 2)

    Returns:
        Formatted string like '10.50'; NaN or infinite input gives '0.00'
    """
    value = to_decimal(amount)
    exponent = Decimal(1).scaleb(-decimals)
    try:
        with localcontext(MONEY_CONTEXT):
            value = value.quantize(exponent, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        value = ZERO.quantize(exponent)
    return f"{value:f}"


def format_money(amount: Number, currency: Currency, decimals: int = 2) -> str:
    """
    Format an amount followed by its currency symbol, e.g. '4.36 лв'.
    """
    return f"{format_amount(amount, decimals)} {CURRENCY_SYMBOLS[currency]}"


def conversion_lines(amount: Number, currency: Currency, eur: Number, bgn: Number,
                     decimals: int = 2) -> str:
    """
    Format an amount together with its value in both currencies.

    Args:
        amount: The original amount
        currency: Currency of the original amount
        eur: The amount expressed in EUR
        bgn: The amount expressed in BGN
        decimals: Number of decimal places

    Returns:
        Two-line string: the original amount, then '= <eur> | <bgn>'
    """
    return (
        f"{format_money(amount, currency, decimals)} ({CURRENCY_NAMES[currency]})\n"
        f"= {format_money(eur, Currency.EUR, decimals)} | {format_money(bgn, Currency.BGN, decimals)}"
    )


def render_result(snapshot: CalculatorSnapshot, decimals: int = 2) -> str:
    """
    Render the result area for a calculator snapshot.

    Args:
        snapshot: Derived calculator values
        decimals: Number of decimal places for amounts

    Returns:
        Multi-line message for the snapshot's display state
    """
    state = snapshot.display_state

    if state is DisplayState.AWAITING_INPUT:
        return MESSAGES["awaiting_input"]

    if state is DisplayState.INSUFFICIENT:
        return f"{MESSAGES['insufficient_title']}\n{MESSAGES['insufficient_detail']}"

    if state is DisplayState.EXACT:
        return f"{MESSAGES['exact_title']}\n{MESSAGES['exact_detail']}"

    result = snapshot.change_result
    lines: List[str] = [
        MESSAGES["change_title"],
        format_money(result.eur, Currency.EUR, decimals),
        MESSAGES["change_eur_caption"],
        MESSAGES["change_separator"],
        format_money(result.bgn, Currency.BGN, decimals),
        MESSAGES["change_bgn_caption"],
    ]
    return "\n".join(lines)
