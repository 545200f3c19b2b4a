# src/levchange/application/calculator_state.py
"""
Calculator State - Inputs and Derived Values for One Calculation

Holds the four raw inputs of the change calculator (price text, price
currency, paid text, paid currency) as an immutable value and derives
everything a front end needs to display from them. Transitions return new
inputs instead of mutating, and derive() is a pure function: the same
inputs always give the same snapshot.

Files that USE this module:
- levchange.adapters.formatting.formatter (render_result takes a CalculatorSnapshot)
- levchange.app (change command builds inputs and derives a snapshot)
- tests.test_calculator_state (unit tests)

Files that this module USES:
- levchange.application.change_calculator (calculate_change_with_currencies)
- levchange.application.converter (to_eur for normalized amounts)
- levchange.domain.models (ChangeResult, Currency)
- levchange.shared.validators (parse_amount for raw text)
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Optional

from levchange.application.change_calculator import calculate_change_with_currencies
from levchange.application.converter import to_eur
from levchange.domain.models import ChangeResult, Currency
from levchange.shared.validators import parse_amount


class DisplayState(Enum):
    """What the result area should show."""
    AWAITING_INPUT = "awaiting_input"
    INSUFFICIENT = "insufficient"
    EXACT = "exact"
    CHANGE_DUE = "change_due"


@dataclass(frozen=True)
class CalculatorInputs:
    """
    Raw calculator inputs as typed by the cashier.

    Attributes:
        price_input: Text of the price field
        price_currency: Currency of the price
        paid_input: Text of the paid amount field
        paid_currency: Currency of the paid amount
    """
    price_input: str = ""
    price_currency: Currency = Currency.EUR
    paid_input: str = ""
    paid_currency: Currency = Currency.BGN

    def with_price_input(self, value: str) -> CalculatorInputs:
        return replace(self, price_input=value)

    def with_paid_input(self, value: str) -> CalculatorInputs:
        return replace(self, paid_input=value)

    def with_price_currency(self, currency: Currency) -> CalculatorInputs:
        return replace(self, price_currency=currency)

    def with_paid_currency(self, currency: Currency) -> CalculatorInputs:
        return replace(self, paid_currency=currency)

    def toggle_price_currency(self) -> CalculatorInputs:
        return replace(self, price_currency=self.price_currency.other)

    def toggle_paid_currency(self) -> CalculatorInputs:
        return replace(self, paid_currency=self.paid_currency.other)


def initial_inputs(
    price_currency: Optional[Currency] = None,
    paid_currency: Optional[Currency] = None,
) -> CalculatorInputs:
    """
    Return empty inputs (the "reset" state).

    Currencies default to the configured DEFAULT_PRICE_CURRENCY and
    DEFAULT_PAID_CURRENCY (EUR price, BGN payment unless overridden).
    """
    if price_currency is None or paid_currency is None:
        # Lazy import so the engine does not require a loaded configuration
        from levchange.config import settings
        price_currency = price_currency or settings.price_currency
        paid_currency = paid_currency or settings.paid_currency
    return CalculatorInputs(price_currency=price_currency, paid_currency=paid_currency)


@dataclass(frozen=True)
class CalculatorSnapshot:
    """
    Values derived from one set of calculator inputs.

    Attributes:
        inputs: The inputs this snapshot was derived from
        price_value: Parsed price in its own currency
        paid_value: Parsed payment in its own currency
        price_in_eur: Price normalized to EUR
        paid_in_eur: Payment normalized to EUR
        change_result: Change owed, or None if payment is insufficient
    """
    inputs: CalculatorInputs
    price_value: Decimal
    paid_value: Decimal
    price_in_eur: Decimal
    paid_in_eur: Decimal
    change_result: Optional[ChangeResult]

    @property
    def has_valid_inputs(self) -> bool:
        """Both fields hold a positive amount."""
        return self.price_value > 0 and self.paid_value > 0

    @property
    def is_payment_sufficient(self) -> bool:
        return self.change_result is not None

    @property
    def display_state(self) -> DisplayState:
        if not self.has_valid_inputs:
            return DisplayState.AWAITING_INPUT
        if self.change_result is None:
            return DisplayState.INSUFFICIENT
        if self.change_result.is_exact:
            return DisplayState.EXACT
        return DisplayState.CHANGE_DUE


def derive(inputs: CalculatorInputs) -> CalculatorSnapshot:
    """
    Derive parsed, normalized and change values from raw inputs.

    Args:
        inputs: Current calculator inputs

    Returns:
        CalculatorSnapshot for display
    """
    price_value = parse_amount(inputs.price_input)
    paid_value = parse_amount(inputs.paid_input)

    return CalculatorSnapshot(
        inputs=inputs,
        price_value=price_value,
        paid_value=paid_value,
        price_in_eur=to_eur(price_value, inputs.price_currency),
        paid_in_eur=to_eur(paid_value, inputs.paid_currency),
        change_result=calculate_change_with_currencies(
            price_value,
            inputs.price_currency,
            paid_value,
            inputs.paid_currency,
        ),
    )
