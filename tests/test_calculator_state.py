"""
Calculator State Tests - Unit Tests for Inputs and Derived Values

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- levchange.application.calculator_state (inputs, transitions, derive)
- levchange.domain.models (ChangeResult, Currency)
- unittest.mock (patch for settings)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from decimal import Decimal  # Expected amounts
from unittest.mock import patch  # Replace configured defaults

from levchange.application.calculator_state import (
    CalculatorInputs,
    DisplayState,
    derive,
    initial_inputs,
)
from levchange.domain.models import ChangeResult, Currency


class TestCalculatorInputs:
    def test_defaults(self):
        inputs = CalculatorInputs()
        assert inputs.price_input == ""
        assert inputs.paid_input == ""
        assert inputs.price_currency is Currency.EUR
        assert inputs.paid_currency is Currency.BGN

    def test_transitions_return_new_inputs(self):
        inputs = CalculatorInputs()
        updated = inputs.with_price_input("8").with_paid_input("20")
        assert updated.price_input == "8"
        assert updated.paid_input == "20"
        assert inputs.price_input == ""

    def test_toggle_currencies(self):
        inputs = CalculatorInputs().toggle_price_currency().toggle_paid_currency()
        assert inputs.price_currency is Currency.BGN
        assert inputs.paid_currency is Currency.EUR
        assert inputs.toggle_price_currency().price_currency is Currency.EUR

    def test_set_currencies(self):
        inputs = CalculatorInputs().with_price_currency(Currency.BGN).with_paid_currency(Currency.BGN)
        assert inputs.price_currency is Currency.BGN
        assert inputs.paid_currency is Currency.BGN

    def test_inputs_are_immutable(self):
        with pytest.raises(AttributeError):
            CalculatorInputs().price_input = "1"


class TestInitialInputs:
    def test_explicit_currencies(self):
        inputs = initial_inputs(Currency.BGN, Currency.EUR)
        assert inputs == CalculatorInputs(price_currency=Currency.BGN, paid_currency=Currency.EUR)

    def test_configured_defaults(self):
        with patch("levchange.config.settings") as mock_settings:
            mock_settings.price_currency = Currency.BGN
            mock_settings.paid_currency = Currency.BGN
            inputs = initial_inputs()
        assert inputs.price_currency is Currency.BGN
        assert inputs.paid_currency is Currency.BGN
        assert inputs.price_input == ""

    def test_reset_discards_amounts(self):
        inputs = initial_inputs(Currency.EUR, Currency.BGN).with_price_input("5")
        assert initial_inputs(Currency.EUR, Currency.BGN).price_input == ""
        assert inputs.price_input == "5"


class TestDerive:
    def test_awaiting_input(self):
        snapshot = derive(CalculatorInputs())
        assert snapshot.price_value == 0
        assert snapshot.paid_value == 0
        assert not snapshot.has_valid_inputs
        assert snapshot.display_state is DisplayState.AWAITING_INPUT

    def test_change_due(self):
        snapshot = derive(CalculatorInputs("8", Currency.EUR, "20", Currency.BGN))
        assert snapshot.price_in_eur == 8
        assert snapshot.paid_in_eur == Decimal("10.23")
        assert snapshot.change_result == ChangeResult(eur=Decimal("2.23"), bgn=Decimal("4.36"))
        assert snapshot.is_payment_sufficient
        assert snapshot.display_state is DisplayState.CHANGE_DUE

    def test_insufficient(self):
        snapshot = derive(CalculatorInputs("10", Currency.EUR, "5", Currency.BGN))
        assert snapshot.paid_in_eur == Decimal("2.56")
        assert snapshot.change_result is None
        assert not snapshot.is_payment_sufficient
        assert snapshot.display_state is DisplayState.INSUFFICIENT

    def test_exact(self):
        snapshot = derive(CalculatorInputs("10", Currency.EUR, "10", Currency.EUR))
        assert snapshot.display_state is DisplayState.EXACT

    def test_same_currency_uses_exact_subtraction(self):
        snapshot = derive(CalculatorInputs("10", Currency.BGN, "100", Currency.BGN))
        assert snapshot.change_result.bgn == 90
        assert snapshot.change_result.eur == Decimal("46.02")

    def test_comma_input(self):
        snapshot = derive(CalculatorInputs("7,89", Currency.EUR, "10", Currency.EUR))
        assert snapshot.price_value == Decimal("7.89")
        assert snapshot.change_result.eur == Decimal("2.11")

    def test_invalid_input_awaits(self):
        snapshot = derive(CalculatorInputs("abc", Currency.EUR, "10", Currency.EUR))
        assert snapshot.display_state is DisplayState.AWAITING_INPUT

    def test_deterministic(self):
        inputs = CalculatorInputs("3,50", Currency.EUR, "10", Currency.BGN)
        assert derive(inputs) == derive(inputs)

    def test_huge_payment_is_unusable(self):
        snapshot = derive(CalculatorInputs("1", Currency.EUR, "1e9999999", Currency.EUR))
        assert snapshot.paid_value == 0
        assert snapshot.paid_in_eur == 0
        assert snapshot.display_state is DisplayState.AWAITING_INPUT
