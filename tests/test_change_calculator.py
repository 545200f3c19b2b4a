"""
Change Calculator Tests - Unit Tests for Change Calculation

This module tests both calculator entry points: EUR-normalized change and
currency-aware change, including insufficient payment, exact payment and
the same-currency path that avoids conversion round-trips.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- levchange.application.change_calculator (calculate_change, calculate_change_with_currencies)
- levchange.application.converter (to_eur for EUR-normalized scenarios)
- levchange.domain.models (ChangeResult, Currency)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from decimal import Decimal  # Expected amounts

from levchange.application.change_calculator import (
    calculate_change,
    calculate_change_with_currencies,
)
from levchange.application.converter import eur_to_bgn, to_eur
from levchange.domain.models import ChangeResult, Currency

EUR = Currency.EUR
BGN = Currency.BGN


class TestCalculateChange:
    def test_change_in_both_currencies(self):
        result = calculate_change(8, 10)
        assert result == ChangeResult(eur=Decimal("2"), bgn=Decimal("3.91"))

    def test_exact_payment_is_zero_not_none(self):
        result = calculate_change(10, 10)
        assert result is not None
        assert result.eur == 0
        assert result.bgn == 0
        assert result.is_exact

    def test_insufficient_payment_is_none(self):
        assert calculate_change(10, 5) is None
        assert calculate_change(10, 9.99) is None

    def test_decimal_prices(self):
        assert calculate_change(7.55, 10).eur == Decimal("2.45")

    def test_large_amounts(self):
        result = calculate_change(50, 100)
        assert result.eur == 50
        assert result.bgn == Decimal("97.79")

    def test_bgn_is_derived_from_rounded_eur(self):
        # 10.004 - 0 rounds to 10.00 EUR; BGN must be 10.00 * rate, not 10.004 * rate
        result = calculate_change(0, Decimal("10.004"))
        assert result.eur == Decimal("10.00")
        assert result.bgn == eur_to_bgn(Decimal("10.00"))

    def test_float_precision(self):
        # 0.4 - 0.1 in binary floating point is 0.30000000000000004
        result = calculate_change(to_eur(0.1, EUR), to_eur(0.4, EUR))
        assert result.eur == Decimal("0.30")
        assert calculate_change(9.99, 10).eur == Decimal("0.01")

    def test_small_change(self):
        result = calculate_change(to_eur(4.99, EUR), to_eur(5, EUR))
        assert result == ChangeResult(eur=Decimal("0.01"), bgn=Decimal("0.02"))

    @pytest.mark.parametrize(
        "price_eur, paid, paid_currency, expected_eur",
        [
            (7.89, 20, BGN, "2.34"),  # grocery: 20 BGN = 10.23 EUR
            (3.5, 10, BGN, "1.61"),  # coffee: 10 BGN = 5.11 EUR
            (45.8, 100, BGN, "5.33"),  # restaurant: 100 BGN = 51.13 EUR
            (999.99, 2000, BGN, "22.59"),  # 2000 BGN = 1022.58 EUR
            (4.99, 5, EUR, "0.01"),
        ],
    )
    def test_real_world_transactions(self, price_eur, paid, paid_currency, expected_eur):
        result = calculate_change(to_eur(price_eur, EUR), to_eur(paid, paid_currency))
        assert result.eur == Decimal(expected_eur)

    def test_non_finite_amounts_are_zero(self):
        assert calculate_change(float("nan"), 5).eur == 5
        assert calculate_change(float("inf"), 0) == ChangeResult(eur=Decimal("0"), bgn=Decimal("0"))


class TestCalculateChangeSameCurrency:
    def test_eur_difference_is_exact(self):
        result = calculate_change_with_currencies(10, EUR, 100, EUR)
        assert result.eur == 90
        assert result.bgn == Decimal("176.02")

    def test_bgn_difference_is_exact(self):
        result = calculate_change_with_currencies(10, BGN, 100, BGN)
        assert result.bgn == 90
        assert result.eur == Decimal("46.02")

    @pytest.mark.parametrize("currency", [EUR, BGN])
    def test_exact_payment(self, currency):
        result = calculate_change_with_currencies(50, currency, 50, currency)
        assert result == ChangeResult(eur=Decimal("0"), bgn=Decimal("0"))

    def test_decimal_amounts_bgn(self):
        result = calculate_change_with_currencies(10.25, BGN, 50.50, BGN)
        assert result.bgn == Decimal("40.25")

    def test_decimal_amounts_eur(self):
        result = calculate_change_with_currencies(49.99, EUR, 99.99, EUR)
        assert result.eur == 50

    def test_insufficient_same_currency(self):
        assert calculate_change_with_currencies(100, BGN, 10, BGN) is None
        assert calculate_change_with_currencies(10, EUR, 9.99, EUR) is None


class TestCalculateChangeMixedCurrencies:
    def test_price_eur_paid_bgn(self):
        # 20 BGN = 10.23 EUR; 10.23 - 8 = 2.23 EUR = 4.36 BGN
        result = calculate_change_with_currencies(8, EUR, 20, BGN)
        assert result == ChangeResult(eur=Decimal("2.23"), bgn=Decimal("4.36"))

    def test_price_eur_paid_bgn_twenty_five(self):
        result = calculate_change_with_currencies(10, EUR, 25, BGN)
        assert result.eur == Decimal("2.78")

    def test_price_bgn_paid_eur(self):
        # 10 BGN = 5.11 EUR
        result = calculate_change_with_currencies(10, BGN, 10, EUR)
        assert result.eur == Decimal("4.89")

    def test_insufficient_mixed(self):
        # 5 BGN = 2.56 EUR
        assert calculate_change_with_currencies(10, EUR, 5, BGN) is None
        # 100 BGN = 51.13 EUR
        assert calculate_change_with_currencies(100, EUR, 100, BGN) is None

    def test_bgn_matches_rate_conversion_of_eur(self):
        result = calculate_change_with_currencies(3.5, EUR, 10, BGN)
        assert result.bgn == eur_to_bgn(result.eur)


class TestOutOfRangeAmounts:
    def test_huge_payment_is_treated_as_zero(self):
        # An unusable payment is 0, which never covers a positive price
        assert calculate_change_with_currencies(1, EUR, Decimal("1E+9999999"), EUR) is None
        assert calculate_change_with_currencies(1, EUR, Decimal("9E+999999"), BGN) is None
        assert calculate_change(1, Decimal("1E+9999999")) is None

    def test_huge_price_is_treated_as_zero(self):
        result = calculate_change_with_currencies(Decimal("1E+9999999"), BGN, 10, BGN)
        assert result.bgn == 10
