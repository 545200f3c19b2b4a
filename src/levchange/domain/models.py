# src/levchange/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- The two supported currencies
- The fixed EUR/BGN conversion rate
- The change owed, expressed in both currencies

Files that USE this module:
- levchange.application.* (converter, calculator and session use these models)
- levchange.adapters.formatting.formatter (currency symbols and names)
- levchange.config.settings (default currencies)
- tests.* (tests use domain models for test data)

Files that this module USES:
- levchange.domain.errors (InvalidCurrencyError for unknown codes)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for money
from enum import Enum  # Closed set of currencies

from levchange.domain.errors import InvalidCurrencyError


# Official rate for Bulgaria's Euro adoption, set by the Council of the EU.
# Irrevocable: never configured, never fetched.
EXCHANGE_RATE = Decimal("1.95583")


class Currency(Enum):
    """The two currencies accepted at the till."""
    EUR = "EUR"
    BGN = "BGN"

    @property
    def other(self) -> Currency:
        """The opposite currency (used when toggling an input)."""
        return Currency.BGN if self is Currency.EUR else Currency.EUR

    @classmethod
    def parse(cls, code: object) -> Currency:
        """
        Resolve a currency code, case-insensitively.

        Args:
            code: A Currency member or a code such as "eur" or " BGN "

        Returns:
            The matching Currency member

        Raises:
            InvalidCurrencyError: If the code is not EUR or BGN
        """
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise InvalidCurrencyError(f"Unsupported currency: {code!r} (expected EUR or BGN)") from None

    def __str__(self) -> str:
        return self.value


CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.EUR: "€",
    Currency.BGN: "лв",
}

# Display names in Bulgarian
CURRENCY_NAMES: dict[Currency, str] = {
    Currency.EUR: "Евро",
    Currency.BGN: "Лева",
}


@dataclass(frozen=True)
class ChangeResult:
    """
    Change owed to the customer, in both currencies.

    Attributes:
        eur: Change in Euro, rounded to the cent
        bgn: Change in Bulgarian Lev, rounded to the cent
    """
    eur: Decimal
    bgn: Decimal

    @property
    def is_exact(self) -> bool:
        """True when the payment exactly covers the price."""
        return self.eur == 0 and self.bgn == 0
