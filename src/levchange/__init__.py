# src/levchange/__init__.py
"""
LevChange - EUR/BGN Change Calculator

Computes the change owed when a price and a payment are given in Euro or
Bulgarian Lev, using the fixed conversion rate 1 EUR = 1.95583 BGN and
decimal arithmetic rounded half-up to the cent.
"""

from levchange.domain.models import EXCHANGE_RATE, ChangeResult, Currency
from levchange.shared.validators import parse_amount
from levchange.application.converter import bgn_to_eur, eur_to_bgn, to_bgn, to_eur
from levchange.application.change_calculator import (
    calculate_change,
    calculate_change_with_currencies,
)
from levchange.adapters.formatting.formatter import format_amount

__version__ = "1.0.0"

__all__ = [
    "EXCHANGE_RATE",
    "Currency",
    "ChangeResult",
    "parse_amount",
    "bgn_to_eur",
    "eur_to_bgn",
    "to_eur",
    "to_bgn",
    "calculate_change",
    "calculate_change_with_currencies",
    "format_amount",
]
