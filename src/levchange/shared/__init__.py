# src/levchange/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Decimal money helpers
- Input parsing and validation
- Logging configuration
"""

from levchange.shared.money import CENTS, MONEY_CONTEXT, ZERO, round_to_cents, to_decimal
from levchange.shared.validators import (
    parse_amount,
    validate_currency_code,
    validate_log_level,
)

__all__ = [
    "CENTS",
    "ZERO",
    "MONEY_CONTEXT",
    "to_decimal",
    "round_to_cents",
    "parse_amount",
    "validate_currency_code",
    "validate_log_level",
]
