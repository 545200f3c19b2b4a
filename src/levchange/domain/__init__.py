# src/levchange/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from levchange.domain.models import (
    CURRENCY_NAMES,
    CURRENCY_SYMBOLS,
    EXCHANGE_RATE,
    ChangeResult,
    Currency,
)
from levchange.domain.errors import (
    DomainError,
    InvalidCurrencyError,
)

__all__ = [
    "EXCHANGE_RATE",
    "Currency",
    "ChangeResult",
    "CURRENCY_SYMBOLS",
    "CURRENCY_NAMES",
    "DomainError",
    "InvalidCurrencyError",
]
