# src/levchange/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

The calculation engine never raises; these exceptions are only used at the
boundaries (command line, configuration) where user-supplied currency codes
are turned into domain values.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidCurrencyError(DomainError, ValueError):
    """Raised when a currency code is neither EUR nor BGN."""
    pass
