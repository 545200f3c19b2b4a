# src/levchange/shared/validators.py
"""
Input Validation Utilities - Amount Parsing and Configuration Checks

This module turns raw user input into safe domain values. Amount parsing
never raises: anything that is not a usable non-negative number becomes 0.
The remaining helpers validate configuration values.

Files that USE this module:
- levchange.application.calculator_state (parse_amount for raw field input)
- levchange.app (parse_amount for command-line amounts)
- levchange.config.settings (validate_currency_code, validate_log_level)

Files that this module USES:
- levchange.shared.money (ZERO for clamping, is_in_range)
"""
from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import Optional

from levchange.shared.money import ZERO, is_in_range

logger = logging.getLogger(__name__)

SUPPORTED_CURRENCY_CODES = ("EUR", "BGN")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Plain ASCII decimal notation only: no "1_000", no non-ASCII digits
AMOUNT_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def parse_amount(raw: Optional[str]) -> Decimal:
    """
    Parse a user-entered amount.

    Accepts either "." or "," as the decimal separator and ignores
    surrounding whitespace ("10,50" and " 10.50 " both give 10.50).

    Args:
        raw: Raw text from an input field

    Returns:
        The parsed amount; 0 for empty, non-numeric, negative input or
        amounts of 10**24 and above (treated as infinite)
    """
    if raw is None:
        return ZERO

    text = str(raw).strip()
    if not text:
        return ZERO

    normalized = text.replace(",", ".", 1)
    if not AMOUNT_PATTERN.match(normalized):
        logger.debug("Ignoring non-numeric amount input %r", raw)
        return ZERO

    try:
        value = Decimal(normalized)
    except ArithmeticError:
        logger.debug("Ignoring non-numeric amount input %r", raw)
        return ZERO

    if not is_in_range(value):
        logger.debug("Ignoring out-of-range amount input %r", raw)
        return ZERO

    # No negative prices or payments
    return max(ZERO, value)


def validate_currency_code(code: str) -> bool:
    """
    Validate a currency code (case-insensitive).

    Args:
        code: Currency code to validate

    Returns:
        True if the code is EUR or BGN, False otherwise
    """
    if not code:
        return False
    return code.strip().upper() in SUPPORTED_CURRENCY_CODES


def validate_log_level(level: str) -> bool:
    """Return True if ``level`` names a standard logging level."""
    if not level:
        return False
    return level.strip().upper() in LOG_LEVELS
