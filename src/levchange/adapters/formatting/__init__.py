# src/levchange/adapters/formatting/__init__.py
"""
Formatting Adapters - Text Output

This package contains text formatting for amounts and calculator results.
"""

from levchange.adapters.formatting.formatter import (
    conversion_lines,
    format_amount,
    format_money,
    render_result,
)

__all__ = [
    "format_amount",
    "format_money",
    "conversion_lines",
    "render_result",
]
