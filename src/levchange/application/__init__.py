# src/levchange/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the conversion and change-calculation services and the
calculator state derived from raw inputs. No I/O.
"""

from levchange.application.converter import bgn_to_eur, eur_to_bgn, to_bgn, to_eur
from levchange.application.change_calculator import (
    calculate_change,
    calculate_change_with_currencies,
)
from levchange.application.calculator_state import (
    CalculatorInputs,
    CalculatorSnapshot,
    DisplayState,
    derive,
    initial_inputs,
)

__all__ = [
    "bgn_to_eur",
    "eur_to_bgn",
    "to_eur",
    "to_bgn",
    "calculate_change",
    "calculate_change_with_currencies",
    "CalculatorInputs",
    "CalculatorSnapshot",
    "DisplayState",
    "derive",
    "initial_inputs",
]
