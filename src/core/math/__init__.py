"""
Core math modules

Численные примитивы, разбор ввода и формула распределения прибыли.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    clamp,
    floor_to_int,
    is_negative,
    is_valid_float,
    sanitize_float,
)

# Numeric Parser
from src.core.math.numeric_parser import (
    THOUSANDS_SEPARATOR,
    TRANSIENT_SIGNED_INPUTS,
    is_transient_signed_input,
    parse_number,
    to_non_negative_int,
    to_signed_int,
)

__all__ = [
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "clamp",
    "floor_to_int",
    "is_negative",
    "is_valid_float",
    "sanitize_float",
    # Numeric Parser
    "THOUSANDS_SEPARATOR",
    "TRANSIENT_SIGNED_INPUTS",
    "is_transient_signed_input",
    "parse_number",
    "to_non_negative_int",
    "to_signed_int",
]
