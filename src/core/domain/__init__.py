"""
Domain models and value objects.

Contains the calculator input snapshot and the profit split result.
"""

from src.core.domain.calculator_state import (
    DEFAULT_TOTAL_SHARES,
    SHARE_FIELDS,
    SIGNED_FIELDS,
    STATE_FIELDS,
    CalculatorState,
    parse_state_field,
)
from src.core.domain.profit_result import ProfitResult

__all__ = [
    # Calculator state
    "DEFAULT_TOTAL_SHARES",
    "SHARE_FIELDS",
    "SIGNED_FIELDS",
    "STATE_FIELDS",
    "CalculatorState",
    "parse_state_field",
    # Profit result
    "ProfitResult",
]
