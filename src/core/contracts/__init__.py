"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора дивидендов.
"""

from .validators import (
    CalculatorStateValidator,
    ContractValidator,
    SchemaLoader,
    ShareTokenValidator,
    validate_calculator_state,
    validate_share_token,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculatorStateValidator",
    "ShareTokenValidator",
    # Functions
    "validate_calculator_state",
    "validate_share_token",
]
