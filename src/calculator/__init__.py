"""Calculator — сессия калькулятора и форматирование для отображения."""

from .presentation import (
    INVALID_INPUT_MESSAGE,
    SPLIT_CHECK_MESSAGE,
    format_amount,
    format_formula,
    summary_lines,
)
from .session import DEFAULT_STATE, CalculatorSession, UnknownInputFieldError

__all__ = [
    "DEFAULT_STATE",
    "CalculatorSession",
    "UnknownInputFieldError",
    "INVALID_INPUT_MESSAGE",
    "SPLIT_CHECK_MESSAGE",
    "format_amount",
    "format_formula",
    "summary_lines",
]
