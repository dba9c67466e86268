"""Presentation helpers — форматирование результата для отображения.

Округление выполняется только здесь, движок расчёта возвращает
неокруглённые значения. Формат чисел фиксированный (en-US):
разделитель тысяч ",", десятичная точка ".".
"""

from typing import Final, List

from src.core.domain.calculator_state import CalculatorState
from src.core.domain.profit_result import ProfitResult
from src.core.math.numerical_safeguards import sanitize_float

INVALID_INPUT_MESSAGE: Final[str] = (
    "Invalid input: check that A ≤ B, holdings are positive and D > 0"
)

SPLIT_CHECK_MESSAGE: Final[str] = "(check: major holder + minor holder = total profit)"


def format_amount(value: float, digits: int = 2) -> str:
    """
    Число с фиксированным количеством знаков и разделителями тысяч.

    Examples:
        >>> format_amount(3692307.6923)
        '3,692,307.69'
        >>> format_amount(-1234.5, digits=0)
        '-1,234'
        >>> format_amount(float('nan'))
        '0.00'
    """
    return f"{sanitize_float(value):,.{digits}f}"


def format_formula(state: CalculatorState, result: ProfitResult) -> str:
    """
    Формула с подставленными значениями.

    Examples:
        "10,000,000 ÷ 50,000,000 × 40,000,000 ÷ 130 × 60 = 3,692,307.69"
    """
    operands = (
        format_amount(state.line_revenue, digits=0),
        format_amount(state.total_revenue, digits=0),
        format_amount(state.net_profit, digits=0),
        format_amount(state.total_shares, digits=0),
        format_amount(state.major_shares, digits=0),
    )
    return "{} ÷ {} × {} ÷ {} × {} = {}".format(*operands, format_amount(result.total))


def summary_lines(result: ProfitResult) -> List[str]:
    """Строки карточек результата или сообщение о невалидном вводе."""
    if not result.valid:
        return [INVALID_INPUT_MESSAGE]

    return [
        f"Total profit: {format_amount(result.total)}",
        f"Major holder profit: {format_amount(result.major)}",
        f"Minor holder profit: {format_amount(result.minor)}",
        SPLIT_CHECK_MESSAGE,
    ]
