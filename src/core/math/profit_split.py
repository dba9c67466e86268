"""
Profit Split — Иерархическое распределение прибыли по пулу акций

Чистая функция: CalculatorState → ProfitResult.

ФОРМУЛЫ:
    total = C × (A / B) × (major_shares / D)
    minor = total × (minor_shares / major_shares), если 0 < minor_shares ≤ major_shares
          = 0,                                       иначе
    major = total - minor

ПРЕДИКАТ ВАЛИДНОСТИ (все условия):
    A ≥ 0, B > 0, D > 0, major_shares > 0, A ≤ B, все поля конечны

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функция тотальная: невалидный ввод или переполнение total
   → ProfitResult(valid=False), не exception
2. Округление не выполняется (это задача отображения)
3. C < 0 даёт отрицательные суммы — это ожидаемое поведение
4. major + minor == total точно при valid=True
"""

from src.core.domain.calculator_state import CalculatorState
from src.core.domain.profit_result import ProfitResult
from src.core.math.numerical_safeguards import is_valid_float


def is_profit_input_valid(state: CalculatorState) -> bool:
    """
    Предикат валидности входных данных расчёта.

    A = 0 считается валидным (нулевой оборот линии даёт нулевую прибыль).
    """
    values = (
        state.line_revenue,
        state.total_revenue,
        state.net_profit,
        state.total_shares,
        state.major_shares,
        state.minor_shares,
    )
    if not all(is_valid_float(v) for v in values):
        return False

    return (
        state.line_revenue >= 0
        and state.total_revenue > 0
        and state.total_shares > 0
        and state.major_shares > 0
        and state.line_revenue <= state.total_revenue
    )


def compute_profit_split(state: CalculatorState) -> ProfitResult:
    """
    Расчёт распределения прибыли между крупным акционером и миноритарием.

    Args:
        state: Снапшот входных данных (после HoldingsInvariant)

    Returns:
        ProfitResult; при невалидном вводе все суммы равны 0 и valid=False

    Examples:
        >>> r = compute_profit_split(CalculatorState(
        ...     line_revenue=10_000_000, total_revenue=50_000_000,
        ...     net_profit=40_000_000, total_shares=130, major_shares=60))
        >>> round(r.total, 2)
        3692307.69
    """
    if not is_profit_input_valid(state):
        return ProfitResult.invalid()

    major_shares = state.major_shares
    minor_shares = state.minor_shares

    total = (
        state.net_profit
        * (state.line_revenue / state.total_revenue)
        * (major_shares / state.total_shares)
    )
    if not is_valid_float(total):
        return ProfitResult.invalid()

    if 0 < minor_shares <= major_shares:
        minor = total * (minor_shares / major_shares)
    else:
        minor = 0.0

    return ProfitResult(total=total, major=total - minor, minor=minor, valid=True)
