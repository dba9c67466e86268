"""
Numerical Safeguards — Safe Math Primitives

Примитивы численной устойчивости для калькулятора дивидендов:
- NaN/Inf санитизация, чтобы невалидные значения не попадали в расчёт и токен
- Безопасное округление float → int (floor) без OverflowError/ValueError
- Ограничение значений диапазоном (clamp)
- Проверка знака с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не выбрасывает исключений на невалидном float
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для проверок знака (отрицательная прибыль и т.п.)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Не-числовые значения (None, строки) и целые вне диапазона float
    считаются невалидными.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False иначе
    """
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


def floor_to_int(value: float, fallback: int = 0) -> int:
    """
    Округление вниз до целого с защитой от NaN/Inf.

    math.floor(inf) выбрасывает OverflowError, math.floor(nan) — ValueError;
    здесь оба случая дают fallback.

    Examples:
        >>> floor_to_int(59.9)
        59
        >>> floor_to_int(-0.5)
        -1
        >>> floor_to_int(float('inf'))
        0
    """
    if not is_valid_float(value):
        return fallback
    return math.floor(value)


# =============================================================================
# ПРОВЕРКИ И ОГРАНИЧЕНИЯ
# =============================================================================


def is_negative(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, является ли значение отрицательным с учётом толерантности.

    Returns:
        True если value < -tol
    """
    return value < -tol


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0)
        0
        >>> clamp(150, max_value=130)
        130
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
