"""
NumericParser — толерантный разбор числового ввода

Преобразование произвольного текста из полей ввода в числа.
Все функции тотальные: на любом входе возвращают число и никогда
не выбрасывают исключений.

Правила разбора:
- Разделители тысяч (",") удаляются: "10,000,000" → 10000000.0
- Разбирается числовой префикс строки: "12abc" → 12.0, "1e3x" → 1000.0
- Пустая строка, "-", "abc", NaN/Inf, переполнение → 0.0
"""

import re
from typing import Final

from src.core.math.numerical_safeguards import clamp, floor_to_int, is_valid_float

THOUSANDS_SEPARATOR: Final[str] = ","

# Ведущий числовой префикс: знак, целая/дробная часть, необязательная экспонента
_NUMBER_PREFIX_RE: Final[re.Pattern[str]] = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# Промежуточные значения при наборе отрицательного числа
TRANSIENT_SIGNED_INPUTS: Final[frozenset[str]] = frozenset({"", "-"})


def parse_number(raw: object) -> float:
    """
    Разбор текста в float.

    Args:
        raw: Текст из поля ввода (допускаются также int/float и None)

    Returns:
        Конечное число или 0.0, если разобрать не удалось

    Examples:
        >>> parse_number("10,000,000")
        10000000.0
        >>> parse_number("-12.5")
        -12.5
        >>> parse_number("abc")
        0.0
        >>> parse_number("1e400")
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
        return value if is_valid_float(value) else 0.0

    cleaned = str(raw).replace(THOUSANDS_SEPARATOR, "")
    match = _NUMBER_PREFIX_RE.match(cleaned)
    if match is None:
        return 0.0

    # Регулярка гарантирует корректный литерал, float() переполняется в inf
    value = float(match.group(1))
    if not is_valid_float(value):
        return 0.0
    return value


def to_non_negative_int(raw: object) -> int:
    """
    floor(parse_number(raw)), ограниченный снизу нулём.

    Используется для количества акций (дробные доли не поддерживаются).
    """
    return clamp(floor_to_int(parse_number(raw)), min_value=0)


def to_signed_int(raw: object) -> int:
    """floor(parse_number(raw)) без ограничения знака (чистая прибыль)."""
    return floor_to_int(parse_number(raw))


def is_transient_signed_input(raw: object) -> bool:
    """
    Проверка, является ли текст промежуточным при наборе отрицательного числа.

    "" и "-" — это "значение ещё не введено", а не ошибка разбора.
    parse_number для них по-прежнему возвращает 0; обработка эха ввода
    остаётся на стороне вызывающего кода.
    """
    return isinstance(raw, str) and raw.strip() in TRANSIENT_SIGNED_INPUTS
