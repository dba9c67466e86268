"""
ShareLink Codec — компактный версионированный токен состояния

Токен кодирует все входные данные калькулятора в короткую строку,
пригодную для ссылки (URL fragment).

ФОРМАТ (стабильный wire-контракт):
    token  := "v1:" field ("." field){5}
    field  := [0-9a-z]+

    fields = [A, B, zigzag(C), D, major_shares, minor_shares]

Каждое поле — целое число в base-36. Все поля, кроме C, неотрицательны
по инварианту; знаковый C переводится zig-zag преобразованием:

    zigzag(n)   = 2n        (n ≥ 0)
                = -2n - 1   (n < 0)
    unzigzag(z) = z / 2         (z чётное)
                = -(z + 1) / 2  (z нечётное)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decode(encode(s)) == s для любого состояния с целыми полями
2. decode никогда не выбрасывает исключений: неверный токен → None,
   неразбираемое поле или поле вне диапазона float → 0
3. Версия "v1:" проверяется буквально
"""

import logging
import re
import string
import sys
from typing import Final, Optional

from src.core.domain.calculator_state import CalculatorState
from src.core.math.numerical_safeguards import clamp, floor_to_int

LOGGER = logging.getLogger("dividend_split.sharelink")

# =============================================================================
# CONSTANTS
# =============================================================================

SHARE_TOKEN_VERSION: Final[str] = "v1:"
SHARE_TOKEN_SEPARATOR: Final[str] = "."
SHARE_TOKEN_FIELD_COUNT: Final[int] = 6

BASE36_DIGITS: Final[str] = string.digits + string.ascii_lowercase

_BASE36_FIELD_RE: Final[re.Pattern[str]] = re.compile(r"[0-9a-zA-Z]+")

# Больше значения не представимы конечным float
MAX_FIELD_MAGNITUDE: Final[int] = int(sys.float_info.max)


# =============================================================================
# ZIG-ZAG
# =============================================================================


def zigzag(n: int) -> int:
    """
    Биекция знаковых целых в неотрицательные.

    Examples:
        >>> [zigzag(n) for n in (0, -1, 1, -2, 2)]
        [0, 1, 2, 3, 4]
    """
    return 2 * n if n >= 0 else -2 * n - 1


def unzigzag(z: int) -> int:
    """
    Обратное zig-zag преобразование.

    Examples:
        >>> [unzigzag(z) for z in (0, 1, 2, 3, 4)]
        [0, -1, 1, -2, 2]
    """
    return z // 2 if z % 2 == 0 else -(z + 1) // 2


# =============================================================================
# BASE-36
# =============================================================================


def to_base36(value: int) -> str:
    """
    Кодирование неотрицательного целого в base-36 (цифры 0-9a-z).

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"base-36 field must be non-negative, got {value}")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def from_base36(field: str) -> int:
    """
    Декодирование base-36 поля; неразбираемое поле → 0.

    Допускаются только символы [0-9a-zA-Z], чтобы знаки, пробелы и "_"
    (которые принимает int()) не проходили как валидные.
    """
    if not _BASE36_FIELD_RE.fullmatch(field):
        return 0
    try:
        return int(field, 36)
    except ValueError:
        # длина превышает sys.get_int_max_str_digits()
        return 0


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def _non_negative_field(value: float) -> int:
    return clamp(floor_to_int(value), min_value=0)


def _within_float_range(value: int) -> int:
    return value if abs(value) <= MAX_FIELD_MAGNITUDE else 0


def encode_share_token(state: CalculatorState) -> str:
    """
    Кодирование состояния в токен "v1:...".

    Дробные значения округляются вниз, отрицательные (кроме C) — до 0,
    NaN/Inf кодируются как 0.

    Examples:
        >>> encode_share_token(CalculatorState(
        ...     line_revenue=10_000_000, total_revenue=50_000_000,
        ...     net_profit=40_000_000, total_shares=130, major_shares=60))
        'v1:5yc1s.tro8w.1bmoe8.3m.1o.0'
    """
    fields = [
        _non_negative_field(state.line_revenue),
        _non_negative_field(state.total_revenue),
        zigzag(floor_to_int(state.net_profit)),
        _non_negative_field(state.total_shares),
        _non_negative_field(state.major_shares),
        _non_negative_field(state.minor_shares),
    ]
    return SHARE_TOKEN_VERSION + SHARE_TOKEN_SEPARATOR.join(to_base36(f) for f in fields)


def decode_share_token(token: object) -> Optional[CalculatorState]:
    """
    Декодирование токена в состояние.

    Args:
        token: Строка токена (без "#")

    Returns:
        CalculatorState или None, если версия не "v1:" или полей не 6.
        Поля, не представимые конечным float, декодируются как 0.
        None означает "попробовать legacy формат", а не фатальную ошибку.
    """
    if not isinstance(token, str) or not token.startswith(SHARE_TOKEN_VERSION):
        LOGGER.debug("Share token rejected: missing %r prefix", SHARE_TOKEN_VERSION)
        return None

    fields = token[len(SHARE_TOKEN_VERSION):].split(SHARE_TOKEN_SEPARATOR)
    if len(fields) != SHARE_TOKEN_FIELD_COUNT:
        LOGGER.debug(
            "Share token rejected: expected %d fields, got %d",
            SHARE_TOKEN_FIELD_COUNT,
            len(fields),
        )
        return None

    line_revenue, total_revenue, net_profit_zz, total_shares, major, minor = (
        from_base36(f) for f in fields
    )
    return CalculatorState(
        line_revenue=_within_float_range(line_revenue),
        total_revenue=_within_float_range(total_revenue),
        net_profit=_within_float_range(unzigzag(net_profit_zz)),
        total_shares=_within_float_range(total_shares),
        major_shares=_within_float_range(major),
        minor_shares=_within_float_range(minor),
    )

