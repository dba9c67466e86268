"""
Legacy query format — плоская строка key=value

Формат старых ссылок до появления версионированного токена:

    ?a=10000000&b=50000000&c=-40000000&d=130&major=60&minor=0

Значения — обычные десятичные строки без преобразований. Ключи
интерпретируются по имени, порядок не важен. Используется только
как fallback, когда decode_share_token вернул None.
"""

import logging
from typing import Final, Mapping, Optional
from urllib.parse import parse_qs

from src.core.domain.calculator_state import CalculatorState, parse_state_field

LOGGER = logging.getLogger("dividend_split.sharelink.legacy")

LEGACY_QUERY_KEYS: Final[Mapping[str, str]] = {
    "a": "line_revenue",
    "b": "total_revenue",
    "c": "net_profit",
    "d": "total_shares",
    "major": "major_shares",
    "minor": "minor_shares",
}


def decode_legacy_query(
    query: object,
    defaults: Optional[CalculatorState] = None,
) -> Optional[CalculatorState]:
    """
    Декодирование legacy query string.

    Args:
        query: Строка запроса (ведущий "?" допускается)
        defaults: Значения для отсутствующих ключей (default: CalculatorState())

    Returns:
        CalculatorState или None, если ни одного известного ключа нет
    """
    if not isinstance(query, str):
        return None

    params = parse_qs(query.lstrip("?"), keep_blank_values=True)
    updates = {}
    for key, field in LEGACY_QUERY_KEYS.items():
        values = params.get(key)
        if values:
            # При повторе ключа берётся последнее значение
            updates[field] = parse_state_field(field, values[-1])

    if not updates:
        LOGGER.debug("Legacy query has no known keys: %r", query)
        return None

    base = defaults if defaults is not None else CalculatorState()
    return base.with_updates(**updates)
