"""Восстановление состояния из ссылки: сначала токен, затем legacy query."""

import logging
from typing import Optional

from src.core.domain.calculator_state import CalculatorState
from src.sharelink.codec import decode_share_token, encode_share_token
from src.sharelink.legacy import decode_legacy_query

LOGGER = logging.getLogger("dividend_split.sharelink")

FRAGMENT_PREFIX = "#"


def resolve_share_link(
    token: Optional[str] = None,
    query: Optional[str] = None,
    defaults: Optional[CalculatorState] = None,
) -> Optional[CalculatorState]:
    """
    Восстановление состояния из частей ссылки.

    Args:
        token: URL fragment (ведущий "#" допускается)
        query: Query string legacy формата
        defaults: Значения для ключей, отсутствующих в legacy query

    Returns:
        CalculatorState или None, если ни один формат не распознан
    """
    if token:
        state = decode_share_token(token.removeprefix(FRAGMENT_PREFIX))
        if state is not None:
            return state

    state = decode_legacy_query(query, defaults)
    if state is not None:
        LOGGER.info("Share link restored from legacy query format")
    return state


def share_fragment(state: CalculatorState) -> str:
    """URL fragment для ссылки: "#v1:..."."""
    return FRAGMENT_PREFIX + encode_share_token(state)
