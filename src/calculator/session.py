"""Calculator Session — владелец состояния калькулятора дивидендов.

Связывает компоненты ядра в одном месте:
    сырой текст → parse_state_field → CalculatorState
                → with_invariant (после каждого изменения долей или D)
                → compute_profit_split

и обратно: состояние ⇄ токен ссылки.

Сессия хранит эхо ввода (то, что показывается в поле), отдельно от
числового состояния. Для чистой прибыли промежуточные "" и "-"
сохраняются в эхо как есть, а в состоянии дают 0.

Сессия не потокобезопасна: один экземпляр на одного пользователя.
Частота вызовов (debounce записи в адресную строку) — забота
вызывающего кода.
"""

import logging
from typing import Dict, Optional

from src.core.contracts import CalculatorStateValidator
from src.core.domain.calculator_state import (
    DEFAULT_TOTAL_SHARES,
    SHARE_FIELDS,
    STATE_FIELDS,
    CalculatorState,
    parse_state_field,
)
from src.core.domain.profit_result import ProfitResult
from src.core.math.numeric_parser import is_transient_signed_input, parse_number
from src.core.math.numerical_safeguards import is_negative
from src.core.math.profit_split import compute_profit_split
from src.holdings.invariant import HoldingsConfig, HoldingsInvariant, HoldingsStatus
from src.sharelink.codec import encode_share_token
from src.sharelink.resolver import resolve_share_link, share_fragment

LOGGER = logging.getLogger("dividend_split.calculator")

# Демонстрационные данные страницы
DEFAULT_STATE = CalculatorState(
    line_revenue=10_000_000,
    total_revenue=50_000_000,
    net_profit=40_000_000,
    total_shares=DEFAULT_TOTAL_SHARES,
    major_shares=60,
    minor_shares=0,
)


class UnknownInputFieldError(ValueError):
    """Имя поля не входит в STATE_FIELDS."""


def _input_echo(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


class CalculatorSession:
    """Сессия калькулятора: эхо ввода, состояние, результат, ссылка.

    Args:
        state: начальное состояние (default: DEFAULT_STATE)
        config: конфигурация инварианта по акциям
    """

    def __init__(
        self,
        state: Optional[CalculatorState] = None,
        config: Optional[HoldingsConfig] = None,
    ):
        self.config = config or HoldingsConfig()
        self._invariant = HoldingsInvariant(self.config)
        self._inputs: Dict[str, str] = {}
        self._state = DEFAULT_STATE
        self._last_input_status: Optional[HoldingsStatus] = None

        # True если ссылка была передана, но не распознана ни в одном формате
        self.link_error = False

        self.load_state(state if state is not None else DEFAULT_STATE)

    @classmethod
    def from_link(
        cls,
        token: Optional[str] = None,
        query: Optional[str] = None,
        config: Optional[HoldingsConfig] = None,
    ) -> "CalculatorSession":
        """Сессия, восстановленная из ссылки (токен, затем legacy query).

        Нераспознанная ссылка не является ошибкой: сессия остаётся
        с данными по умолчанию и link_error=True.
        """
        session = cls(config=config)
        state = resolve_share_link(token, query, defaults=session.state)

        if state is None:
            if token or query:
                session.link_error = True
                LOGGER.warning("Share link could not be decoded, keeping default inputs")
            return session

        if not CalculatorStateValidator().is_valid(state.as_contract_dict()):
            LOGGER.warning("Share link state violates calculator_state contract: %s", state)

        session.load_state(state)
        return session

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def load_state(self, state: CalculatorState) -> CalculatorState:
        """Замена всего состояния (с инвариантом) и перезапись эха ввода."""
        self._last_input_status = self._invariant.classify(
            state.major_shares, state.minor_shares
        )
        self._state = self._invariant.apply(state)
        self._inputs = {
            field: _input_echo(getattr(self._state, field)) for field in STATE_FIELDS
        }
        return self._state

    def set_input(self, field: str, raw: Optional[str]) -> CalculatorState:
        """Изменение одного поля из сырого текста.

        Args:
            field: имя поля из STATE_FIELDS
            raw: текст поля ввода

        Returns:
            Новое состояние (после инварианта)

        Raises:
            UnknownInputFieldError: если поле неизвестно
        """
        if field not in STATE_FIELDS:
            raise UnknownInputFieldError(f"Unknown calculator input field: {field!r}")

        text = "" if raw is None else str(raw)
        candidate = self._state.with_updates(**{field: parse_state_field(field, text)})
        self._inputs[field] = text

        if field not in SHARE_FIELDS:
            self._state = candidate
            return self._state

        self._last_input_status = self._invariant.classify(
            candidate.major_shares, candidate.minor_shares
        )
        self._state = self._invariant.apply(candidate)

        # Эхо показывает исправленные значения, как только clamp сработал
        for share_field in SHARE_FIELDS:
            value = getattr(self._state, share_field)
            if value != getattr(candidate, share_field):
                self._inputs[share_field] = _input_echo(value)

        return self._state

    # =========================================================================
    # READ-ONLY VIEWS
    # =========================================================================

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def result(self) -> ProfitResult:
        return compute_profit_split(self._state)

    @property
    def holdings_status(self) -> HoldingsStatus:
        """Классификация долей текущего (исправленного) состояния."""
        return self._invariant.classify(self._state.major_shares, self._state.minor_shares)

    @property
    def last_input_status(self) -> HoldingsStatus:
        """Классификация долей последнего ввода до clamp.

        Нужна, чтобы показать временное нарушение (minor > major),
        которое сессия уже исправила.
        """
        return self._last_input_status

    def input_text(self, field: str) -> str:
        """Эхо ввода для поля."""
        if field not in STATE_FIELDS:
            raise UnknownInputFieldError(f"Unknown calculator input field: {field!r}")
        return self._inputs[field]

    def is_input_pending(self, field: str) -> bool:
        """True если поле чистой прибыли содержит промежуточный текст ("" или "-")."""
        return field == "net_profit" and is_transient_signed_input(self._inputs[field])

    @property
    def net_profit_is_negative(self) -> bool:
        """Подсветка поля C красным."""
        return is_negative(parse_number(self._inputs["net_profit"]))

    @property
    def share_token(self) -> str:
        return encode_share_token(self._state)

    @property
    def share_fragment(self) -> str:
        return share_fragment(self._state)
