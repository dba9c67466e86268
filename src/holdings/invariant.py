"""Holdings Invariant — порядок полей с количеством акций

Поддерживает ограничения между полями:
- major_shares ≤ total_shares
- minor_shares ≤ major_shares

и классифицирует пару (major, minor) как ok / warn / invalid:
- minor > major                                  → invalid
- minor > 0 и (major - minor) < min_reserve      → warn
- иначе                                          → ok

Резерв (major - minor) — "незакреплённые" акции крупного акционера.
Как только у миноритария появляется доля, резерв должен оставаться
не меньше min_reserve акций.

Интеграция:
- clamp_holdings / with_invariant вызываются после каждого изменения
  major_shares, minor_shares или total_shares, до расчёта прибыли
- classify_holdings применяется к сырому вводу до clamp, чтобы показать
  пользователю временное нарушение
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.domain.calculator_state import CalculatorState

LOGGER = logging.getLogger("dividend_split.holdings")


# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальный резерв крупного акционера при наличии доли миноритария
DEFAULT_MIN_RESERVE: Final[int] = 5

MINOR_EXCEEDS_MAJOR_MESSAGE: Final[str] = "Minor holding cannot exceed major holding"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class HoldingsConfig:
    """Конфигурация инварианта по акциям."""

    min_reserve: int = DEFAULT_MIN_RESERVE

    def __post_init__(self) -> None:
        if self.min_reserve < 0:
            raise ValueError(f"min_reserve must be non-negative, got {self.min_reserve}")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class HoldingsStatus:
    """Результат классификации пары major/minor."""

    valid: bool
    warn: bool
    message: str

    # Диагностика
    reserve_shares: int
    min_reserve: int


# =============================================================================
# CLAMP
# =============================================================================


def clamp_holdings(state: CalculatorState) -> CalculatorState:
    """Ограничение долей: major ≤ D, затем minor ≤ major'.

    Чистая функция, возвращает новый снапшот (или тот же, если
    исправлять нечего).
    """
    major = min(state.major_shares, state.total_shares)
    minor = min(state.minor_shares, major)

    if major == state.major_shares and minor == state.minor_shares:
        return state
    return state.with_updates(major_shares=major, minor_shares=minor)


def with_invariant(state: CalculatorState) -> CalculatorState:
    """Post-mutation проход: clamp_holdings с логированием коррекции."""
    clamped = clamp_holdings(state)
    if clamped is not state:
        LOGGER.debug(
            "Holdings clamped: major %s -> %s, minor %s -> %s (total_shares=%s)",
            state.major_shares,
            clamped.major_shares,
            state.minor_shares,
            clamped.minor_shares,
            state.total_shares,
        )
    return clamped


# =============================================================================
# CLASSIFY
# =============================================================================


def classify_holdings(
    major_shares: int,
    minor_shares: int,
    min_reserve: int = DEFAULT_MIN_RESERVE,
) -> HoldingsStatus:
    """Классификация пары major/minor.

    Args:
        major_shares: акции крупного акционера
        minor_shares: акции миноритария
        min_reserve: минимальный резерв крупного акционера

    Returns:
        HoldingsStatus (valid, warn, message)
    """
    reserve = major_shares - minor_shares

    if minor_shares > major_shares:
        return HoldingsStatus(
            valid=False,
            warn=False,
            message=MINOR_EXCEEDS_MAJOR_MESSAGE,
            reserve_shares=reserve,
            min_reserve=min_reserve,
        )

    if minor_shares > 0 and reserve < min_reserve:
        return HoldingsStatus(
            valid=True,
            warn=True,
            message=(
                f"Major holder keeps {reserve} uncommitted shares, "
                f"below the minimum reserve of {min_reserve}"
            ),
            reserve_shares=reserve,
            min_reserve=min_reserve,
        )

    return HoldingsStatus(
        valid=True,
        warn=False,
        message="",
        reserve_shares=reserve,
        min_reserve=min_reserve,
    )


class HoldingsInvariant:
    """Инвариант по акциям с конфигурацией min_reserve.

    Stateless: хранит только конфигурацию.
    """

    def __init__(self, config: HoldingsConfig | None = None):
        self.config = config or HoldingsConfig()

    def apply(self, state: CalculatorState) -> CalculatorState:
        """Применение clamp к акциям (см. with_invariant)."""
        return with_invariant(state)

    def classify(self, major_shares: int, minor_shares: int) -> HoldingsStatus:
        """Классификация пары акций с min_reserve из конфигурации."""
        return classify_holdings(major_shares, minor_shares, self.config.min_reserve)
