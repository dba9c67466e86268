"""
CalculatorState — Снапшот входных данных калькулятора дивидендов

Immutable Pydantic модель с шестью числовыми полями:

    A = line_revenue   — оборот линии акционера
    B = total_revenue  — общий оборот платформы
    C = net_profit     — чистая прибыль платформы (может быть отрицательной)
    D = total_shares   — общее количество акций (по умолчанию 130)
    major_shares       — акции крупного акционера линии
    minor_shares       — акции миноритария, выделенные из доли крупного

Модель не отбрасывает значения вне диапазона: инварианты по акциям
поддерживаются src.holdings.invariant, а предикат валидности — движком
расчёта. Изменение состояния всегда создаёт новый экземпляр.
"""

from typing import Any, Dict, Final

from pydantic import BaseModel, Field

from src.core.math.numeric_parser import to_non_negative_int, to_signed_int

# Общее количество акций по умолчанию (на странице поле фиксировано)
DEFAULT_TOTAL_SHARES: Final[int] = 130

# Порядок полей совпадает с порядком полей токена ссылки
STATE_FIELDS: Final[tuple[str, ...]] = (
    "line_revenue",
    "total_revenue",
    "net_profit",
    "total_shares",
    "major_shares",
    "minor_shares",
)

SHARE_FIELDS: Final[frozenset[str]] = frozenset(
    {"total_shares", "major_shares", "minor_shares"}
)

SIGNED_FIELDS: Final[frozenset[str]] = frozenset({"net_profit"})


def parse_state_field(field: str, raw: object) -> int:
    """
    Разбор сырого текста для поля состояния.

    net_profit — знаковое целое, остальные поля — неотрицательные целые.
    Дробные значения округляются вниз, как и в токене ссылки.

    Raises:
        KeyError: Если поле не входит в STATE_FIELDS
    """
    if field not in STATE_FIELDS:
        raise KeyError(field)
    if field in SIGNED_FIELDS:
        return to_signed_int(raw)
    return to_non_negative_int(raw)


class CalculatorState(BaseModel):
    """
    Входные данные расчёта распределения прибыли.

    Immutable модель (frozen=True). Все изменения — через with_updates().
    """

    line_revenue: float = Field(0.0, description="A: оборот линии акционера")
    total_revenue: float = Field(0.0, description="B: общий оборот")
    net_profit: float = Field(0.0, description="C: чистая прибыль (знаковая)")
    total_shares: int = Field(
        DEFAULT_TOTAL_SHARES, description="D: общее количество акций"
    )
    major_shares: int = Field(0, description="Акции крупного акционера")
    minor_shares: int = Field(0, description="Акции миноритария (часть major)")

    model_config = {"frozen": True}  # Immutable

    def with_updates(self, **changes: Any) -> "CalculatorState":
        """
        Новый снапшот с изменёнными полями.

        model_copy не валидирует update, поэтому проходим через
        model_validate для приведения типов.
        """
        return CalculatorState.model_validate({**self.model_dump(), **changes})

    def as_contract_dict(self) -> Dict[str, Any]:
        """Снапшот в формате контракта calculator_state."""
        return self.model_dump()
