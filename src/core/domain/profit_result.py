"""
ProfitResult — Результат распределения прибыли

Immutable Pydantic модель {total, major, minor, valid}.

Инвариант: при valid=True выполняется major + minor == total точно,
так как major вычисляется как total - minor.
"""

from pydantic import BaseModel, Field


class ProfitResult(BaseModel):
    """Трёхстороннее распределение прибыли (без округления)."""

    total: float = Field(..., description="Общая прибыль линии")
    major: float = Field(..., description="Прибыль крупного акционера")
    minor: float = Field(..., description="Прибыль миноритария")
    valid: bool = Field(..., description="Прошли ли входные данные проверку")

    model_config = {"frozen": True}

    @classmethod
    def invalid(cls) -> "ProfitResult":
        """Результат для невалидного ввода: все суммы равны нулю."""
        return cls(total=0.0, major=0.0, minor=0.0, valid=False)
