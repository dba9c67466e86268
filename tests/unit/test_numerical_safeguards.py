"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf санитизацию
2. Безопасное округление вниз
3. Проверку знака с толерантностью
4. Ограничение диапазоном
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    clamp,
    floor_to_int,
    is_negative,
    is_valid_float,
    sanitize_float,
)

# =============================================================================
# ТЕСТЫ NaN/Inf САНИТИЗАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert is_valid_float(42)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_non_numeric_invalid(self) -> None:
        """Не-числовые значения невалидны, без exception"""
        assert not is_valid_float(None)
        assert not is_valid_float("12")

    def test_int_beyond_float_range_invalid(self) -> None:
        """Целое, не представимое float, невалидно, без OverflowError"""
        assert not is_valid_float(10**400)
        assert not is_valid_float(-(10**400))


class TestSanitizeFloat:
    """Тесты для sanitize_float"""

    def test_valid_value_unchanged(self) -> None:
        assert sanitize_float(10.5) == 10.5
        assert sanitize_float(-3.0) == -3.0

    def test_nan_replaced_by_fallback(self) -> None:
        assert sanitize_float(float("nan")) == 0.0
        assert sanitize_float(float("nan"), fallback=7.0) == 7.0

    def test_inf_replaced_by_fallback(self) -> None:
        assert sanitize_float(float("inf")) == 0.0
        assert sanitize_float(float("-inf"), fallback=-1.0) == -1.0


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestFloorToInt:
    """Тесты для floor_to_int"""

    def test_positive_fraction_floored(self) -> None:
        assert floor_to_int(59.9) == 59
        assert floor_to_int(60.0) == 60

    def test_negative_fraction_floored_down(self) -> None:
        """Округление вниз, а не к нулю"""
        assert floor_to_int(-0.5) == -1
        assert floor_to_int(-12345.2) == -12346

    def test_result_is_int(self) -> None:
        assert isinstance(floor_to_int(3.7), int)

    def test_non_finite_returns_fallback(self) -> None:
        """inf/nan не вызывают OverflowError/ValueError"""
        assert floor_to_int(float("inf")) == 0
        assert floor_to_int(float("-inf")) == 0
        assert floor_to_int(float("nan"), fallback=5) == 5

    def test_large_value_exact(self) -> None:
        assert floor_to_int(1e15 + 0.5) == math.floor(1e15 + 0.5)


# =============================================================================
# ТЕСТЫ ПРОВЕРОК И ОГРАНИЧЕНИЙ
# =============================================================================


class TestIsNegative:
    """Тесты для is_negative"""

    def test_negative_detected(self) -> None:
        assert is_negative(-1.0)
        assert is_negative(-40_000_000)

    def test_zero_and_positive_not_negative(self) -> None:
        assert not is_negative(0.0)
        assert not is_negative(-0.0)
        assert not is_negative(5.0)

    def test_tolerance_respected(self) -> None:
        """Значения в пределах толерантности не считаются отрицательными"""
        assert not is_negative(-EPS_FLOAT_COMPARE_ABS / 2)


class TestClamp:
    """Тесты для clamp"""

    def test_value_within_range_unchanged(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_lower_bound(self) -> None:
        assert clamp(-1, 0, 10) == 0
        assert clamp(-1, min_value=0) == 0

    def test_upper_bound(self) -> None:
        assert clamp(150, 0, 130) == 130
        assert clamp(150, max_value=130) == 130

    def test_no_bounds(self) -> None:
        assert clamp(-7.5) == pytest.approx(-7.5)
