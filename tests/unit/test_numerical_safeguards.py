"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки и None-сентинел
2. Epsilon-сравнения float
3. Нормализацию отрицательного нуля
4. Приведение входов к float/int с ValidationError
"""

import math

import pytest

from mathcore.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_SINGULAR,
    MAX_SAFE_INTEGER,
    finite_or_none,
    is_close,
    is_valid_float,
    is_zero,
    normalize_negative_zero,
    to_finite_float,
    to_integer,
)
from mathcore.errors import ValidationError

# =============================================================================
# NaN/Inf
# =============================================================================


class TestFiniteChecks:
    """Тесты для is_valid_float и finite_or_none"""

    def test_regular_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_finite_value_passes_through(self) -> None:
        assert finite_or_none(2.5) == 2.5

    def test_int_converted_to_float(self) -> None:
        result = finite_or_none(3)
        assert result == 3.0
        assert isinstance(result, float)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_becomes_none(self, value: float) -> None:
        """NaN/Inf → None"""
        assert finite_or_none(value) is None

    def test_complex_becomes_none(self) -> None:
        """Комплексный результат (например, (-8) ** (1/3)) → None"""
        assert finite_or_none(complex(1, 2)) is None


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


class TestEpsilonComparisons:
    """Тесты для is_close и is_zero"""

    def test_is_close_for_rounding_noise(self) -> None:
        assert is_close(0.1 + 0.2, 0.3)

    def test_is_close_rejects_real_difference(self) -> None:
        assert not is_close(1.0, 1.001)

    def test_is_zero_within_tolerance(self) -> None:
        assert is_zero(EPS_FLOAT_COMPARE_ABS / 2)
        assert not is_zero(1e-6)

    def test_singular_epsilon_order(self) -> None:
        """Порог вырожденности строже, чем ошибки округления 2×2 детерминанта"""
        assert EPS_SINGULAR == 1e-10


class TestNegativeZero:
    def test_negative_zero_normalized(self) -> None:
        result = normalize_negative_zero(-0.0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_other_values_unchanged(self) -> None:
        assert normalize_negative_zero(-1.5) == -1.5
        assert normalize_negative_zero(2.0) == 2.0


# =============================================================================
# ПРИВЕДЕНИЕ ВХОДОВ
# =============================================================================


class TestToFiniteFloat:
    """Тесты для to_finite_float"""

    def test_int_and_float_accepted(self) -> None:
        assert to_finite_float(3, "a") == 3.0
        assert to_finite_float(-2.5, "a") == -2.5

    def test_bool_rejected(self) -> None:
        """bool — подкласс int, но числом не считается"""
        with pytest.raises(ValidationError, match="a must be a number"):
            to_finite_float(True, "a")

    def test_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            to_finite_float("3", "b")

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not NaN/Inf"):
            to_finite_float(math.nan, "c")

    def test_validation_error_is_value_error(self) -> None:
        """ValidationError совместима с ValueError"""
        with pytest.raises(ValueError):
            to_finite_float(math.inf, "c")


class TestToInteger:
    """Тесты для to_integer"""

    def test_int_accepted(self) -> None:
        assert to_integer(360, "n") == 360

    def test_integral_float_accepted(self) -> None:
        result = to_integer(360.0, "n")
        assert result == 360
        assert isinstance(result, int)

    def test_fractional_float_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be an integer"):
            to_integer(12.5, "n")

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValidationError):
            to_integer(False, "n")

    def test_max_safe_integer(self) -> None:
        assert MAX_SAFE_INTEGER == 9007199254740991
