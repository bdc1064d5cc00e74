"""
Numerical Safeguards — численные примитивы ядра

Модуль обеспечивает общие epsilon-параметры и проверки:
- Валидация float (NaN/Inf) и преобразование в None-сентинел
- Epsilon-сравнения для матричных алгоритмов
- Нормализация отрицательного нуля для форматирования
- Приведение пользовательских чисел к float/int с ValidationError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный результат (NaN/Inf) никогда не возвращается как число
2. Вырожденность матрицы определяется только через EPS_SINGULAR
3. Все операции детерминированы и чисты
"""

import math
from typing import Final

from mathcore.errors import ValidationError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# |det| < EPS_SINGULAR → матрица считается вырожденной
EPS_SINGULAR: Final[float] = 1e-10

# Порог "ненулевого" элемента при построении собственного вектора 2×2
# и минимальная длина вектора для нормализации
EPS_EIGEN: Final[float] = 1e-9

# Толерантности для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Наибольшее целое, точно представимое в double (2^53 - 1)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def finite_or_none(value: float) -> float | None:
    """
    Преобразование результата вычисления в float или None-сентинел.

    Args:
        value: Результат вычисления (может быть NaN/Inf)

    Returns:
        float(value) если finite, иначе None

    Examples:
        >>> finite_or_none(2.0)
        2.0
        >>> finite_or_none(float('inf')) is None
        True
    """
    if isinstance(value, complex):
        return None
    result = float(value)
    if not math.isfinite(result):
        return None
    return result


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


def normalize_negative_zero(value: float) -> float:
    """
    Замена -0.0 на 0.0 (для форматирования "0", а не "-0").

    Examples:
        >>> normalize_negative_zero(-0.0)
        0.0
        >>> normalize_negative_zero(-1.5)
        -1.5
    """
    return value + 0.0


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def to_finite_float(value: object, name: str) -> float:
    """
    Приведение числового входа к finite float.

    Args:
        value: int или float (bool не принимается)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        ValidationError: Если значение нечисловое или NaN/Inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")

    result = float(value)
    if not is_valid_float(result):
        raise ValidationError(f"{name} must be a valid number (not NaN/Inf), got {value}")

    return result


def to_integer(value: object, name: str) -> int:
    """
    Приведение входа к int: принимаются int и float с целым значением.

    Raises:
        ValidationError: Если значение нечисловое, NaN/Inf или нецелое
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got {value!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not is_valid_float(value) or not value.is_integer():
            raise ValidationError(f"{name} must be an integer, got {value}")
        return int(value)

    raise ValidationError(f"{name} must be an integer, got {value!r}")
