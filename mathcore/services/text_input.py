"""
Разбор текстовых полей UI в числа.

Два режима, как в полях ввода калькулятора:
- permissive (ячейки матриц, коэффициенты): берётся числовой префикс
  строки, "12abc" → 12.0, "abc" → None
- strict (поле простого числа): вся строка должна быть числом
"""

import math
import re
from typing import Final

from mathcore.core.math.numerical_safeguards import to_integer
from mathcore.errors import ValidationError

_NUMERIC_PREFIX: Final[re.Pattern] = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|Infinity))"
)


def parse_float_prefix(text: str) -> float | None:
    """
    Числовой префикс строки или None.

    Examples:
        >>> parse_float_prefix(" 2.5kg")
        2.5
        >>> parse_float_prefix("1e3")
        1000.0
        >>> parse_float_prefix("-") is None
        True
    """
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    token = match.group(1)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def parse_cell(cell: float | int | str) -> float:
    """
    Ячейка матрицы → float; нечисловое или нефинитное значение → 0.0.

    Examples:
        >>> parse_cell("3")
        3.0
        >>> parse_cell("")
        0.0
        >>> parse_cell("x")
        0.0
    """
    if isinstance(cell, str):
        value = parse_float_prefix(cell)
    else:
        value = float(cell)
    if value is None or not math.isfinite(value):
        return 0.0
    return value


def parse_coefficient(value: float | int | str, name: str) -> float:
    """
    Коэффициент уравнения: числовой префикс текста или число.

    Raises:
        ValidationError: Нет числового префикса
    """
    if isinstance(value, str):
        parsed = parse_float_prefix(value)
        if parsed is None:
            raise ValidationError("Please enter valid numbers for all coefficients.")
        return parsed
    return float(value)


def parse_integer_text(value: int | str) -> int:
    """
    Поле простого числа: строка целиком должна быть целым числом.

    "360" → 360, "1e3" → 1000, "12.5" / "12a" → ValidationError.
    """
    if isinstance(value, int):
        return value

    text = value.strip()
    if not text:
        raise ValidationError("Please enter a number.")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise ValidationError("Invalid input. Please enter a valid integer.") from None
    if not math.isfinite(number):
        raise ValidationError("Invalid input. Please enter a valid integer.")
    return to_integer(number, "number")
