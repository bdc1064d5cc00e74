"""
Function Table — фиксированная таблица функций и констант

Единственный источник callable для выражений: имя функции разрешается
только в этой таблице (никакого доступа к builtins или глобальному scope).

Семантика (совпадает с поведением калькулятора):
- log(x, base?) — ln(x) без base, иначе ln(x)/ln(base); NaN при base ≤ 0
  или base == 1
- sec, csc, cot, ... — 1/cos, 1/sin, 1/tan; в особых точках ±inf
- fact / factorial — только для неотрицательных целых (иначе NaN),
  +inf для n > 170 (насыщение, а не переполнение)
- round — округление половин вверх (round(-2.5) == -2)
- sign(0) == 0

Функции либо возвращают NaN/±inf, либо бросают ValueError/ArithmeticError
(например, sqrt(-1)); скомпилированная функция переводит оба случая в None.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Final, Mapping

# n! > max double для n > 170
FACTORIAL_MAX_ARG: Final[int] = 170

CONSTANTS: Final[Mapping[str, float]] = MappingProxyType({
    "pi": math.pi,
    "e": math.e,
})

VARIABLE_NAME: Final[str] = "x"


@dataclass(frozen=True)
class FunctionSpec:
    """
    Описание функции таблицы.

    Attributes:
        name: Имя в выражении
        func: Реализация
        min_args: Минимальное число аргументов
        max_args: Максимальное число аргументов (None — без ограничения)
    """

    name: str
    func: Callable[..., float]
    min_args: int = 1
    max_args: int | None = 1

    def accepts(self, count: int) -> bool:
        """Допустимо ли такое число аргументов."""
        if count < self.min_args:
            return False
        return self.max_args is None or count <= self.max_args

    def arity_text(self) -> str:
        """Человекочитаемая арность для сообщения об ошибке."""
        if self.max_args is None:
            return f"at least {self.min_args} argument(s)"
        if self.min_args == self.max_args:
            return f"{self.min_args} argument(s)"
        return f"{self.min_args} to {self.max_args} arguments"


# =============================================================================
# РЕАЛИЗАЦИИ
# =============================================================================


def reciprocal(value: float) -> float:
    """1/value с ±inf в нуле (знак нуля сохраняется)."""
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def natural_log(x: float) -> float:
    """
    ln(x) без исключений.

    Returns:
        ln(x) для x > 0, -inf для x == 0, NaN для x < 0 или NaN
    """
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan


def log_base(x: float, base: float | None = None) -> float:
    """
    Логарифм по произвольному основанию.

    Args:
        x: Аргумент
        base: Основание (None — натуральный логарифм)

    Returns:
        ln(x) / ln(base); NaN при base ≤ 0 или base == 1

    Examples:
        >>> log_base(8, 2)
        3.0
        >>> math.isnan(log_base(8, 1))
        True
    """
    if base is None:
        return natural_log(x)
    if base <= 0 or base == 1:
        return math.nan
    return natural_log(x) / natural_log(base)


def log10(x: float) -> float:
    if x > 0:
        return math.log10(x)
    return natural_log(x)


def log2(x: float) -> float:
    if x > 0:
        return math.log2(x)
    return natural_log(x)


def factorial(n: float) -> float:
    """
    Факториал неотрицательного целого.

    Returns:
        n! как float; NaN для отрицательных/нецелых; +inf для n > 170

    Examples:
        >>> factorial(5)
        120.0
        >>> factorial(171)
        inf
    """
    n = float(n)
    if n < 0 or not n.is_integer():
        return math.nan
    if n > FACTORIAL_MAX_ARG:
        return math.inf
    return float(math.factorial(int(n)))


def sign(x: float) -> float:
    if math.isnan(x) or x == 0:
        return x
    return math.copysign(1.0, x)


def round_half_up(x: float) -> float:
    return float(math.floor(x + 0.5))


def minimum(*values: float) -> float:
    return min(values)


def maximum(*values: float) -> float:
    return max(values)


def power(base: float, exponent: float) -> float:
    """base^exponent; ValueError для отрицательного base с дробным показателем."""
    return math.pow(base, exponent)


def _sec(x: float) -> float:
    return reciprocal(math.cos(x))


def _csc(x: float) -> float:
    return reciprocal(math.sin(x))


def _cot(x: float) -> float:
    return reciprocal(math.tan(x))


def _asec(x: float) -> float:
    return math.acos(reciprocal(x))


def _acsc(x: float) -> float:
    return math.asin(reciprocal(x))


def _acot(x: float) -> float:
    return math.pi / 2 - math.atan(x)


def _sech(x: float) -> float:
    return reciprocal(math.cosh(x))


def _csch(x: float) -> float:
    return reciprocal(math.sinh(x))


def _coth(x: float) -> float:
    return reciprocal(math.tanh(x))


def _unary(name: str, func: Callable[[float], float]) -> FunctionSpec:
    return FunctionSpec(name, func)


def _float_result(func: Callable[[float], int]) -> Callable[[float], float]:
    # math.ceil/floor/trunc возвращают int
    return lambda x: float(func(x))


def _build_table() -> Mapping[str, FunctionSpec]:
    specs = [
        _unary("sin", math.sin),
        _unary("cos", math.cos),
        _unary("tan", math.tan),
        _unary("asin", math.asin),
        _unary("acos", math.acos),
        _unary("atan", math.atan),
        _unary("sinh", math.sinh),
        _unary("cosh", math.cosh),
        _unary("tanh", math.tanh),
        _unary("asinh", math.asinh),
        _unary("acosh", math.acosh),
        _unary("atanh", math.atanh),
        _unary("sqrt", math.sqrt),
        _unary("cbrt", math.cbrt),
        _unary("abs", abs),
        _unary("sign", sign),
        _unary("ceil", _float_result(math.ceil)),
        _unary("floor", _float_result(math.floor)),
        _unary("round", round_half_up),
        _unary("trunc", _float_result(math.trunc)),
        _unary("exp", math.exp),
        FunctionSpec("pow", power, min_args=2, max_args=2),
        FunctionSpec("min", minimum, min_args=1, max_args=None),
        FunctionSpec("max", maximum, min_args=1, max_args=None),
        # Логарифмы
        FunctionSpec("log", log_base, min_args=1, max_args=2),
        _unary("log10", log10),
        _unary("log2", log2),
        _unary("ln", natural_log),
        # Обратные тригонометрические
        _unary("sec", _sec),
        _unary("csc", _csc),
        _unary("cot", _cot),
        _unary("asec", _asec),
        _unary("acsc", _acsc),
        _unary("acot", _acot),
        _unary("sech", _sech),
        _unary("csch", _csch),
        _unary("coth", _coth),
        _unary("cosec", _csc),
        # Факториал
        _unary("fact", factorial),
        _unary("factorial", factorial),
    ]
    return MappingProxyType({spec.name: spec for spec in specs})


FUNCTION_TABLE: Final[Mapping[str, FunctionSpec]] = _build_table()
