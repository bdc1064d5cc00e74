"""
Expression Evaluator — безопасное вычисление выражений калькулятора

- safe_evaluate: только арифметика (цифры, + - * / ( ) % . и пробелы)
- evaluate_scientific: дополнительно sin, cos, tan, log (десятичный),
  ln, sqrt, константы π и e, степень ^

Граница безопасности:
1. Символы вне allow-list → None (выражение не разбирается вовсе)
2. Идентификаторы вне фиксированного набора → None
3. Выражение разбирается в дерево и вычисляется обходом замыканий,
   eval/exec не используются

Любой сбой (синтаксис, деление на ноль, NaN/Inf) → None; исключения
за пределы evaluator не выходят.
"""

import logging
import math
import re
from types import MappingProxyType
from typing import Final

from mathcore.config import DEFAULT_CONFIG
from mathcore.core.expression.compiler import compile_expression
from mathcore.core.expression.functions import FunctionSpec, log10, natural_log
from mathcore.core.expression.tokenizer import Vocabulary
from mathcore.core.math.numerical_safeguards import finite_or_none, normalize_negative_zero

logger = logging.getLogger(__name__)

_ARITHMETIC_ALLOWED: Final[re.Pattern] = re.compile(r"[0-9+\-*/().\s%]*")
_SCIENTIFIC_ALLOWED: Final[re.Pattern] = re.compile(r"[0-9+\-*/().\s%a-z^π]*")

ARITHMETIC_VOCABULARY: Final[Vocabulary] = Vocabulary()


def _degrees(func):
    return lambda d: func(math.radians(d))


def _scientific_vocabulary(is_degree_mode: bool) -> Vocabulary:
    trig = _degrees if is_degree_mode else (lambda func: func)
    functions = {
        "sin": FunctionSpec("sin", trig(math.sin)),
        "cos": FunctionSpec("cos", trig(math.cos)),
        "tan": FunctionSpec("tan", trig(math.tan)),
        "log": FunctionSpec("log", log10),
        "ln": FunctionSpec("ln", natural_log),
        "sqrt": FunctionSpec("sqrt", math.sqrt),
    }
    return Vocabulary(
        functions=MappingProxyType(functions),
        constants=MappingProxyType({"e": math.e}),
        symbols=MappingProxyType({"π": math.pi}),
    )


SCIENTIFIC_DEGREE_VOCABULARY: Final[Vocabulary] = _scientific_vocabulary(is_degree_mode=True)
SCIENTIFIC_RADIAN_VOCABULARY: Final[Vocabulary] = _scientific_vocabulary(is_degree_mode=False)


def _evaluate(expression: str, vocabulary: Vocabulary) -> float | None:
    try:
        _, evaluate = compile_expression(expression, vocabulary, implicit_multiplication=False)
        result = finite_or_none(evaluate(0.0))
    except (ArithmeticError, ValueError) as e:
        # ParseError наследует ValueError
        logger.debug("Evaluation error for %r: %s", expression, e)
        return None

    if result is None:
        logger.debug("Non-finite result for %r", expression)
    return result


def safe_evaluate(expression: str) -> float | None:
    """
    Вычисление арифметического выражения.

    Args:
        expression: Текст дисплея калькулятора, например "2 + 2 * 3"

    Returns:
        Результат (finite float) или None при любой ошибке

    Examples:
        >>> safe_evaluate("2+2")
        4.0
        >>> safe_evaluate("2+") is None
        True
    """
    if not isinstance(expression, str) or not _ARITHMETIC_ALLOWED.fullmatch(expression):
        logger.debug("Rejected expression with disallowed characters: %r", expression)
        return None
    return _evaluate(expression, ARITHMETIC_VOCABULARY)


def evaluate_scientific(expression: str, is_degree_mode: bool = True) -> float | None:
    """
    Вычисление выражения научного режима.

    Args:
        expression: Текст дисплея, например "sin(30) + 2^3"
        is_degree_mode: True — аргументы sin/cos/tan в градусах,
            False — в радианах

    Returns:
        Результат (finite float) или None при любой ошибке

    Examples:
        >>> evaluate_scientific("sin(90)", True)
        1.0
        >>> evaluate_scientific("2^10", False)
        1024.0
    """
    if not isinstance(expression, str) or not _SCIENTIFIC_ALLOWED.fullmatch(expression):
        logger.debug("Rejected scientific expression with disallowed characters: %r", expression)
        return None

    vocabulary = SCIENTIFIC_DEGREE_VOCABULARY if is_degree_mode else SCIENTIFIC_RADIAN_VOCABULARY
    return _evaluate(expression, vocabulary)


def format_display_value(value: float, significant_digits: int | None = None) -> float:
    """
    Округление результата для дисплея (по умолчанию 12 значащих цифр).

    Examples:
        >>> format_display_value(0.1 + 0.2)
        0.3
    """
    digits = DEFAULT_CONFIG.display_significant_digits if significant_digits is None else significant_digits
    return normalize_negative_zero(float(f"{value:.{digits}g}"))
