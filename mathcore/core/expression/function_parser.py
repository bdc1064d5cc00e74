"""
Function Parser — компиляция формулы одной переменной

parse_function("2x^2 * sin(x)") возвращает CompiledFunction: callable
x → float | None, где None означает "не определено в этой точке"
(sqrt(-1), деление на ноль, переполнение, NaN/Inf результат).

Ошибки разбора (неизвестный идентификатор, синтаксис, арность)
поднимаются при разборе как ParseError, а не при вызове.

Пример:
    >>> f = parse_function("2x")
    >>> f(3)
    6.0
    >>> parse_function("sqrt(x)")(-1) is None
    True
"""

import logging
from types import MappingProxyType
from typing import Final

from mathcore.config import DEFAULT_CONFIG
from mathcore.core.expression.compiler import Evaluator, compile_expression
from mathcore.core.expression.functions import CONSTANTS, FUNCTION_TABLE, VARIABLE_NAME
from mathcore.core.expression.nodes import Node
from mathcore.core.expression.tokenizer import Vocabulary
from mathcore.core.math.numerical_safeguards import finite_or_none
from mathcore.errors import ParseError

logger = logging.getLogger(__name__)

FUNCTION_VOCABULARY: Final[Vocabulary] = Vocabulary(
    functions=FUNCTION_TABLE,
    constants=CONSTANTS,
    symbols=MappingProxyType({}),
    variables=frozenset({VARIABLE_NAME}),
)


class CompiledFunction:
    """
    Скомпилированная функция x → float | None.

    Не сериализуется; живёт, пока UI держит ссылку (например, пока график
    отображается).

    Attributes:
        source: Исходный текст формулы
        tree: Дерево выражения
    """

    __slots__ = ("source", "tree", "_evaluate")

    def __init__(self, source: str, tree: Node, evaluate: Evaluator):
        self.source = source
        self.tree = tree
        self._evaluate = evaluate

    def __call__(self, x: float) -> float | None:
        try:
            return finite_or_none(self._evaluate(x))
        except (ArithmeticError, ValueError):
            # DomainFailure: точка не определена, остальные точки считаются
            return None

    def __repr__(self) -> str:
        return f"CompiledFunction({self.source!r})"


def normalize_function_text(text: str) -> str:
    """Нижний регистр, пробельные символы сжимаются до одного пробела (граница слов)."""
    return " ".join(text.lower().split())


def parse_function(expression: str, probe_value: float | None = None) -> CompiledFunction:
    """
    Компиляция текстовой формулы в CompiledFunction.

    Алгоритм:
    1. Нормализация (нижний регистр, пробелы разделяют слова)
    2. Токенизация со словарём функций/констант/x (неизвестный идентификатор
       → ParseError с этим идентификатором) и неявным умножением
    3. Разбор в дерево (функции разрешаются в таблице FUNCTION_TABLE)
    4. Компиляция дерева в замыкание
    5. Пробный вызов в probe_value

    Args:
        expression: Формула, например "2x^2 * sin(x)"
        probe_value: Точка пробного вызова (default: EngineConfig.probe_value)

    Returns:
        CompiledFunction

    Raises:
        ParseError: Неизвестный идентификатор или синтаксическая ошибка
    """
    if not isinstance(expression, str):
        raise ParseError(f"Expression must be a string, got {type(expression).__name__}")

    text = normalize_function_text(expression)
    if not text:
        raise ParseError("Expression is empty")

    try:
        tree, evaluate = compile_expression(text, FUNCTION_VOCABULARY, implicit_multiplication=True)
    except ParseError as e:
        logger.debug("Function parsing error for %r: %s", expression, e)
        raise

    compiled = CompiledFunction(expression, tree, evaluate)

    probe = DEFAULT_CONFIG.probe_value if probe_value is None else probe_value
    probe_result = compiled(probe)
    logger.debug("Compiled %r, f(%s) = %s", expression, probe, probe_result)

    return compiled
