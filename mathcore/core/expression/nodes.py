"""
Expression tree — узлы дерева разбора.

Tagged-variant представление: каждый узел является неизменяемым dataclass.
Функции разрешаются в callable на этапе разбора (Call.func), поэтому при
вычислении дерева текст больше не анализируется.
"""

from dataclasses import dataclass, field
from typing import Callable, Union


@dataclass(frozen=True)
class Number:
    """Числовой литерал или константа (pi, e, π)."""

    value: float


@dataclass(frozen=True)
class Variable:
    """Переменная выражения (x)."""

    name: str


@dataclass(frozen=True)
class UnaryOp:
    """Унарный оператор: '+' или '-'."""

    op: str
    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    """Бинарный оператор: '+', '-', '*', '/', '%', '^'."""

    op: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Call:
    """Вызов функции из фиксированной таблицы."""

    name: str
    args: tuple["Node", ...]
    func: Callable[..., float] = field(compare=False, repr=False)


Node = Union[Number, Variable, UnaryOp, BinaryOp, Call]
