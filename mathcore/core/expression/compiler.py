"""
Compiler — превращение дерева выражения во вложенные замыкания

Дерево компилируется один раз; результат — функция одного аргумента x,
которая при вызове только выполняет арифметику (без разбора текста и без
обхода дерева через isinstance). Это важно для plotter: функция вызывается
на каждый пиксель по горизонтали на каждом кадре.
"""

import math
import operator
from typing import Callable, Final

from mathcore.core.expression.functions import power
from mathcore.core.expression.nodes import BinaryOp, Call, Node, Number, UnaryOp, Variable
from mathcore.core.expression.parser import parse_tokens
from mathcore.core.expression.tokenizer import Vocabulary, tokenize
from mathcore.errors import ParseError

Evaluator = Callable[[float], float]

# Глубина дерева ограничена, чтобы вызов замыканий не упирался в recursion limit
MAX_TREE_DEPTH: Final[int] = 250

_BINARY_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    # Остаток со знаком делимого (-7 % 3 == -1)
    "%": math.fmod,
    "^": power,
}


# Операторы одного уровня приоритета, левоассоциативные цепочки которых
# компилируются свёрткой: длина a+b+...+z не считается глубиной
_LEFT_CHAIN_GROUPS: dict[str, frozenset[str]] = {
    "+": frozenset("+-"),
    "-": frozenset("+-"),
    "*": frozenset("*/%"),
    "/": frozenset("*/%"),
    "%": frozenset("*/%"),
}


def _compile_chain(node: BinaryOp, depth: int) -> Evaluator:
    group = _LEFT_CHAIN_GROUPS[node.op]
    steps = []
    while isinstance(node, BinaryOp) and node.op in group:
        steps.append((_BINARY_OPERATORS[node.op], compile_node(node.right, depth + 1)))
        node = node.left
    first = compile_node(node, depth + 1)
    steps.reverse()

    if len(steps) == 1:
        ((op, right),) = steps
        return lambda x: op(first(x), right(x))

    def evaluate(x: float) -> float:
        acc = first(x)
        for op, right in steps:
            acc = op(acc, right(x))
        return acc

    return evaluate


def compile_node(node: Node, depth: int = 0) -> Evaluator:
    """
    Компиляция узла дерева в замыкание.

    Args:
        node: Корень (под)дерева
        depth: Текущая глубина (ограничена MAX_TREE_DEPTH)

    Returns:
        Функция x → float (может бросать ValueError/ArithmeticError)

    Raises:
        ParseError: Дерево глубже MAX_TREE_DEPTH
    """
    if depth > MAX_TREE_DEPTH:
        raise ParseError(f"Expression is too long (tree depth exceeds {MAX_TREE_DEPTH})")

    if isinstance(node, Number):
        value = node.value
        return lambda x: value

    if isinstance(node, Variable):
        return lambda x: x

    if isinstance(node, UnaryOp):
        operand = compile_node(node.operand, depth + 1)
        if node.op == "-":
            return lambda x: -operand(x)
        return operand

    if isinstance(node, BinaryOp) and node.op in _LEFT_CHAIN_GROUPS:
        return _compile_chain(node, depth)

    if isinstance(node, BinaryOp):
        op = _BINARY_OPERATORS[node.op]
        left = compile_node(node.left, depth + 1)
        right = compile_node(node.right, depth + 1)
        return lambda x: op(left(x), right(x))

    if isinstance(node, Call):
        func = node.func
        args = tuple(compile_node(arg, depth + 1) for arg in node.args)
        if len(args) == 1:
            (arg,) = args
            return lambda x: func(arg(x))
        if len(args) == 2:
            first, second = args
            return lambda x: func(first(x), second(x))
        return lambda x: func(*[arg(x) for arg in args])

    raise TypeError(f"Unsupported expression node: {type(node).__name__}")


def compile_expression(
    text: str,
    vocabulary: Vocabulary,
    implicit_multiplication: bool = True,
) -> tuple[Node, Evaluator]:
    """
    Полный цикл: текст → токены → дерево → замыкание.

    Raises:
        ParseError: Неизвестный идентификатор или синтаксическая ошибка
    """
    tokens = tokenize(text, vocabulary, implicit_multiplication=implicit_multiplication)
    tree = parse_tokens(tokens, vocabulary, source=text)
    return tree, compile_node(tree)
