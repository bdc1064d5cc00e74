"""
Tokenizer — лексический анализ выражений

Классифицирует каждую лексему (число, функция, константа, переменная,
оператор, скобка, запятая) и вставляет явный токен умножения между
соседними лексемами, смежность которых означает умножение:

    a. число → слово или '('             2x, 2sin(x), 3(x)
    b. ')' → слово, число или '('        (x+1)(x-1), (x)2
    c. x → число                         x2
    d. x → слово или '('                 xsin(x), xx, x(x)

Константы (pi, e) после числа ведут себя как переменная: 2pi.

Буквенная последовательность должна быть словом словаря, которому могут
предшествовать переменные x: "xsin" → x, sin; "xpi" → x, pi. Любая другая
последовательность ("pix", "ee", "sine") считается неизвестным
идентификатором целиком.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from mathcore.errors import ParseError


class TokenType(str, Enum):
    """Тип лексемы"""

    NUMBER = "number"
    FUNCTION = "function"
    CONSTANT = "constant"
    VARIABLE = "variable"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    COMMA = "comma"


@dataclass(frozen=True)
class Token:
    """Лексема с позицией во входной строке."""

    type: TokenType
    text: str
    position: int
    value: float | None = None
    implicit: bool = False


@dataclass(frozen=True)
class Vocabulary:
    """
    Фиксированный словарь идентификаторов выражения.

    Attributes:
        functions: имя → FunctionSpec (см. functions.py)
        constants: имя → значение (буквенные: "pi", "e")
        symbols: односимвольные константы ("π")
        variables: допустимые переменные ("x")
    """

    functions: Mapping = field(default_factory=lambda: MappingProxyType({}))
    constants: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    symbols: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    variables: frozenset[str] = frozenset()

    def words(self) -> frozenset[str]:
        """Буквенные слова словаря."""
        names = set(self.constants) | set(self.variables)
        names |= {name for name in self.functions if name.isalpha()}
        return frozenset(names)


_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_LETTERS_RE = re.compile(r"[a-z]+")
_DIGITS_RE = re.compile(r"\d+")

_OPERATORS = frozenset("+-*/%^")

# Лексемы, после которых смежность означает умножение
_LEFT_OPERANDS = frozenset({
    TokenType.NUMBER,
    TokenType.CONSTANT,
    TokenType.VARIABLE,
    TokenType.RPAREN,
})

# Лексемы, перед которыми смежность означает умножение
_RIGHT_OPERANDS = frozenset({
    TokenType.NUMBER,
    TokenType.CONSTANT,
    TokenType.VARIABLE,
    TokenType.FUNCTION,
    TokenType.LPAREN,
})


@lru_cache(maxsize=1024)
def _segment(run: str, words: frozenset[str], variables: frozenset[str]) -> tuple[str, ...] | None:
    """
    Разбиение буквенной последовательности (или None).

    Последовательность допустима, если она целиком слово словаря, либо
    слову (или концу) предшествуют однобуквенные переменные: "xsin",
    "xx", "xpi". Любое другое склеивание ("pix", "ee", "sine") запрещено.
    """
    if run in words:
        return (run,)
    prefix = 0
    while prefix < len(run) and run[prefix] in variables:
        prefix += 1
    if prefix == 0:
        return None
    rest = run[prefix:]
    if rest and rest not in words:
        return None
    return tuple(run[:prefix]) + ((rest,) if rest else ())


def _word_token(word: str, position: int, vocabulary: Vocabulary) -> Token:
    if word in vocabulary.variables:
        return Token(TokenType.VARIABLE, word, position)
    if word in vocabulary.constants:
        return Token(TokenType.CONSTANT, word, position, value=vocabulary.constants[word])
    return Token(TokenType.FUNCTION, word, position)


def _lex(text: str, vocabulary: Vocabulary) -> list[Token]:
    tokens: list[Token] = []
    words = vocabulary.words()
    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]

        if ch.isspace():
            pos += 1
            continue

        number = _NUMBER_RE.match(text, pos)
        if number:
            tokens.append(Token(TokenType.NUMBER, number.group(), pos, value=float(number.group())))
            pos = number.end()
            continue

        letters = _LETTERS_RE.match(text, pos)
        if letters:
            run = letters.group()
            segments = _segment(run, words, frozenset(vocabulary.variables))
            if segments is None:
                raise ParseError(f'Unknown function or variable: "{run}"', token=run, position=pos)

            end = letters.end()
            # log10, log2: имя функции с цифровым суффиксом
            digits = _DIGITS_RE.match(text, end)
            if digits and segments[-1] + digits.group() in vocabulary.functions:
                segments = segments[:-1] + (segments[-1] + digits.group(),)
                end = digits.end()

            offset = pos
            for word in segments:
                tokens.append(_word_token(word, offset, vocabulary))
                offset += len(word)
            pos = end
            continue

        if ch in vocabulary.symbols:
            tokens.append(Token(TokenType.CONSTANT, ch, pos, value=vocabulary.symbols[ch]))
            pos += 1
            continue

        if text.startswith("**", pos):
            tokens.append(Token(TokenType.OPERATOR, "^", pos))
            pos += 2
            continue

        if ch in _OPERATORS:
            tokens.append(Token(TokenType.OPERATOR, ch, pos))
        elif ch == "(":
            tokens.append(Token(TokenType.LPAREN, ch, pos))
        elif ch == ")":
            tokens.append(Token(TokenType.RPAREN, ch, pos))
        elif ch == ",":
            tokens.append(Token(TokenType.COMMA, ch, pos))
        else:
            raise ParseError(f'Unexpected character "{ch}" at position {pos}', token=ch, position=pos)
        pos += 1

    return tokens


def _insert_implicit_multiplication(tokens: list[Token]) -> list[Token]:
    result: list[Token] = []
    for token in tokens:
        if result:
            prev = result[-1]
            adjacent_numbers = prev.type == TokenType.NUMBER and token.type == TokenType.NUMBER
            if (
                prev.type in _LEFT_OPERANDS
                and token.type in _RIGHT_OPERANDS
                and not adjacent_numbers
            ):
                result.append(Token(TokenType.OPERATOR, "*", token.position, implicit=True))
        result.append(token)
    return result


def tokenize(
    text: str,
    vocabulary: Vocabulary,
    implicit_multiplication: bool = True,
) -> list[Token]:
    """
    Разбор строки на лексемы.

    Args:
        text: Выражение (регистр не приводится, это делает вызывающий код)
        vocabulary: Словарь допустимых идентификаторов
        implicit_multiplication: Вставлять ли '*' между смежными операндами

    Returns:
        Список токенов

    Raises:
        ParseError: Неизвестный идентификатор или недопустимый символ
    """
    tokens = _lex(text, vocabulary)
    if implicit_multiplication:
        tokens = _insert_implicit_multiplication(tokens)
    return tokens
