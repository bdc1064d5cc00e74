"""
Parser — рекурсивный спуск по списку токенов

Грамматика (от низкого приоритета к высокому):

    expression := term (('+' | '-') term)*
    term       := unary (('*' | '/' | '%') unary)*
    unary      := ('+' | '-') unary | power
    power      := primary ('^' unary)?            правоассоциативно
    primary    := NUMBER | CONSTANT | VARIABLE
                | FUNCTION '(' expression (',' expression)* ')'
                | '(' expression ')'

Следствия: -x^2 = -(x^2), 2^3^2 = 2^(3^2), 2x^2 = 2*(x^2), 2^-1 = 0.5.
"""

from typing import Final

from mathcore.core.expression.nodes import BinaryOp, Call, Node, Number, UnaryOp, Variable
from mathcore.core.expression.tokenizer import Token, TokenType, Vocabulary
from mathcore.errors import ParseError

# Ограничение глубины вложенности (защита от RecursionError)
MAX_NESTING_DEPTH: Final[int] = 100


class Parser:
    """Парсер выражения. Один экземпляр на один список токенов."""

    def __init__(self, tokens: list[Token], vocabulary: Vocabulary, source: str = ""):
        self._tokens = tokens
        self._vocabulary = vocabulary
        self._source = source
        self._index = 0
        self._depth = 0

    # -------------------------------------------------------------------------
    # Навигация по токенам
    # -------------------------------------------------------------------------

    def _peek(self) -> Token | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _match_operator(self, *ops: str) -> Token | None:
        token = self._peek()
        if token is not None and token.type == TokenType.OPERATOR and token.text in ops:
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, description: str) -> Token:
        token = self._peek()
        if token is None:
            raise ParseError(f"Unexpected end of expression: expected {description}", position=len(self._source))
        if token.type != token_type:
            raise ParseError(
                f'Expected {description} but found "{token.text}" at position {token.position}',
                token=token.text,
                position=token.position,
            )
        return self._advance()

    # -------------------------------------------------------------------------
    # Правила грамматики
    # -------------------------------------------------------------------------

    def parse(self) -> Node:
        """
        Разбор всего списка токенов.

        Raises:
            ParseError: Пустое выражение, лишние или недостающие токены
        """
        if not self._tokens:
            raise ParseError("Expression is empty")

        node = self._expression()

        token = self._peek()
        if token is not None:
            raise ParseError(
                f'Unexpected "{token.text}" at position {token.position}',
                token=token.text,
                position=token.position,
            )
        return node

    def _expression(self) -> Node:
        node = self._term()
        while True:
            op = self._match_operator("+", "-")
            if op is None:
                return node
            node = BinaryOp(op.text, node, self._term())

    def _term(self) -> Node:
        node = self._unary()
        while True:
            op = self._match_operator("*", "/", "%")
            if op is None:
                return node
            node = BinaryOp(op.text, node, self._unary())

    def _unary(self) -> Node:
        # Любая рекурсия (скобки, показатель степени, унарный минус) проходит здесь
        self._depth += 1
        if self._depth > MAX_NESTING_DEPTH:
            raise ParseError(f"Expression is nested deeper than {MAX_NESTING_DEPTH} levels")
        try:
            op = self._match_operator("+", "-")
            if op is not None:
                return UnaryOp(op.text, self._unary())
            return self._power()
        finally:
            self._depth -= 1

    def _power(self) -> Node:
        base = self._primary()
        if self._match_operator("^") is not None:
            return BinaryOp("^", base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self._peek()
        if token is None:
            raise ParseError("Unexpected end of expression", position=len(self._source))

        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            self._advance()
            return Number(token.value)

        if token.type == TokenType.VARIABLE:
            self._advance()
            return Variable(token.text)

        if token.type == TokenType.FUNCTION:
            return self._call()

        if token.type == TokenType.LPAREN:
            self._advance()
            node = self._expression()
            self._expect(TokenType.RPAREN, '")"')
            return node

        raise ParseError(
            f'Unexpected "{token.text}" at position {token.position}',
            token=token.text,
            position=token.position,
        )

    def _call(self) -> Node:
        name_token = self._advance()
        name = name_token.text
        spec = self._vocabulary.functions[name]

        following = self._peek()
        if following is None or following.type != TokenType.LPAREN:
            raise ParseError(
                f'Function "{name}" must be followed by "("',
                token=name,
                position=name_token.position,
            )
        self._advance()

        args = [self._expression()]
        while self._peek() is not None and self._peek().type == TokenType.COMMA:
            self._advance()
            args.append(self._expression())
        self._expect(TokenType.RPAREN, f'")" to close "{name}("')

        if not spec.accepts(len(args)):
            raise ParseError(
                f'Function "{name}" expects {spec.arity_text()}, got {len(args)}',
                token=name,
                position=name_token.position,
            )

        return Call(name, tuple(args), spec.func)


def parse_tokens(tokens: list[Token], vocabulary: Vocabulary, source: str = "") -> Node:
    """Разбор списка токенов в дерево выражения."""
    return Parser(tokens, vocabulary, source).parse()
