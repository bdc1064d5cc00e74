"""
Expression engine — токенизация, разбор и компиляция выражений.

Формула → токены (с неявным умножением) → дерево → замыкания.
Используется Function Parser (plotter) и evaluators калькулятора.
"""

from mathcore.core.expression.evaluator import (
    evaluate_scientific,
    format_display_value,
    safe_evaluate,
)
from mathcore.core.expression.function_parser import (
    FUNCTION_VOCABULARY,
    CompiledFunction,
    parse_function,
)
from mathcore.core.expression.functions import (
    CONSTANTS,
    FACTORIAL_MAX_ARG,
    FUNCTION_TABLE,
    FunctionSpec,
    factorial,
    log_base,
)
from mathcore.core.expression.tokenizer import Token, TokenType, Vocabulary, tokenize

__all__ = [
    # Evaluators
    "safe_evaluate",
    "evaluate_scientific",
    "format_display_value",
    # Function Parser
    "parse_function",
    "CompiledFunction",
    "FUNCTION_VOCABULARY",
    # Function table
    "FUNCTION_TABLE",
    "FunctionSpec",
    "CONSTANTS",
    "FACTORIAL_MAX_ARG",
    "factorial",
    "log_base",
    # Tokenizer
    "tokenize",
    "Token",
    "TokenType",
    "Vocabulary",
]
