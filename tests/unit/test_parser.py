"""
Тесты для Parser и Compiler

Проверяет:
1. Приоритеты и ассоциативность операторов
2. Разрешение функций в таблице и проверку арности
3. Синтаксические ошибки
4. Ограничение глубины вложенности
"""

import pytest

from mathcore.core.expression.compiler import MAX_TREE_DEPTH, compile_expression, compile_node
from mathcore.core.expression.function_parser import FUNCTION_VOCABULARY
from mathcore.core.expression.nodes import BinaryOp, Call, Number, UnaryOp, Variable
from mathcore.core.expression.parser import MAX_NESTING_DEPTH
from mathcore.errors import ParseError


def tree(expression: str):
    node, _ = compile_expression(expression, FUNCTION_VOCABULARY)
    return node


def value(expression: str, x: float = 0.0) -> float:
    _, evaluate = compile_expression(expression, FUNCTION_VOCABULARY)
    return evaluate(x)


# =============================================================================
# ДЕРЕВО
# =============================================================================


class TestTreeShape:
    """Форма дерева разбора"""

    def test_sum_is_left_associative(self) -> None:
        assert tree("1-2-3") == BinaryOp("-", BinaryOp("-", Number(1.0), Number(2.0)), Number(3.0))

    def test_unary_minus_binds_weaker_than_power(self) -> None:
        """-x^2 = -(x^2)"""
        assert tree("-x^2") == UnaryOp("-", BinaryOp("^", Variable("x"), Number(2.0)))

    def test_power_is_right_associative(self) -> None:
        assert tree("2^3^2") == BinaryOp("^", Number(2.0), BinaryOp("^", Number(3.0), Number(2.0)))

    def test_call_node(self) -> None:
        node = tree("sin(x)")
        assert isinstance(node, Call)
        assert node.name == "sin"
        assert node.args == (Variable("x"),)


# =============================================================================
# ВЫЧИСЛЕНИЕ
# =============================================================================


class TestEvaluation:
    """Семантика операторов"""

    def test_precedence(self) -> None:
        assert value("2+3*4") == 14.0

    def test_parentheses(self) -> None:
        assert value("(2+3)*4") == 20.0

    def test_power_chain(self) -> None:
        assert value("2^3^2") == 512.0

    def test_negative_exponent(self) -> None:
        assert value("2^-1") == 0.5

    def test_implicit_product_with_power(self) -> None:
        """2x^2 = 2*(x^2)"""
        assert value("2x^2", 3.0) == 18.0

    def test_remainder_sign_of_dividend(self) -> None:
        assert value("-7%3") == -1.0
        assert value("7%3") == 1.0

    def test_unary_plus(self) -> None:
        assert value("+x", 4.0) == 4.0

    def test_multi_argument_calls(self) -> None:
        assert value("log(8,2)") == pytest.approx(3.0)
        assert value("pow(2,5)") == 32.0
        assert value("max(1,x,3)", 7.0) == 7.0
        assert value("min(4)") == 4.0


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestSyntaxErrors:
    """Синтаксические ошибки поднимаются как ParseError"""

    @pytest.mark.parametrize("expression", ["2+", "(x", "x)", "*2", "sin()", "()", "2,3"])
    def test_invalid_syntax(self, expression: str) -> None:
        with pytest.raises(ParseError):
            compile_expression(expression, FUNCTION_VOCABULARY)

    def test_empty_expression(self) -> None:
        with pytest.raises(ParseError, match="empty"):
            compile_expression("", FUNCTION_VOCABULARY)

    def test_function_requires_parenthesis(self) -> None:
        with pytest.raises(ParseError, match='"sin" must be followed by'):
            compile_expression("sin x", FUNCTION_VOCABULARY)

    def test_arity_checked_at_parse_time(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            compile_expression("sin(x,2)", FUNCTION_VOCABULARY)
        assert exc_info.value.token == "sin"
        assert "expects 1 argument(s), got 2" in str(exc_info.value)

    def test_pow_needs_two_arguments(self) -> None:
        with pytest.raises(ParseError, match="pow"):
            compile_expression("pow(2)", FUNCTION_VOCABULARY)

    def test_log_accepts_at_most_two(self) -> None:
        with pytest.raises(ParseError, match="1 to 2 arguments"):
            compile_expression("log(1,2,3)", FUNCTION_VOCABULARY)

    def test_trailing_token_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            compile_expression("x)", FUNCTION_VOCABULARY)
        assert exc_info.value.position == 1


class TestDepthLimits:
    """Ограничения глубины вместо RecursionError"""

    def test_deep_parentheses_rejected(self) -> None:
        depth = MAX_NESTING_DEPTH + 5
        with pytest.raises(ParseError, match="nested deeper"):
            compile_expression("(" * depth + "x" + ")" * depth, FUNCTION_VOCABULARY)

    def test_moderate_nesting_accepted(self) -> None:
        assert value("(" * 20 + "x" + ")" * 20, 2.0) == 2.0

    def test_long_flat_chain_accepted(self) -> None:
        """Длинная цепочка a+b+...+z — не вложенность"""
        assert value("+".join(["x"] * (MAX_TREE_DEPTH + 50)), 1.0) == MAX_TREE_DEPTH + 50
        assert value("*".join(["2"] * 300)) == 2.0**300

    def test_mixed_chain_folds_left(self) -> None:
        assert value("10-2+3-1") == 10.0
        assert value("100/5*2%7") == 5.0

    def test_deep_tree_rejected(self) -> None:
        node = Variable("x")
        for _ in range(MAX_TREE_DEPTH + 10):
            node = UnaryOp("-", node)
        with pytest.raises(ParseError, match="too long"):
            compile_node(node)
