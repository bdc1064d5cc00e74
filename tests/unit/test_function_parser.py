"""
Тесты для Function Parser

Проверяет:
1. Компиляцию и вычисление формул одной переменной
2. None-сентинел для неопределённых точек
3. ParseError для неизвестных идентификаторов
4. Семантику таблицы функций (log, fact, round, sign, reciprocal trig)
"""

import logging
import math

import pytest

from mathcore.core.expression import parse_function
from mathcore.core.expression.function_parser import CompiledFunction, normalize_function_text
from mathcore.core.expression.functions import (
    FUNCTION_TABLE,
    factorial,
    log_base,
    reciprocal,
    round_half_up,
    sign,
)
from mathcore.errors import ParseError

# =============================================================================
# КОМПИЛЯЦИЯ
# =============================================================================


class TestParseFunction:
    """Базовые свойства parse_function"""

    def test_implicit_coefficient(self) -> None:
        assert parse_function("2x")(3) == 6.0

    def test_sin_at_zero(self) -> None:
        assert parse_function("sin(x)")(0) == 0.0

    def test_example_formula(self) -> None:
        f = parse_function("2x^2 * sin(x)")
        assert f(math.pi / 2) == pytest.approx(2 * (math.pi / 2) ** 2)

    def test_case_and_whitespace_ignored(self) -> None:
        assert parse_function(" 2 X + SIN( X ) ")(0) == 0.0

    def test_constants(self) -> None:
        assert parse_function("pi")(0) == pytest.approx(math.pi)
        assert parse_function("2pi x")(1) == pytest.approx(2 * math.pi)
        assert parse_function("e^x")(1) == pytest.approx(math.e)

    def test_product_of_brackets(self) -> None:
        assert parse_function("(x+1)(x-1)")(3) == 8.0

    def test_returns_compiled_function(self) -> None:
        f = parse_function("x^2")
        assert isinstance(f, CompiledFunction)
        assert f.source == "x^2"
        assert "x^2" in repr(f)

    def test_compiled_function_reusable(self) -> None:
        f = parse_function("x^2")
        assert [f(x) for x in (1, 2, 3)] == [1.0, 4.0, 9.0]

    def test_normalize_function_text(self) -> None:
        assert normalize_function_text(" Sin( X )\t") == "sin( x )"


class TestUnknownIdentifiers:
    """Идентификаторы вне словаря"""

    def test_foo_named_in_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_function("foo(x)")
        assert exc_info.value.token == "foo"
        assert "foo" in str(exc_info.value)

    @pytest.mark.parametrize("expression,run", [("pie(x)", "pie"), ("ee", "ee"), ("pix", "pix"), ("epi*x", "epi")])
    def test_glued_vocabulary_words_rejected(self, expression: str, run: str) -> None:
        """Последовательность из слов словаря без разделителя — не слово словаря"""
        with pytest.raises(ParseError) as exc_info:
            parse_function(expression)
        assert exc_info.value.token == run

    def test_misspelled_function_named_whole(self) -> None:
        """sine — неизвестный идентификатор, а не sin·e"""
        with pytest.raises(ParseError) as exc_info:
            parse_function("sine(x)")
        assert exc_info.value.token == "sine"
        assert "sine" in str(exc_info.value)

    def test_variable_prefix_allowed(self) -> None:
        assert parse_function("xsin(x)")(2) == pytest.approx(2 * math.sin(2))
        assert parse_function("xpi")(2) == pytest.approx(2 * math.pi)
        assert parse_function("pi x")(2) == pytest.approx(2 * math.pi)

    def test_builtin_names_rejected(self) -> None:
        """Нет доступа к builtins/глобальному scope"""
        for expression in ("__import__(x)", "eval(x)", "open(x)", "y"):
            with pytest.raises(ParseError):
                parse_function(expression)

    def test_empty_expression(self) -> None:
        with pytest.raises(ParseError, match="empty"):
            parse_function("   ")

    def test_non_string(self) -> None:
        with pytest.raises(ParseError):
            parse_function(42)

    def test_parse_error_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mathcore"):
            with pytest.raises(ParseError):
                parse_function("bar")
        assert any("bar" in record.getMessage() for record in caplog.records)


# =============================================================================
# НЕОПРЕДЕЛЁННЫЕ ТОЧКИ
# =============================================================================


class TestDomainFailures:
    """Ошибка в точке → None, а не исключение"""

    def test_sqrt_of_negative(self) -> None:
        assert parse_function("sqrt(x)")(-1) is None

    def test_division_by_zero(self) -> None:
        assert parse_function("1/x")(0) is None

    def test_log_of_zero(self) -> None:
        assert parse_function("ln(x)")(0) is None

    def test_overflow(self) -> None:
        assert parse_function("exp(x)")(1000) is None
        assert parse_function("10^x")(400) is None

    def test_fractional_power_of_negative(self) -> None:
        assert parse_function("x^0.5")(-4) is None

    def test_neighbouring_points_still_defined(self) -> None:
        f = parse_function("1/x")
        assert f(0) is None
        assert f(2) == 0.5


# =============================================================================
# ТАБЛИЦА ФУНКЦИЙ
# =============================================================================


class TestFunctionTable:
    """Семантика функций таблицы"""

    def test_full_vocabulary_present(self) -> None:
        names = (
            "sin cos tan asin acos atan sinh cosh tanh asinh acosh atanh sqrt "
            "cbrt abs sign ceil floor round trunc exp pow min max log log10 log2 "
            "ln sec csc cot asec acsc acot sech csch coth cosec fact factorial"
        ).split()
        assert set(names) <= set(FUNCTION_TABLE)

    def test_log_with_base(self) -> None:
        assert parse_function("log(8, 2)")(0) == pytest.approx(3.0)

    def test_log_without_base_is_natural(self) -> None:
        assert parse_function("log(x)")(math.e) == pytest.approx(1.0)

    def test_log10_and_log2(self) -> None:
        assert parse_function("log10(x)")(1000) == pytest.approx(3.0)
        assert parse_function("log2(x)")(8) == pytest.approx(3.0)

    def test_invalid_log_base(self) -> None:
        assert math.isnan(log_base(8, 1))
        assert math.isnan(log_base(8, -2))
        assert parse_function("log(x, 1)")(8) is None

    def test_factorial(self) -> None:
        assert factorial(5) == 120.0
        assert factorial(0) == 1.0
        assert parse_function("fact(x)")(4) == 24.0
        assert parse_function("factorial(3)")(0) == 6.0

    def test_factorial_domain(self) -> None:
        assert math.isnan(factorial(-1))
        assert math.isnan(factorial(2.5))
        assert factorial(171) == math.inf
        assert parse_function("fact(x)")(2.5) is None

    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3.0
        assert round_half_up(-2.5) == -2.0
        assert parse_function("round(x)")(0.5) == 1.0

    def test_sign(self) -> None:
        assert sign(0.0) == 0.0
        assert sign(-3.0) == -1.0
        assert sign(7.0) == 1.0

    def test_reciprocal_trig(self) -> None:
        assert parse_function("sec(x)")(0) == pytest.approx(1.0)
        assert parse_function("cosec(x)")(math.pi / 2) == pytest.approx(1.0)
        assert parse_function("cot(x)")(math.pi / 4) == pytest.approx(1.0)
        assert parse_function("csc(x)")(0) is None

    def test_reciprocal_of_zero(self) -> None:
        assert reciprocal(0.0) == math.inf
        assert reciprocal(-0.0) == -math.inf

    def test_rounding_functions_return_float(self) -> None:
        assert parse_function("floor(x)")(2.7) == 2.0
        assert parse_function("ceil(x)")(2.1) == 3.0
        assert parse_function("trunc(x)")(-2.7) == -2.0

    def test_cbrt_of_negative(self) -> None:
        assert parse_function("cbrt(x)")(-8) == pytest.approx(-2.0)
