"""
Тесты для Expression Evaluator

Проверяет:
1. safe_evaluate: арифметика, allow-list, None при любой ошибке
2. evaluate_scientific: функции, константы, градусы/радианы
3. format_display_value: округление для дисплея
"""

import math

import pytest

from mathcore.core.expression import evaluate_scientific, format_display_value, safe_evaluate

# =============================================================================
# SAFE EVALUATE
# =============================================================================


class TestSafeEvaluate:
    """Арифметический режим"""

    def test_simple_sum(self) -> None:
        assert safe_evaluate("2+2") == 4.0

    def test_precedence_and_whitespace(self) -> None:
        assert safe_evaluate(" 2 + 2 * 3 ") == 8.0

    def test_parentheses_and_decimals(self) -> None:
        assert safe_evaluate("(1.5 + 2.5) / 2") == 2.0

    def test_remainder(self) -> None:
        assert safe_evaluate("10 % 4") == 2.0

    def test_unary_minus(self) -> None:
        assert safe_evaluate("-3 * -2") == 6.0

    def test_long_sum(self) -> None:
        assert safe_evaluate("+".join(["1"] * 300)) == 300.0

    @pytest.mark.parametrize("expression", ["2+", "", "()", "2 3", "(2+3"])
    def test_incomplete_expression_is_none(self, expression: str) -> None:
        """Ошибка синтаксиса → None, исключение не выходит наружу"""
        assert safe_evaluate(expression) is None

    def test_division_by_zero_is_none(self) -> None:
        assert safe_evaluate("1/0") is None
        assert safe_evaluate("5 % 0") is None

    @pytest.mark.parametrize(
        "expression",
        ["alert(1)", "__import__('os')", "x", "2^3", "sin(0)", "1e5"],
    )
    def test_disallowed_characters_rejected(self, expression: str) -> None:
        """Символы вне allow-list → None до разбора"""
        assert safe_evaluate(expression) is None

    def test_double_star_power(self) -> None:
        """'**' состоит из разрешённых символов и означает степень"""
        assert safe_evaluate("2**3") == 8.0

    def test_no_implicit_multiplication(self) -> None:
        assert safe_evaluate("2(3)") is None

    def test_non_string_is_none(self) -> None:
        assert safe_evaluate(None) is None


# =============================================================================
# SCIENTIFIC
# =============================================================================


class TestEvaluateScientific:
    """Научный режим"""

    def test_sin_degrees(self) -> None:
        assert evaluate_scientific("sin(90)", True) == pytest.approx(1.0)

    def test_cos_degrees(self) -> None:
        assert evaluate_scientific("cos(60)") == pytest.approx(0.5)

    def test_sin_radians(self) -> None:
        assert evaluate_scientific("sin(π/2)", False) == pytest.approx(1.0)

    def test_power(self) -> None:
        assert evaluate_scientific("2^10", False) == 1024.0

    def test_log_is_base_ten(self) -> None:
        assert evaluate_scientific("log(1000)") == pytest.approx(3.0)

    def test_ln_is_natural(self) -> None:
        assert evaluate_scientific("ln(e)") == pytest.approx(1.0)

    def test_sqrt(self) -> None:
        assert evaluate_scientific("sqrt(16) + 1") == 5.0

    def test_pi_symbol(self) -> None:
        assert evaluate_scientific("2*π") == pytest.approx(2 * math.pi)

    @pytest.mark.parametrize("expression", ["sqrt(-1)", "ln(0)", "log(-5)", "1/0", "10^400"])
    def test_undefined_results_are_none(self, expression: str) -> None:
        assert evaluate_scientific(expression) is None

    @pytest.mark.parametrize("expression", ["alert(1)", "exp(1)", "pi", "asin(1)", "x"])
    def test_identifiers_outside_fixed_set(self, expression: str) -> None:
        assert evaluate_scientific(expression) is None

    @pytest.mark.parametrize("expression", ["sin(90", "SIN(90)", "2π", "sin 90", "log(8,2)"])
    def test_malformed_or_disallowed(self, expression: str) -> None:
        """Неполные выражения, верхний регистр, неявное умножение, запятая"""
        assert evaluate_scientific(expression) is None


# =============================================================================
# DISPLAY
# =============================================================================


class TestFormatDisplayValue:
    def test_rounding_noise_removed(self) -> None:
        assert format_display_value(0.1 + 0.2) == 0.3

    def test_custom_digits(self) -> None:
        assert format_display_value(1 / 3, 3) == 0.333

    def test_negative_zero(self) -> None:
        assert str(format_display_value(-0.0)) == "0.0"
