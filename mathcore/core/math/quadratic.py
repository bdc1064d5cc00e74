"""
Quadratic Solver — корни ax² + bx + c = 0 в замкнутой форме

ФОРМУЛЫ:
    D = b² - 4ac
    D > 0:  x = (-b ± √D) / 2a                 (REAL, два корня)
    D == 0: x = -b / 2a                        (SINGLE, кратный корень)
    D < 0:  x = -b/2a ± (√|D| / 2a)·i          (COMPLEX, строки)

    Вершина: h = -b / 2a, k = a·h² + b·h + c
    Вершинная форма: y = a(x - h)² + k
"""

import math
from typing import Final

from mathcore.core.domain.quadratic import QuadraticResult, RootType, Vertex
from mathcore.core.math.numerical_safeguards import (
    is_valid_float,
    normalize_negative_zero,
    to_finite_float,
)
from mathcore.errors import ValidationError

# Значащие цифры в строковом представлении (комплексные корни, вершинная форма)
QUADRATIC_SIGNIFICANT_DIGITS: Final[int] = 4


def format_number(value: float, digits: int = QUADRATIC_SIGNIFICANT_DIGITS) -> str:
    """
    Короткая запись числа с digits значащими цифрами.

    Examples:
        >>> format_number(1.5)
        '1.5'
        >>> format_number(-0.0)
        '0'
        >>> format_number(1 / 3)
        '0.3333'
    """
    return f"{normalize_negative_zero(value):.{digits}g}"


def format_complex(real: float, imag: float) -> tuple[str, str]:
    """Пара сопряжённых корней: ("re + imi", "re - imi")."""
    re = format_number(real)
    im = format_number(abs(imag))
    return (f"{re} + {im}i", f"{re} - {im}i")


def vertex_form(a: float, h: float, k: float) -> str:
    """
    Запись y = a(x - h)² + k.

    - коэффициент 1 опускается, -1 записывается как "-"
    - h == 0 → "x²", иначе "(x - h)²" / "(x + |h|)²"
    - k == 0 опускается, иначе " + k" / " - |k|"

    Examples:
        >>> vertex_form(1, 1.5, -0.25)
        'y = (x - 1.5)² - 0.25'
        >>> vertex_form(-2, 0, 3)
        'y = -2x² + 3'
    """
    if a == 1:
        a_str = ""
    elif a == -1:
        a_str = "-"
    else:
        a_str = format_number(a)

    if h == 0:
        h_str = "x"
    else:
        h_str = f"(x {'-' if h > 0 else '+'} {format_number(abs(h))})"

    if k == 0:
        k_str = ""
    elif k > 0:
        k_str = f" + {format_number(k)}"
    else:
        k_str = f" - {format_number(abs(k))}"

    return f"y = {a_str}{h_str}²{k_str}"


def solve_quadratic(a: float, b: float, c: float) -> QuadraticResult:
    """
    Решение квадратного уравнения.

    Args:
        a: Коэффициент при x² (≠ 0)
        b: Коэффициент при x
        c: Свободный член

    Returns:
        QuadraticResult

    Raises:
        ValidationError: a == 0, нечисловой или NaN/Inf коэффициент,
            переполнение промежуточных значений

    Examples:
        >>> solve_quadratic(1, -3, 2).roots
        [2.0, 1.0]
    """
    a = to_finite_float(a, "a")
    b = to_finite_float(b, "b")
    c = to_finite_float(c, "c")

    if a == 0:
        raise ValidationError("Coefficient 'a' cannot be zero for a quadratic equation.")

    discriminant = b * b - 4 * a * c

    h = normalize_negative_zero(-b / (2 * a))
    k = normalize_negative_zero(a * h * h + b * h + c)

    if discriminant > 0:
        root = math.sqrt(discriminant)
        roots = [(-b + root) / (2 * a), (-b - root) / (2 * a)]
        root_type = RootType.REAL
    elif discriminant == 0:
        roots = [h]
        root_type = RootType.SINGLE
    else:
        imag_part = math.sqrt(-discriminant) / (2 * a)
        roots = [h, imag_part]
        root_type = RootType.COMPLEX

    if not all(is_valid_float(v) for v in (discriminant, h, k, *roots)):
        raise ValidationError("Coefficients are too large: the solution overflows floating point range.")

    if root_type == RootType.COMPLEX:
        roots = list(format_complex(*roots))

    return QuadraticResult(
        discriminant=discriminant,
        roots=roots,
        root_type=root_type,
        vertex=Vertex(x=h, y=k),
        axis_of_symmetry=h,
        vertex_form=vertex_form(a, h, k),
    )
