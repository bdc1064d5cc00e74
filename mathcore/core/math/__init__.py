"""
Core math modules для mathcore

Численные алгоритмы: линейная алгебра, квадратные уравнения,
разложение на простые множители, общие epsilon-защиты.
"""

# Numerical Safeguards
from mathcore.core.math.numerical_safeguards import (
    EPS_EIGEN,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_SINGULAR,
    MAX_SAFE_INTEGER,
    finite_or_none,
    is_close,
    is_valid_float,
    is_zero,
    normalize_negative_zero,
    to_finite_float,
    to_integer,
)

# Matrix Algebra
from mathcore.core.math.matrix import (
    Matrix,
    Vector,
    adjoint,
    cofactor_matrix,
    determinant,
    eigen_2x2,
    identity_matrix,
    matrix_add,
    matrix_divide,
    matrix_inverse,
    matrix_multiply,
    matrix_order,
    matrix_subtract,
    minor_matrix,
    solve_linear_system,
    transpose,
)

# Quadratic Solver
from mathcore.core.math.quadratic import (
    QUADRATIC_SIGNIFICANT_DIGITS,
    format_complex,
    format_number,
    solve_quadratic,
    vertex_form,
)

# Prime Factorizer
from mathcore.core.math.primes import (
    all_divisors,
    divisor_pairs,
    exponential_form,
    factorize,
    group_prime_powers,
    prime_factorize,
)

__all__ = [
    # Numerical Safeguards: constants
    "EPS_EIGEN",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_SINGULAR",
    "MAX_SAFE_INTEGER",
    # Numerical Safeguards: functions
    "finite_or_none",
    "is_close",
    "is_valid_float",
    "is_zero",
    "normalize_negative_zero",
    "to_finite_float",
    "to_integer",
    # Matrix Algebra: types
    "Matrix",
    "Vector",
    # Matrix Algebra: functions
    "adjoint",
    "cofactor_matrix",
    "determinant",
    "eigen_2x2",
    "identity_matrix",
    "matrix_add",
    "matrix_divide",
    "matrix_inverse",
    "matrix_multiply",
    "matrix_order",
    "matrix_subtract",
    "minor_matrix",
    "solve_linear_system",
    "transpose",
    # Quadratic Solver
    "QUADRATIC_SIGNIFICANT_DIGITS",
    "format_complex",
    "format_number",
    "solve_quadratic",
    "vertex_form",
    # Prime Factorizer
    "all_divisors",
    "divisor_pairs",
    "exponential_form",
    "factorize",
    "group_prime_powers",
    "prime_factorize",
]
