"""
Matrix Algebra — линейная алгебра над list[list[float]]

Операции:
- matrix_add / matrix_subtract / matrix_multiply / transpose
- determinant (разложение Лапласа по первой строке)
- minor_matrix / cofactor_matrix / adjoint
- matrix_inverse (Gauss–Jordan с частичным выбором ведущего элемента)
- matrix_divide (A × B⁻¹) / solve_linear_system (x = A⁻¹·b)
- eigen_2x2 (через след и определитель)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение предусловия на размерности → OrderMismatch (никаких частичных
   или усечённых результатов)
2. |det| < EPS_SINGULAR → SingularMatrixError при обращении
3. Входные матрицы не изменяются; каждая операция возвращает новую матрицу

Матрицы малых порядков (UI ограничивает ~8×8), поэтому рекурсивный
определитель допустим.
"""

import math
from typing import Final

from mathcore.core.domain.eigen import COMPLEX_EIGENVECTOR_PLACEHOLDER, EigenResult
from mathcore.core.math.numerical_safeguards import EPS_EIGEN, EPS_SINGULAR
from mathcore.errors import OrderMismatch, SingularMatrixError, ValidationError

Matrix = list[list[float]]
Vector = list[float]

# Точность форматирования комплексных собственных значений
EIGEN_COMPLEX_DECIMALS: Final[int] = 4


# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================


def matrix_order(m: Matrix) -> tuple[int, int]:
    """
    Порядок матрицы (rows, cols).

    Args:
        m: Матрица (пустая [] имеет порядок (0, 0); матрицы r×0 не допускаются)

    Returns:
        (rows, cols)

    Raises:
        ValidationError: Пустые строки, строки разной длины или нечисловые элементы
    """
    if not isinstance(m, (list, tuple)):
        raise ValidationError(f"Matrix must be a list of rows, got {type(m).__name__}")
    if len(m) == 0:
        return (0, 0)

    cols = None
    for r, row in enumerate(m):
        if not isinstance(row, (list, tuple)):
            raise ValidationError(f"Matrix row {r} must be a list, got {type(row).__name__}")
        if cols is None:
            if len(row) == 0:
                raise ValidationError("Matrix rows must not be empty")
            cols = len(row)
        elif len(row) != cols:
            raise ValidationError(
                f"Matrix rows must have equal length: row 0 has {cols}, row {r} has {len(row)}"
            )
        for c, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"Matrix element [{r}][{c}] must be a number, got {value!r}")

    return (len(m), cols)


def _fmt(order: tuple[int, int]) -> str:
    return f"{order[0]}x{order[1]}"


def _require_square(m: Matrix, purpose: str) -> int:
    rows, cols = matrix_order(m)
    if rows == 0 or rows != cols:
        raise OrderMismatch(f"Wrong Order: Matrix must be square {purpose} (got {_fmt((rows, cols))}).")
    return rows


def identity_matrix(n: int) -> Matrix:
    """Единичная матрица n×n."""
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ И ПРОИЗВЕДЕНИЕ
# =============================================================================


def _require_same_order(a: Matrix, b: Matrix, operation: str) -> None:
    order_a = matrix_order(a)
    order_b = matrix_order(b)
    if order_a != order_b:
        raise OrderMismatch(
            f"Wrong Order: Matrices must have the same dimensions for {operation} "
            f"({_fmt(order_a)} vs {_fmt(order_b)})."
        )


def matrix_add(a: Matrix, b: Matrix) -> Matrix:
    """Поэлементная сумма A + B (порядки должны совпадать)."""
    _require_same_order(a, b, "addition")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def matrix_subtract(a: Matrix, b: Matrix) -> Matrix:
    """Поэлементная разность A - B (порядки должны совпадать)."""
    _require_same_order(a, b, "subtraction")
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Произведение A × B, O(n³).

    Raises:
        OrderMismatch: cols(A) != rows(B)
    """
    rows_a, cols_a = matrix_order(a)
    rows_b, cols_b = matrix_order(b)
    if cols_a != rows_b:
        raise OrderMismatch(
            "Wrong Order: Columns of Matrix A must equal rows of Matrix B "
            f"({_fmt((rows_a, cols_a))} x {_fmt((rows_b, cols_b))})."
        )

    result = [[0.0] * cols_b for _ in range(rows_a)]
    for i in range(rows_a):
        for j in range(cols_b):
            total = 0.0
            for k in range(rows_b):
                total += a[i][k] * b[k][j]
            result[i][j] = total
    return result


def transpose(m: Matrix) -> Matrix:
    """Транспонирование; пустая матрица → []."""
    rows, cols = matrix_order(m)
    if rows == 0:
        return []
    return [[m[r][c] for r in range(rows)] for c in range(cols)]


# =============================================================================
# ОПРЕДЕЛИТЕЛЬ, МИНОРЫ, АЛГЕБРАИЧЕСКИЕ ДОПОЛНЕНИЯ
# =============================================================================


def _submatrix(m: Matrix, row: int, col: int) -> Matrix:
    """Матрица без строки row и столбца col."""
    return [
        [value for j, value in enumerate(line) if j != col]
        for i, line in enumerate(m)
        if i != row
    ]


def _det(m: Matrix) -> float:
    n = len(m)
    if n == 1:
        return m[0][0]
    if n == 2:
        return m[0][0] * m[1][1] - m[0][1] * m[1][0]

    total = 0.0
    for c in range(n):
        sign = -1.0 if c % 2 else 1.0
        total += sign * m[0][c] * _det(_submatrix(m, 0, c))
    return total


def determinant(m: Matrix) -> float:
    """
    Определитель разложением Лапласа по первой строке.

    Базовые случаи 1×1 и 2×2 вычисляются явно.

    Raises:
        OrderMismatch: Матрица не квадратная или пустая

    Examples:
        >>> determinant([[1, 2], [3, 4]])
        -2
    """
    _require_square(m, "for determinant calculation")
    return _det(m)


def minor_matrix(m: Matrix) -> Matrix:
    """Матрица миноров: M[r][c] = det(m без строки r и столбца c)."""
    n = _require_square(m, "to find its minor matrix")
    if n == 1:
        # Минор 1×1: определитель пустой матрицы
        return [[1.0]]
    return [[_det(_submatrix(m, r, c)) for c in range(n)] for r in range(n)]


def cofactor_matrix(m: Matrix) -> Matrix:
    """Матрица алгебраических дополнений: C[r][c] = (-1)^(r+c) · M[r][c]."""
    _require_square(m, "to find its cofactor matrix")
    minors = minor_matrix(m)
    return [
        [(-value if (r + c) % 2 else value) for c, value in enumerate(row)]
        for r, row in enumerate(minors)
    ]


def adjoint(m: Matrix) -> Matrix:
    """Присоединённая матрица: транспонированная матрица дополнений."""
    return transpose(cofactor_matrix(m))


# =============================================================================
# ОБРАЩЕНИЕ И СИСТЕМЫ
# =============================================================================


def matrix_inverse(m: Matrix) -> Matrix:
    """
    Обратная матрица методом Gauss–Jordan.

    Алгоритм:
    1. Проверка вырожденности: |det| < EPS_SINGULAR → SingularMatrixError
    2. Расширенная матрица [M | I]
    3. Для каждого столбца i: выбор строки с максимальным |a[k][i]|
       (частичный pivoting), перестановка, нормализация ведущей строки,
       исключение столбца i из всех остальных строк
    4. Правая половина — M⁻¹

    Raises:
        OrderMismatch: Матрица не квадратная
        SingularMatrixError: Матрица вырождена
    """
    n = _require_square(m, "for inversion")
    det = _det(m)
    if abs(det) < EPS_SINGULAR:
        raise SingularMatrixError(
            f"Matrix is singular and cannot be inverted (determinant is zero, |det|={abs(det):.3e})."
        )

    augmented = [
        [float(value) for value in row] + [1.0 if i == j else 0.0 for j in range(n)]
        for i, row in enumerate(m)
    ]
    width = 2 * n

    for i in range(n):
        pivot_row = max(range(i, n), key=lambda k: abs(augmented[k][i]))
        if pivot_row != i:
            augmented[i], augmented[pivot_row] = augmented[pivot_row], augmented[i]

        pivot = augmented[i][i]
        for j in range(i, width):
            augmented[i][j] /= pivot

        for k in range(n):
            if k == i:
                continue
            factor = augmented[k][i]
            if factor == 0.0:
                continue
            for j in range(i, width):
                augmented[k][j] -= factor * augmented[i][j]

    return [row[n:] for row in augmented]


def matrix_divide(a: Matrix, b: Matrix) -> Matrix:
    """
    "Деление" матриц: A × B⁻¹.

    Raises:
        OrderMismatch: B не квадратная или cols(A) != rows(B⁻¹)
        SingularMatrixError: B вырождена
    """
    matrix_order(a)
    return matrix_multiply(a, matrix_inverse(b))


def solve_linear_system(a: Matrix, b: Vector) -> Vector:
    """
    Решение системы Ax = b как x = A⁻¹·b.

    Args:
        a: Квадратная матрица коэффициентов
        b: Вектор правой части (len(b) == rows(A))

    Returns:
        Вектор решения x

    Raises:
        OrderMismatch: A не квадратная или rows(A) != len(b)
        SingularMatrixError: A вырождена
    """
    n = _require_square(a, "(coefficient matrix A)")
    if not isinstance(b, (list, tuple)):
        raise ValidationError(f"Vector b must be a list, got {type(b).__name__}")
    if len(b) != n:
        raise OrderMismatch(
            f"Wrong Order: Rows of matrix A must match size of vector B ({n} vs {len(b)})."
        )

    column = [[value] for value in b]
    matrix_order(column)
    solution = matrix_multiply(matrix_inverse(a), column)
    return [row[0] for row in solution]


# =============================================================================
# СОБСТВЕННЫЕ ЗНАЧЕНИЯ 2×2
# =============================================================================


def _eigenvector(a: float, b: float, c: float, d: float, lam: float) -> list[float]:
    # (A - λI)v = 0: сначала нижняя строка (c), затем верхняя (b)
    if abs(c) > EPS_EIGEN:
        return [-(d - lam), c]
    if abs(b) > EPS_EIGEN:
        return [b, -(a - lam)]
    return [1.0, 0.0] if abs(a - lam) < EPS_EIGEN else [0.0, 1.0]


def _normalize(v: list[float]) -> list[float]:
    magnitude = math.hypot(v[0], v[1])
    if magnitude < EPS_EIGEN:
        return [float(v[0]), float(v[1])]
    return [v[0] / magnitude, v[1] / magnitude]


def eigen_2x2(m: Matrix) -> EigenResult:
    """
    Собственные значения и векторы матрицы 2×2.

    Характеристический многочлен: λ² - tr·λ + det = 0,
    дискриминант D = tr² - 4·det.

    - D < 0: комплексно-сопряжённая пара "re ± imi" (4 знака),
      векторы не вычисляются
    - D ≥ 0: λ1 = (tr + √D)/2, λ2 = (tr - √D)/2, векторы из (A - λI)v = 0,
      нормированные к единичной длине

    Ограничение: для кратного собственного значения (D == 0) оба вектора
    строятся по одному правилу и совпадают.

    Raises:
        OrderMismatch: Матрица не 2×2
    """
    order = matrix_order(m)
    if order != (2, 2):
        raise OrderMismatch(
            f"Wrong Order: Eigenvalue/vector calculation is only for 2x2 matrices (got {_fmt(order)})."
        )

    (a, b), (c, d) = m
    trace = a + d
    det = a * d - b * c
    discriminant = trace * trace - 4 * det

    if discriminant < 0:
        real_part = trace / 2
        imag_part = math.sqrt(-discriminant) / 2
        re = f"{real_part + 0.0:.{EIGEN_COMPLEX_DECIMALS}f}"
        im = f"{imag_part:.{EIGEN_COMPLEX_DECIMALS}f}"
        return EigenResult(
            eigenvalues=(f"{re} + {im}i", f"{re} - {im}i"),
            eigenvectors=(COMPLEX_EIGENVECTOR_PLACEHOLDER, COMPLEX_EIGENVECTOR_PLACEHOLDER),
        )

    root = math.sqrt(discriminant)
    lambda1 = (trace + root) / 2
    lambda2 = (trace - root) / 2

    return EigenResult(
        eigenvalues=(lambda1, lambda2),
        eigenvectors=(
            _normalize(_eigenvector(a, b, c, d, lambda1)),
            _normalize(_eigenvector(a, b, c, d, lambda2)),
        ),
    )
